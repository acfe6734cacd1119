from .loader import get_available_langs, load_messages, t

__all__ = ["get_available_langs", "load_messages", "t"]
