"""
Message catalogue.

File format, one message per line:

    en:days.weekdays.0 | "Sunday"

Lines starting with "#" are comments.
"""

import re
from pathlib import Path
from typing import Dict, Set

from ..config import settings

MESSAGES: Dict[str, Dict[str, str]] = {}
AVAILABLE_LANGS: Set[str] = set()

DEFAULT_LANG = settings.default_locale
MESSAGES_PATH = Path(__file__).resolve().parent / "messages.txt"

LINE_RE = re.compile(r'^(\w+):([^|]+)\|\s*"(.*)"$')


def load_messages(path: str | Path = MESSAGES_PATH):
    MESSAGES.clear()
    AVAILABLE_LANGS.clear()

    path = Path(path)
    if not path.exists():
        raise RuntimeError(f"messages file not found: {path}")

    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        m = LINE_RE.match(line)
        if not m:
            continue

        lang, key, text = m.groups()
        MESSAGES.setdefault(lang, {})[key.strip()] = text.strip()
        AVAILABLE_LANGS.add(lang)


def t(key: str, lang: str | None = None) -> str:
    """Translate key; falls back to the default language, then to the key itself."""
    if not MESSAGES:
        load_messages()

    if not lang:
        lang = DEFAULT_LANG

    return (
        MESSAGES.get(lang, {}).get(key)
        or MESSAGES.get(DEFAULT_LANG, {}).get(key)
        or key
    )


def get_available_langs() -> list[str]:
    if not MESSAGES:
        load_messages()
    return sorted(AVAILABLE_LANGS)
