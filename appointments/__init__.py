"""Appointment scheduling for a single-resource service business."""

__version__ = "0.1.0"
