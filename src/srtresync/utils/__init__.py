"""Utility modules."""

from srtresync.utils.config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
