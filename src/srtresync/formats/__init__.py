"""Subtitle format handlers."""

from srtresync.formats.srt import (
    RESYNCED_SUFFIX,
    SRT_SUFFIX,
    TIMECODE_LINE_PATTERN,
    decode_srt,
    resynced_filename,
)

__all__ = [
    "RESYNCED_SUFFIX",
    "SRT_SUFFIX",
    "TIMECODE_LINE_PATTERN",
    "decode_srt",
    "resynced_filename",
]
