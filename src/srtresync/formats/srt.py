"""SRT file boundary helpers: timecode pattern, naming and decoding."""

import re

TIMECODE_LINE_PATTERN = re.compile(
    r"(\d{2}:\d{2}:\d{2},\d{3}) --> (\d{2}:\d{2}:\d{2},\d{3})",
    re.ASCII,
)

SRT_SUFFIX = ".srt"
RESYNCED_SUFFIX = "-resynced.srt"


def resynced_filename(filename: str) -> str:
    """Build the download name for a resynced file.

    Args:
        filename: Name of the uploaded file, e.g. ``"movie.srt"``

    Returns:
        ``"movie-resynced.srt"``; names without a trailing ``.srt`` are
        returned unchanged
    """
    if filename.endswith(SRT_SUFFIX):
        return filename[: -len(SRT_SUFFIX)] + RESYNCED_SUFFIX
    return filename


def decode_srt(data: bytes) -> str:
    """Decode uploaded SRT bytes as UTF-8 text.

    A leading byte order mark is dropped and undecodable bytes are
    replaced with U+FFFD rather than rejected.
    """
    return data.decode("utf-8-sig", errors="replace")
