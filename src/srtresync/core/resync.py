"""Document-level timestamp resynchronization."""

from dataclasses import dataclass

import structlog

from srtresync.core.timestamp import Timestamp
from srtresync.formats.srt import TIMECODE_LINE_PATTERN

logger = structlog.get_logger()


@dataclass
class ResyncResult:
    """Resynced document text with counters describing the rewrite."""

    text: str
    lines: int
    shifted_lines: int
    clamped: int


def parse_offset(offset: str) -> float:
    """Convert an offset string such as ``"+1.20"`` to seconds.

    Args:
        offset: Signed decimal seconds, already validated by the caller

    Returns:
        Offset in seconds

    Raises:
        ValueError: If offset is not a number
    """
    return float(offset)


def _shift(text: str, offset_seconds: float) -> tuple[str, bool]:
    """Shift one timestamp, reporting whether it hit the zero floor."""
    shifted, clamped = Timestamp.parse(text).shift_clamped(offset_seconds)
    return shifted.format(), clamped


def resync(document_text: str, offset_seconds: float) -> ResyncResult:
    """Shift every timecode line of a document by ``offset_seconds``.

    Lines are split on ``\\n`` only. A line holding a
    ``HH:MM:SS,mmm --> HH:MM:SS,mmm`` range is replaced by the shifted
    range alone: the first match wins and any other text on that line is
    dropped. Every other line is kept verbatim, so the line count never
    changes.

    Args:
        document_text: Full SRT document text
        offset_seconds: Seconds to add to every timestamp

    Returns:
        ResyncResult with the rewritten text and counters
    """
    lines = document_text.split("\n")
    shifted_lines = 0
    clamped = 0

    resynced_lines = []
    for line in lines:
        match = TIMECODE_LINE_PATTERN.search(line)
        if match is None:
            resynced_lines.append(line)
            continue

        start, start_clamped = _shift(match.group(1), offset_seconds)
        end, end_clamped = _shift(match.group(2), offset_seconds)
        resynced_lines.append(f"{start} --> {end}")
        shifted_lines += 1
        clamped += start_clamped + end_clamped

    if clamped:
        logger.debug(
            "timestamps_clamped", count=clamped, offset_seconds=offset_seconds
        )

    return ResyncResult(
        text="\n".join(resynced_lines),
        lines=len(lines),
        shifted_lines=shifted_lines,
        clamped=clamped,
    )


def resync_document(document_text: str, offset_seconds: float) -> str:
    """Return ``document_text`` with every timecode line shifted.

    See :func:`resync` for the line rules.
    """
    return resync(document_text, offset_seconds).text
