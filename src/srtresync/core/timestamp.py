"""SRT timestamp parsing, formatting and shifting."""

import re
from dataclasses import dataclass

TIMESTAMP_PATTERN = re.compile(r"(\d{2}):(\d{2}):(\d{2}),(\d{3})", re.ASCII)

_MS_PER_HOUR = 3_600_000
_MS_PER_MINUTE = 60_000
_MS_PER_SECOND = 1000


@dataclass(frozen=True)
class Timestamp:
    """Point on the playback timeline, in whole milliseconds."""

    milliseconds: int

    def __post_init__(self):
        """Validate timestamp constraints."""
        if self.milliseconds < 0:
            raise ValueError(
                f"Timestamp cannot be negative, got {self.milliseconds} ms"
            )

    @classmethod
    def parse(cls, text: str) -> "Timestamp":
        """Parse an ``HH:MM:SS,mmm`` string.

        Args:
            text: Timestamp text, already matched by the caller

        Returns:
            Timestamp holding the total milliseconds

        Raises:
            ValueError: If text does not have the ``HH:MM:SS,mmm`` shape
        """
        match = TIMESTAMP_PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(
                f"Invalid timestamp '{text}', expected 'HH:MM:SS,mmm'"
            )
        hours, minutes, seconds, millis = (int(group) for group in match.groups())
        return cls(
            hours * _MS_PER_HOUR
            + minutes * _MS_PER_MINUTE
            + seconds * _MS_PER_SECOND
            + millis
        )

    def shift_clamped(self, offset_seconds: float) -> tuple["Timestamp", bool]:
        """Move by ``offset_seconds`` and report whether the floor was hit.

        Sub-millisecond results are truncated and anything before the
        start of the timeline collapses to zero.

        Returns:
            Tuple of the shifted timestamp and whether it was clamped
        """
        # Round away binary noise such as 1.005 * 1000 == 1004.9999999999999
        total = self.milliseconds + round(offset_seconds * 1000, 6)
        if total < 0:
            return Timestamp(0), True
        return Timestamp(int(total)), False

    def shift(self, offset_seconds: float) -> "Timestamp":
        """Return a new timestamp moved by ``offset_seconds``, floored at zero."""
        return self.shift_clamped(offset_seconds)[0]

    def format(self) -> str:
        """Render as ``HH:MM:SS,mmm`` with fixed zero padding."""
        hours = self.milliseconds // _MS_PER_HOUR
        minutes = (self.milliseconds % _MS_PER_HOUR) // _MS_PER_MINUTE
        seconds = (self.milliseconds % _MS_PER_MINUTE) // _MS_PER_SECOND
        millis = self.milliseconds % _MS_PER_SECOND
        return f"{hours:02d}:{minutes:02d}:{seconds:02d},{millis:03d}"

    def __str__(self) -> str:
        return self.format()


def shift_timestamp(timestamp: str, offset_seconds: float) -> str:
    """Shift an ``HH:MM:SS,mmm`` timestamp by a signed number of seconds.

    Args:
        timestamp: Timestamp text, e.g. ``"01:02:03,400"``
        offset_seconds: Seconds to add, negative to move earlier

    Returns:
        Shifted timestamp text, clamped at ``"00:00:00,000"``
    """
    return Timestamp.parse(timestamp).shift(offset_seconds).format()
