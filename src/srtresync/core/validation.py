"""Input validation for offsets and uploaded SRT files."""

import math
import re

from srtresync.formats.srt import SRT_SUFFIX

OFFSET_PATTERN = re.compile(r"[+-][0-9]+\.?[0-9]*")


class ValidationError(Exception):
    """Base error for rejected user input."""

    code = "invalid_input"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EmptyOffsetError(ValidationError):
    """Raised when no offset was given."""

    code = "empty_offset"

    def __init__(self) -> None:
        super().__init__("Offset is required.")


class OffsetFormatError(ValidationError):
    """Raised when the offset is not a signed decimal number."""

    code = "invalid_offset_format"

    def __init__(self) -> None:
        super().__init__("Offset must be a number, starting with '+' or '-'.")


class OffsetRangeError(ValidationError):
    """Raised when the offset exceeds the allowed magnitude."""

    code = "offset_out_of_range"

    def __init__(self, max_offset_seconds: float) -> None:
        bound = f"{max_offset_seconds:g}"
        super().__init__(f"Offset must be between -{bound} and +{bound} seconds.")


class FileTypeError(ValidationError):
    """Raised when the uploaded file is not an .srt file."""

    code = "invalid_file_type"

    def __init__(self) -> None:
        super().__init__("Please upload a valid .srt file.")


class FileSizeError(ValidationError):
    """Raised when the uploaded file is larger than allowed."""

    code = "file_too_large"

    def __init__(self, max_bytes: int) -> None:
        super().__init__(f"File size must be less than {_format_size(max_bytes)}.")


class EmptyFileError(ValidationError):
    """Raised when the uploaded file has no content."""

    code = "empty_file"

    def __init__(self) -> None:
        super().__init__("File content is empty.")


def _format_size(num_bytes: int) -> str:
    megabytes = num_bytes / (1024 * 1024)
    if megabytes >= 1 and megabytes == int(megabytes):
        return f"{int(megabytes)}MB"
    return f"{num_bytes} bytes"


def validate_offset(offset: str, *, max_offset_seconds: float) -> float:
    """Validate an offset string and return it in seconds.

    Args:
        offset: User input such as ``"+1.20"`` or ``"-3"``
        max_offset_seconds: Largest allowed magnitude

    Returns:
        Offset in seconds

    Raises:
        EmptyOffsetError: If offset is empty
        OffsetFormatError: If offset lacks a sign or is not numeric
        OffsetRangeError: If offset is outside the allowed range
    """
    if not offset:
        raise EmptyOffsetError()
    if OFFSET_PATTERN.fullmatch(offset) is None:
        raise OffsetFormatError()

    value = float(offset)
    if not math.isfinite(value) or abs(value) > max_offset_seconds:
        raise OffsetRangeError(max_offset_seconds)
    return value


def validate_filename(filename: str) -> str:
    """Ensure the uploaded file name ends with ``.srt``.

    Raises:
        FileTypeError: If the name has another extension
    """
    if not filename.endswith(SRT_SUFFIX):
        raise FileTypeError()
    return filename


def validate_file_size(size: int, *, max_bytes: int) -> int:
    """Ensure an upload is within the size limit.

    Raises:
        FileSizeError: If size exceeds max_bytes
    """
    if size > max_bytes:
        raise FileSizeError(max_bytes)
    return size


def validate_content(content: str) -> str:
    """Ensure decoded file content is not empty.

    Raises:
        EmptyFileError: If content is the empty string
    """
    if not content:
        raise EmptyFileError()
    return content
