"""Core business logic modules."""

from srtresync.core.resync import ResyncResult, parse_offset, resync, resync_document
from srtresync.core.timestamp import TIMESTAMP_PATTERN, Timestamp, shift_timestamp
from srtresync.core.validation import (
    EmptyFileError,
    EmptyOffsetError,
    FileSizeError,
    FileTypeError,
    OffsetFormatError,
    OffsetRangeError,
    ValidationError,
    validate_content,
    validate_file_size,
    validate_filename,
    validate_offset,
)

__all__ = [
    "TIMESTAMP_PATTERN",
    "EmptyFileError",
    "EmptyOffsetError",
    "FileSizeError",
    "FileTypeError",
    "OffsetFormatError",
    "OffsetRangeError",
    "ResyncResult",
    "Timestamp",
    "ValidationError",
    "parse_offset",
    "resync",
    "resync_document",
    "shift_timestamp",
    "validate_content",
    "validate_file_size",
    "validate_filename",
    "validate_offset",
]
