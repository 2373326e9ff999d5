"""Resync pipeline: read upload, validate, transform, package output."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from srtresync.api.constants import UPLOAD_CHUNK_BYTES
from srtresync.api.errors import InputRejectedError
from srtresync.core import (
    ResyncResult,
    ValidationError,
    resync,
    validate_content,
    validate_file_size,
    validate_filename,
    validate_offset,
)
from srtresync.formats import decode_srt, resynced_filename

if TYPE_CHECKING:
    from fastapi import UploadFile

    from srtresync.utils.config import Settings

logger = structlog.get_logger()


@dataclass
class ResyncOutput:
    """Resynced document ready to be sent back to the client."""

    filename: str
    result: ResyncResult


def check_offset(offset: str, settings: Settings) -> float:
    """Validate the offset field, raising an API error on failure."""
    try:
        return validate_offset(offset, max_offset_seconds=settings.max_offset_seconds)
    except ValidationError as exc:
        raise InputRejectedError(exc, field="offset") from exc


def check_filename(filename: str) -> str:
    """Validate the file name field, raising an API error on failure."""
    try:
        return validate_filename(filename)
    except ValidationError as exc:
        raise InputRejectedError(exc, field="file") from exc


async def read_upload(file: UploadFile, *, max_bytes: int) -> str:
    """Read an uploaded SRT file into text, enforcing the size limit.

    Args:
        file: Uploaded file from the multipart form
        max_bytes: Largest accepted size

    Returns:
        Decoded file content

    Raises:
        InputRejectedError: If the file is too large or empty
    """
    chunks: list[bytes] = []
    bytes_read = 0
    try:
        while chunk := await file.read(UPLOAD_CHUNK_BYTES):
            bytes_read += len(chunk)
            validate_file_size(bytes_read, max_bytes=max_bytes)
            chunks.append(chunk)
        return validate_content(decode_srt(b"".join(chunks)))
    except ValidationError as exc:
        raise InputRejectedError(exc, field="file") from exc


def run_resync(content: str, offset_seconds: float, filename: str) -> ResyncOutput:
    """Shift every timecode in ``content`` and name the output file."""
    start = time.monotonic()
    result = resync(content, offset_seconds)
    output = ResyncOutput(filename=resynced_filename(filename), result=result)
    logger.info(
        "resync_completed",
        filename=output.filename,
        offset_seconds=offset_seconds,
        lines=result.lines,
        shifted_lines=result.shifted_lines,
        clamped=result.clamped,
        elapsed_ms=round((time.monotonic() - start) * 1000, 2),
    )
    return output


def check_text_content(content: str, settings: Settings) -> str:
    """Validate inline SRT text, raising an API error on failure."""
    try:
        validate_file_size(
            len(content.encode("utf-8")), max_bytes=settings.max_upload_bytes
        )
        return validate_content(content)
    except ValidationError as exc:
        raise InputRejectedError(exc, field="content") from exc
