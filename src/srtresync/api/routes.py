"""API route definitions."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import quote

from fastapi import APIRouter, Form, UploadFile
from fastapi.responses import Response

from srtresync.api.constants import SRT_MEDIA_TYPE, ResyncHeader
from srtresync.api.pipeline import (
    check_filename,
    check_offset,
    check_text_content,
    read_upload,
    run_resync,
)
from srtresync.api.schemas import (
    HealthResponse,
    ResyncTextRequest,
    ResyncTextResponse,
)
from srtresync.utils.config import get_settings

router = APIRouter(prefix="/api")


def _content_disposition(filename: str) -> str:
    """Build an attachment header that survives non-ASCII file names."""
    quoted = quote(filename)
    if quoted == filename:
        return f'attachment; filename="{filename}"'
    return f"attachment; filename*=utf-8''{quoted}"


@router.post("/resync")
async def resync_upload(file: UploadFile, offset: str = Form("")) -> Response:
    """Shift every timecode of an uploaded SRT file and return it for download."""
    settings = get_settings()
    # Strip any client-side directory components
    filename = check_filename(Path(file.filename or "").name)
    offset_seconds = check_offset(offset, settings)
    content = await read_upload(file, max_bytes=settings.max_upload_bytes)

    output = run_resync(content, offset_seconds, filename)
    return Response(
        content=output.result.text,
        media_type=SRT_MEDIA_TYPE,
        headers={
            "Content-Disposition": _content_disposition(output.filename),
            ResyncHeader.SHIFTED_LINES: str(output.result.shifted_lines),
            ResyncHeader.CLAMPED: str(output.result.clamped),
        },
    )


@router.post("/resync/text", response_model=ResyncTextResponse)
async def resync_text(body: ResyncTextRequest) -> ResyncTextResponse:
    """Shift every timecode of SRT text sent in the request body."""
    settings = get_settings()
    offset_seconds = check_offset(body.offset, settings)
    content = check_text_content(body.content, settings)

    output = run_resync(content, offset_seconds, body.filename)
    return ResyncTextResponse(
        content=output.result.text,
        filename=output.filename,
        lines=output.result.lines,
        shifted_lines=output.result.shifted_lines,
        clamped=output.result.clamped,
    )


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse()
