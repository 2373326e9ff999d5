"""Pydantic v2 request/response schemas."""

from typing import Self

from pydantic import BaseModel, model_validator

from srtresync.formats.srt import SRT_SUFFIX


class ResyncTextRequest(BaseModel):
    """Request body for resyncing SRT text sent inline."""

    content: str
    offset: str
    filename: str = f"subtitles{SRT_SUFFIX}"

    @model_validator(mode="after")
    def validate_filename_present(self) -> Self:
        if not self.filename.strip():
            raise ValueError("filename cannot be empty")
        return self


class ResyncTextResponse(BaseModel):
    """Response body for an inline resync."""

    content: str
    filename: str
    lines: int
    shifted_lines: int
    clamped: int


class ErrorDetail(BaseModel):
    """Structured error information."""

    code: str
    message: str
    detail: str | None = None


class HealthResponse(BaseModel):
    """Response body for the health check."""

    status: str = "ok"
