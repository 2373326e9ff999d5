"""Tests for API schemas."""

import pytest
from pydantic import ValidationError

from srtresync.api.schemas import (
    ErrorDetail,
    HealthResponse,
    ResyncTextRequest,
    ResyncTextResponse,
)


@pytest.mark.unit
class TestResyncTextRequest:
    def test_default_filename(self) -> None:
        req = ResyncTextRequest(content="x", offset="+1")
        assert req.filename == "subtitles.srt"

    def test_offset_kept_as_text(self) -> None:
        req = ResyncTextRequest(content="x", offset="+1.20")
        assert req.offset == "+1.20"

    def test_blank_filename_rejected(self) -> None:
        with pytest.raises(ValidationError, match="filename cannot be empty"):
            ResyncTextRequest(content="x", offset="+1", filename=" ")

    def test_missing_offset_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ResyncTextRequest(content="x")


@pytest.mark.unit
class TestResponses:
    def test_resync_text_response(self) -> None:
        resp = ResyncTextResponse(
            content="x",
            filename="a-resynced.srt",
            lines=1,
            shifted_lines=0,
            clamped=0,
        )
        assert resp.model_dump()["filename"] == "a-resynced.srt"

    def test_error_detail_optional_detail(self) -> None:
        err = ErrorDetail(code="empty_file", message="File content is empty.")
        assert err.detail is None

    def test_health_default(self) -> None:
        assert HealthResponse().status == "ok"
