"""Tests for the resync pipeline helpers."""

import io

import pytest
from fastapi import UploadFile

from srtresync.api.errors import InputRejectedError
from srtresync.api.pipeline import (
    check_filename,
    check_offset,
    check_text_content,
    read_upload,
    run_resync,
)
from srtresync.utils.config import Settings


def _upload_file(data: bytes, filename: str = "movie.srt") -> UploadFile:
    return UploadFile(file=io.BytesIO(data), filename=filename)


@pytest.fixture
def settings() -> Settings:
    return Settings(max_upload_bytes=100, max_offset_seconds=3600)


@pytest.mark.unit
@pytest.mark.asyncio
class TestReadUpload:
    async def test_reads_and_decodes(self) -> None:
        upload = _upload_file("1\nCafé\n".encode())

        assert await read_upload(upload, max_bytes=100) == "1\nCafé\n"

    async def test_reads_across_chunks(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("srtresync.api.pipeline.UPLOAD_CHUNK_BYTES", 4)
        upload = _upload_file(b"0123456789abcdef")

        assert await read_upload(upload, max_bytes=100) == "0123456789abcdef"

    async def test_rejects_oversized_upload(self) -> None:
        upload = _upload_file(b"x" * 101)

        with pytest.raises(InputRejectedError) as exc_info:
            await read_upload(upload, max_bytes=100)

        assert exc_info.value.code == "file_too_large"
        assert exc_info.value.status_code == 422
        assert exc_info.value.field == "file"

    async def test_rejects_empty_upload(self) -> None:
        with pytest.raises(InputRejectedError) as exc_info:
            await read_upload(_upload_file(b""), max_bytes=100)

        assert exc_info.value.code == "empty_file"


@pytest.mark.unit
class TestChecks:
    def test_check_offset_returns_seconds(self, settings: Settings) -> None:
        assert check_offset("-2.5", settings) == -2.5

    def test_check_offset_wraps_error(self, settings: Settings) -> None:
        with pytest.raises(InputRejectedError) as exc_info:
            check_offset("2.5", settings)

        assert exc_info.value.code == "invalid_offset_format"
        assert exc_info.value.detail == "field: offset"

    def test_check_filename_wraps_error(self) -> None:
        with pytest.raises(InputRejectedError) as exc_info:
            check_filename("movie.ass")

        assert exc_info.value.code == "invalid_file_type"

    def test_check_text_content_size_limit(self, settings: Settings) -> None:
        with pytest.raises(InputRejectedError) as exc_info:
            check_text_content("é" * 51, settings)

        assert exc_info.value.code == "file_too_large"
        assert exc_info.value.field == "content"


@pytest.mark.unit
class TestRunResync:
    def test_names_output_and_shifts(self, sample_srt_content: str) -> None:
        output = run_resync(sample_srt_content, 1.0, "show.srt")

        assert output.filename == "show-resynced.srt"
        assert output.result.shifted_lines == 3
        assert output.result.text.split("\n")[1] == "00:00:02,000 --> 00:00:05,000"

    def test_keeps_unexpected_name(self) -> None:
        output = run_resync("x", 0.0, "notes.txt")

        assert output.filename == "notes.txt"
        assert output.result.text == "x"
