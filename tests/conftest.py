"""Pytest configuration and shared fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest

from srtresync.utils.config import get_settings


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the get_settings LRU cache before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def no_env_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Switch to a temporary directory with no .env file."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_srt_content() -> str:
    """Return sample SRT content for testing."""
    return """1
00:00:01,000 --> 00:00:04,000
Hello, this is a test.

2
00:00:05,000 --> 00:00:08,000
This is the second subtitle.

3
00:00:09,000 --> 00:00:12,000
And this is the third one.
"""
