"""Constants and enums for the API layer."""

from enum import StrEnum


class ResyncHeader(StrEnum):
    """Response headers describing a resync download."""

    SHIFTED_LINES = "X-Resync-Shifted-Lines"
    CLAMPED = "X-Resync-Clamped"


SRT_MEDIA_TYPE = "text/plain; charset=utf-8"
UPLOAD_CHUNK_BYTES = 64 * 1024
