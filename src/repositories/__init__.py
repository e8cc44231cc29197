"""Local persistence helpers."""

from repositories.cache_file import (
    CacheFormatError,
    read_cache,
    season_from_payload,
    season_to_payload,
    write_cache,
)

__all__ = [
    "CacheFormatError",
    "read_cache",
    "season_from_payload",
    "season_to_payload",
    "write_cache",
]
