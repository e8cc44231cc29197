"""Persistence of fetched season rankings as a JSON cache document."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from domain.common import SeasonRankings
from domain.errors import RankingError

_STATS_KEY = "stats"
_RANKINGS_KEY = "rankings"


class CacheFormatError(RankingError):
    """A cache file exists but does not hold a readable season document."""


def season_to_payload(season: SeasonRankings) -> dict[str, Any]:
    return {
        _STATS_KEY: list(season.stats),
        _RANKINGS_KEY: [list(row) for row in season.rankings],
    }


def season_from_payload(payload: Any, *, source: str = "<payload>") -> SeasonRankings:
    if not isinstance(payload, dict):
        raise CacheFormatError(f"{source}: cache document must be a JSON object")

    missing = [key for key in (_STATS_KEY, _RANKINGS_KEY) if key not in payload]
    if missing:
        raise CacheFormatError(f"{source}: cache document is missing keys {missing}")

    stats = payload[_STATS_KEY]
    rankings = payload[_RANKINGS_KEY]
    if not isinstance(stats, list):
        raise CacheFormatError(f"{source}: '{_STATS_KEY}' must be a list")
    if not isinstance(rankings, list) or not all(isinstance(row, list) for row in rankings):
        raise CacheFormatError(f"{source}: '{_RANKINGS_KEY}' must be a list of lists")

    return SeasonRankings(
        stats=tuple(stats),
        rankings=tuple(tuple(row) for row in rankings),
    )


def write_cache(path: Path, season: SeasonRankings) -> Path:
    """Write the season document, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(season_to_payload(season)), encoding="utf-8")
    return path


def read_cache(path: Path) -> SeasonRankings:
    if not path.exists():
        raise FileNotFoundError(f"Cache file not found: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CacheFormatError(f"{path}: invalid JSON ({exc.msg})") from exc
    return season_from_payload(payload, source=str(path))


__all__ = [
    "CacheFormatError",
    "read_cache",
    "season_from_payload",
    "season_to_payload",
    "write_cache",
]
