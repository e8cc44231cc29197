"""Shared protocols and enums for the ranking pipeline."""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, runtime_checkable


class AveragingMode(str, Enum):
    """How a team's running average absorbs each new record."""

    INCREMENTAL = "incremental"
    LEGACY = "legacy"


@runtime_checkable
class RankingsProvider(Protocol):
    """Remote source of season event lists and per-event ranking tables."""

    def get_event_list(self, year: int) -> list[dict[str, Any]]: ...

    def get_event_rankings(self, event_code: str, year: int) -> list[list[Any]]: ...


__all__ = ["AveragingMode", "RankingsProvider"]
