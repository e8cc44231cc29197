"""Shared types for the stat ranking pipeline."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from domain.errors import InvalidArgumentError

RawRecord = Sequence[Any]


@dataclass(frozen=True)
class StatSelection:
    """Field positions read from each raw ranking record."""

    stat_index: int
    team_index: int = 1
    match_count_index: int = 9

    def __post_init__(self) -> None:
        for label, value in (
            ("stat_index", self.stat_index),
            ("team_index", self.team_index),
            ("match_count_index", self.match_count_index),
        ):
            if value < 0:
                raise InvalidArgumentError(f"{label} must be >= 0, got {value}")

    @property
    def required_length(self) -> int:
        """Minimum number of fields a record needs to be foldable."""
        return max(self.stat_index, self.team_index, self.match_count_index) + 1


@dataclass(frozen=True)
class RankedEntry:
    """One team's place in the full descending ordering."""

    team_id: str
    value: float
    rank: int
    top_fraction: float


@dataclass(frozen=True)
class HistogramBin:
    lower: float
    upper: float
    count: int


@dataclass(frozen=True)
class DistributionSummary:
    """Median, maximum and equal-width histogram of one value population."""

    median: float
    max_value: float
    bins: tuple[HistogramBin, ...]
    labels: tuple[float, ...]

    def counts(self) -> list[int]:
        return [histogram_bin.count for histogram_bin in self.bins]


@dataclass(frozen=True)
class MissingTeam:
    """A requested team that has no aggregated value."""

    team_id: str


@dataclass(frozen=True)
class SeasonRankings:
    """Header row plus every event's ranking rows, header rows stripped."""

    stats: tuple[Any, ...]
    rankings: tuple[tuple[Any, ...], ...]

    def stat_name(self, stat_index: int) -> str:
        if stat_index < 0 or stat_index >= len(self.stats):
            raise InvalidArgumentError(
                f"stat_index={stat_index} is outside the header row "
                f"(0..{len(self.stats) - 1})"
            )
        return str(self.stats[stat_index])


def normalize_team_id(value: Any) -> str:
    """Return a canonical string id so that 254 and "254" are the same team."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


__all__ = [
    "DistributionSummary",
    "HistogramBin",
    "MissingTeam",
    "RankedEntry",
    "RawRecord",
    "SeasonRankings",
    "StatSelection",
    "normalize_team_id",
]
