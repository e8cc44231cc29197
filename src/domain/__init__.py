"""Stat ranking domain modules."""

from domain.common import (
    DistributionSummary,
    HistogramBin,
    MissingTeam,
    RankedEntry,
    SeasonRankings,
    StatSelection,
)
from domain.errors import (
    EmptyInputError,
    InvalidArgumentError,
    MalformedRecordError,
    RankingError,
)
from domain.protocol import AveragingMode

__all__ = [
    "AveragingMode",
    "DistributionSummary",
    "EmptyInputError",
    "HistogramBin",
    "InvalidArgumentError",
    "MalformedRecordError",
    "MissingTeam",
    "RankedEntry",
    "RankingError",
    "SeasonRankings",
    "StatSelection",
]
