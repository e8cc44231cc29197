"""Record aggregation modules."""

from domain.aggregation.calculator import (
    FoldResult,
    SkippedRecord,
    StatAverageCalculator,
    TeamAggregate,
    fold_records,
)

__all__ = [
    "FoldResult",
    "SkippedRecord",
    "StatAverageCalculator",
    "TeamAggregate",
    "fold_records",
]
