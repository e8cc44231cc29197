"""Error types raised by the ranking pipeline."""

from __future__ import annotations


class RankingError(ValueError):
    """Base class for all pipeline failures."""


class InvalidArgumentError(RankingError):
    """A caller-supplied argument (bin count, field index) is out of range."""


class EmptyInputError(RankingError):
    """There is nothing to aggregate, rank, or analyze."""


class MalformedRecordError(RankingError):
    """One raw ranking record cannot be folded."""

    def __init__(self, message: str, *, record_index: int | None = None) -> None:
        super().__init__(message)
        self.record_index = record_index


__all__ = [
    "EmptyInputError",
    "InvalidArgumentError",
    "MalformedRecordError",
    "RankingError",
]
