"""Provider failure types."""

from __future__ import annotations

from domain.errors import RankingError


class ProviderError(RankingError):
    """The remote data provider could not supply a response."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = ["ProviderError"]
