"""Remote data provider access."""

from providers.client import ProviderClient
from providers.errors import ProviderError
from providers.season import FailedEvent, FetchResult, fetch_season_rankings

__all__ = [
    "FailedEvent",
    "FetchResult",
    "ProviderClient",
    "ProviderError",
    "fetch_season_rankings",
]
