"""HTTP client for the season event and ranking provider."""

from __future__ import annotations

import os
from typing import Any

import requests

from domain.config import ProviderParameters
from providers.errors import ProviderError


class ProviderClient:
    """Thin wrapper over a requests session for the provider's read endpoints."""

    def __init__(
        self,
        params: ProviderParameters,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self.params = params
        self.base_url = params.base_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update(self._default_headers())

    def _default_headers(self) -> dict[str, str]:
        headers = {"X-TBA-App-Id": self.params.app_id, "Accept": "application/json"}
        if self.params.auth_key_env:
            auth_key = os.environ.get(self.params.auth_key_env)
            if auth_key:
                headers["X-TBA-Auth-Key"] = auth_key
        return headers

    def __enter__(self) -> ProviderClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _get(self, path: str) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            response = self.session.get(url, timeout=self.params.timeout_seconds)
        except requests.RequestException as exc:
            raise ProviderError(f"GET {url} failed: {exc}") from exc

        if not response.ok:
            raise ProviderError(
                f"GET {url} failed: {response.status_code} {response.text[:200]}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise ProviderError(f"GET {url} returned invalid JSON") from exc

    def get_event_list(self, year: int) -> list[dict[str, Any]]:
        """Return the season's events; each carries at least event_code and year."""
        payload = self._get(f"/events/{year}")
        if not isinstance(payload, list):
            raise ProviderError(f"event list for {year} is not a JSON array")
        return [event for event in payload if isinstance(event, dict)]

    def get_event_rankings(self, event_code: str, year: int) -> list[list[Any]]:
        """Return an event's ranking table, header row first (may be empty)."""
        payload = self._get(f"/event/{year}{event_code}/rankings")
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise ProviderError(f"rankings for {year}{event_code} are not a JSON array")
        return [list(row) for row in payload if isinstance(row, list)]


__all__ = ["ProviderClient"]
