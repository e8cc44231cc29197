"""Fetch and merge every event ranking table of one season."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

from domain.common import SeasonRankings
from domain.errors import EmptyInputError
from domain.protocol import RankingsProvider
from providers.errors import ProviderError


@dataclass(frozen=True)
class FailedEvent:
    event_code: str
    reason: str


@dataclass(frozen=True)
class FetchResult:
    """Merged season data plus the events whose rankings could not be fetched."""

    season: SeasonRankings
    events_total: int
    events_with_rankings: int
    failed_events: tuple[FailedEvent, ...]


def _fetch_event(
    provider: RankingsProvider,
    event: dict[str, Any],
    year: int,
) -> list[list[Any]] | FailedEvent:
    event_code = str(event.get("event_code", ""))
    event_year = int(event.get("year", year))
    try:
        return provider.get_event_rankings(event_code, event_year)
    except ProviderError as exc:
        return FailedEvent(event_code=event_code, reason=str(exc))


def fetch_season_rankings(
    provider: RankingsProvider,
    year: int,
    *,
    max_workers: int = 8,
    echo: Callable[[str], None] | None = None,
) -> FetchResult:
    """Fetch all events concurrently, then merge them in event-list order.

    The first header row found (in event-list order) names the columns; every
    event's own header row is dropped from the merged rankings.
    """
    if max_workers <= 0:
        raise ValueError("max_workers must be greater than 0")

    events = provider.get_event_list(year)
    if echo is not None:
        echo(f"year={year} events={len(events)}")

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        outcomes = list(executor.map(lambda event: _fetch_event(provider, event, year), events))

    header: tuple[Any, ...] | None = None
    rankings: list[tuple[Any, ...]] = []
    failed: list[FailedEvent] = []
    events_with_rankings = 0

    for event, outcome in zip(events, outcomes):
        if isinstance(outcome, FailedEvent):
            failed.append(outcome)
            if echo is not None:
                echo(f"event={outcome.event_code} status=failed reason={outcome.reason}")
            continue
        if not outcome:
            continue

        events_with_rankings += 1
        if header is None:
            header = tuple(outcome[0])
        rankings.extend(tuple(row) for row in outcome[1:])

    if header is None:
        raise EmptyInputError(f"no event rankings available for year={year}")

    if echo is not None:
        echo(
            f"year={year} "
            f"events_with_rankings={events_with_rankings} "
            f"failed_events={len(failed)} "
            f"ranking_rows={len(rankings)}"
        )

    return FetchResult(
        season=SeasonRankings(stats=header, rankings=tuple(rankings)),
        events_total=len(events),
        events_with_rankings=events_with_rankings,
        failed_events=tuple(failed),
    )


__all__ = ["FailedEvent", "FetchResult", "fetch_season_rankings"]
