"""Descending team ordering with rank and top fraction."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from domain.common import MissingTeam, RankedEntry, normalize_team_id
from domain.errors import EmptyInputError


@dataclass(frozen=True)
class RankingResult:
    """Requested entries in rank order plus requested ids without data."""

    total_count: int
    entries: tuple[RankedEntry, ...]
    missing: tuple[MissingTeam, ...]


def order_teams(aggregates: Mapping[str, float]) -> list[RankedEntry]:
    """Rank every team, highest value first.

    Ties keep the mapping's iteration order, which for aggregation output is
    the order each team was first seen.
    """
    if not aggregates:
        raise EmptyInputError("cannot rank an empty set of team aggregates")

    ordered = sorted(aggregates.items(), key=lambda item: item[1], reverse=True)
    total = len(ordered)
    return [
        RankedEntry(team_id=team_id, value=value, rank=position, top_fraction=position / total)
        for position, (team_id, value) in enumerate(ordered, start=1)
    ]


def rank_teams(
    aggregates: Mapping[str, float],
    wanted: Iterable[str] | None = None,
) -> RankingResult:
    """Rank all teams and keep those requested, reporting requested ids with no data."""
    ordered = order_teams(aggregates)
    if wanted is None:
        return RankingResult(total_count=len(ordered), entries=tuple(ordered), missing=())

    requested: list[str] = []
    for team_id in wanted:
        normalized = normalize_team_id(team_id)
        if normalized and normalized not in requested:
            requested.append(normalized)

    wanted_set = set(requested)
    entries = tuple(entry for entry in ordered if entry.team_id in wanted_set)
    missing = tuple(MissingTeam(team_id) for team_id in requested if team_id not in aggregates)
    return RankingResult(total_count=len(ordered), entries=entries, missing=missing)


__all__ = ["RankingResult", "order_teams", "rank_teams"]
