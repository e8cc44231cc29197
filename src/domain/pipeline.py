"""Aggregate, rank and summarize one season for one analysis profile."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from domain.aggregation import fold_records
from domain.common import SeasonRankings, StatSelection
from domain.config import AnalysisConfig
from domain.distribution import analyze_distribution
from domain.ranking import rank_teams
from domain.report import Report, build_report


def run_analysis(
    *,
    season: SeasonRankings,
    config: AnalysisConfig,
    stat_index: int,
    wanted: Iterable[str] | None = None,
    echo: Callable[[str], None] | None = None,
) -> Report:
    """Run the full aggregation pipeline over an already materialized season."""
    stat_name = season.stat_name(stat_index)
    selection = StatSelection(
        stat_index=stat_index,
        team_index=config.records.team_index,
        match_count_index=config.records.match_count_index,
    )

    fold_result = fold_records(
        season.rankings,
        selection,
        averaging=config.records.averaging,
    )
    if echo is not None:
        echo(
            f"profile={config.name} "
            f"stat={stat_name} "
            f"averaging={config.records.averaging.value} "
            f"folded_records={fold_result.folded_records} "
            f"skipped_records={fold_result.skipped_records} "
            f"tracked_teams={len(fold_result.averages)}"
        )

    ranking = rank_teams(fold_result.averages, wanted)
    distribution = analyze_distribution(
        list(fold_result.averages.values()),
        config.histogram.bins,
        label_decimals=config.histogram.label_decimals,
    )
    if echo is not None:
        echo(
            f"median={distribution.median} "
            f"max={distribution.max_value} "
            f"bins={len(distribution.bins)} "
            f"requested_found={len(ranking.entries)} "
            f"requested_missing={len(ranking.missing)}"
        )

    return build_report(
        stat_name=stat_name,
        ranking=ranking,
        distribution=distribution,
        skipped_records=fold_result.skipped_records,
    )


__all__ = ["run_analysis"]
