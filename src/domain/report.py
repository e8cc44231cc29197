"""Final report packaging and console formatting."""

from __future__ import annotations

from dataclasses import dataclass

from domain.common import DistributionSummary, MissingTeam, RankedEntry
from domain.ranking import RankingResult

RULE = "------------------------------------"


@dataclass(frozen=True)
class Report:
    """Everything the console formatter and chart renderer consume."""

    stat_name: str
    total_count: int
    entries: tuple[RankedEntry, ...]
    missing: tuple[MissingTeam, ...]
    distribution: DistributionSummary
    skipped_records: int = 0

    def chart_points(self) -> list[tuple[str, float]]:
        return [(entry.team_id, entry.value) for entry in self.entries]


def build_report(
    *,
    stat_name: str,
    ranking: RankingResult,
    distribution: DistributionSummary,
    skipped_records: int = 0,
) -> Report:
    return Report(
        stat_name=stat_name,
        total_count=ranking.total_count,
        entries=ranking.entries,
        missing=ranking.missing,
        distribution=distribution,
        skipped_records=skipped_records,
    )


def format_console_report(report: Report) -> list[str]:
    """Render one block per requested team, then missing teams and skip count."""
    lines: list[str] = []
    for entry in report.entries:
        lines.append(RULE)
        lines.append(f"| Team: {entry.team_id}")
        lines.append(f"| Avg {report.stat_name}: {entry.value}")
        lines.append(f"| Ranking: {entry.rank}/{report.total_count}")
        lines.append(f"| Top %: {entry.top_fraction}")
    lines.append(RULE)

    for missing in report.missing:
        lines.append(f"No data found for team {missing.team_id}")
    if report.skipped_records:
        lines.append(f"Skipped {report.skipped_records} malformed ranking record(s)")
    return lines


__all__ = ["RULE", "Report", "build_report", "format_console_report"]
