"""Tests for report packaging and console output."""

from __future__ import annotations

from domain.distribution import analyze_distribution
from domain.ranking import rank_teams
from domain.report import RULE, build_report, format_console_report


def _report(wanted: list[str], skipped_records: int = 0):
    aggregates = {"A": 5.0, "B": 9.0, "C": 7.0}
    return build_report(
        stat_name="Auto",
        ranking=rank_teams(aggregates, wanted),
        distribution=analyze_distribution(list(aggregates.values()), 4),
        skipped_records=skipped_records,
    )


def test_report_carries_ranking_and_distribution() -> None:
    report = _report(["A", "C"])
    assert report.stat_name == "Auto"
    assert report.total_count == 3
    assert report.chart_points() == [("C", 7.0), ("A", 5.0)]
    assert report.distribution.max_value == 9.0
    assert report.distribution.median == 7.0


def test_console_report_lists_each_requested_team() -> None:
    lines = format_console_report(_report(["C"]))
    assert lines == [
        RULE,
        "| Team: C",
        "| Avg Auto: 7.0",
        "| Ranking: 2/3",
        f"| Top %: {2 / 3}",
        RULE,
    ]


def test_console_report_names_missing_teams_and_skips() -> None:
    lines = format_console_report(_report(["B", "404"], skipped_records=2))
    assert "| Team: B" in lines
    assert "| Top %: " + str(1 / 3) in lines
    assert lines[-2] == "No data found for team 404"
    assert lines[-1] == "Skipped 2 malformed ranking record(s)"


def test_console_report_without_found_teams_still_reports_missing() -> None:
    lines = format_console_report(_report(["404"]))
    assert lines == [RULE, "No data found for team 404"]
