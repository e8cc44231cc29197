"""Shared fixtures for ranking pipeline tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from domain.common import SeasonRankings
from domain.config import AnalysisConfig

HEADER = ("Rank", "Team", "Qual Score", "Auto", "Container", "Coop", "Litter", "Tote", "Record", "Played")


def ranking_row(rank: int, team: str, qual: float, auto: float, played: int = 10) -> tuple:
    return (rank, team, qual, auto, 0, 0, 0, 0, "0-0-0", played)


@pytest.fixture
def season() -> SeasonRankings:
    return SeasonRankings(
        stats=HEADER,
        rankings=(
            ranking_row(1, "254", 90.0, 40.0),
            ranking_row(2, "1678", 80.0, 30.0),
            ranking_row(3, "118", 70.0, 20.0),
            ranking_row(4, "971", 60.0, 10.0),
            ranking_row(1, "254", 110.0, 60.0),
            ranking_row(2, "118", 50.0, 0.0, played=0),
        ),
    )


@pytest.fixture
def analysis_config(tmp_path: Path) -> AnalysisConfig:
    return AnalysisConfig(name="test", description=None, file_path=tmp_path / "test.toml")
