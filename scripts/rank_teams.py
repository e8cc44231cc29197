#!/usr/bin/env python3
"""Rank teams by a season-averaged stat and chart the population distribution."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from charts import render_histogram
from domain.common import SeasonRankings
from domain.config import DEFAULT_CONFIG_DIR, AnalysisConfig, load_analysis_configs
from domain.errors import InvalidArgumentError, RankingError
from domain.pipeline import run_analysis
from domain.report import format_console_report
from providers import ProviderClient, fetch_season_rankings
from repositories.cache_file import read_cache, write_cache

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Season stat rankings for selected teams.",
)


def _load_profile(config_dir: Path | None, config_name: str) -> AnalysisConfig:
    target_config_dir = config_dir or DEFAULT_CONFIG_DIR
    configs = load_analysis_configs(target_config_dir)
    matches = [config for config in configs if config.file_path.name == config_name]
    if not matches:
        raise typer.BadParameter(
            f"No config named '{config_name}' found in {target_config_dir}",
            param_hint="--config-name",
        )
    return matches[0]


def _parse_teams(teams: str) -> list[str]:
    parsed = [team.strip() for team in teams.split(",") if team.strip()]
    if not parsed:
        raise typer.BadParameter("--teams must name at least one team", param_hint="--teams")
    return parsed


def load_season(
    *,
    config: AnalysisConfig,
    year: int | None,
    data: Path | None,
    cache_path: Path | None,
) -> SeasonRankings:
    """Replay a cache file, or fetch live and refresh the cache."""
    if data is not None:
        season = read_cache(data)
        typer.echo(f"source=cache path={data} ranking_rows={len(season.rankings)}")
        return season

    if year is None:
        raise typer.BadParameter("--year is required unless --data is given", param_hint="--year")

    with ProviderClient(config.provider) as client:
        fetch_result = fetch_season_rankings(
            client,
            year,
            max_workers=config.provider.max_workers,
            echo=typer.echo,
        )

    target_cache_path = cache_path or config.output.cache_path
    write_cache(target_cache_path, fetch_result.season)
    typer.echo(f"source=live year={year} cache_written={target_cache_path}")
    return fetch_result.season


@app.command()
def rank(
    stat: Annotated[
        int,
        typer.Option("--stat", "-s", help="Index of the stat column to average."),
    ],
    teams: Annotated[
        str,
        typer.Option("--teams", "-t", help="Comma-separated team ids to report."),
    ],
    year: Annotated[
        int | None,
        typer.Option("--year", "-y", help="Season year to fetch (required without --data)."),
    ] = None,
    data: Annotated[
        Path | None,
        typer.Option("--data", "-d", help="Replay rankings from a cache file instead of fetching."),
    ] = None,
    config_dir: Annotated[
        Path | None,
        typer.Option("--config-dir", help="Optional override for the analysis config directory."),
    ] = None,
    config_name: Annotated[
        str,
        typer.Option("--config-name", help="Analysis config filename."),
    ] = "default.toml",
    cache_path: Annotated[
        Path | None,
        typer.Option("--cache-path", help="Where to write the cache after a live fetch."),
    ] = None,
    image_dir: Annotated[
        Path | None,
        typer.Option("--image-dir", help="Directory for the histogram PNG."),
    ] = None,
    chart: Annotated[
        bool,
        typer.Option("--chart/--no-chart", help="Render the distribution histogram."),
    ] = True,
) -> None:
    """Print each requested team's average, rank and top fraction."""
    wanted = _parse_teams(teams)
    config = _load_profile(config_dir, config_name)

    try:
        season = load_season(config=config, year=year, data=data, cache_path=cache_path)
        report = run_analysis(
            season=season,
            config=config,
            stat_index=stat,
            wanted=wanted,
            echo=typer.echo,
        )
    except InvalidArgumentError as exc:
        raise typer.BadParameter(str(exc), param_hint="--stat") from exc
    except (RankingError, FileNotFoundError) as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    output_path: Path | None = None
    if chart:
        try:
            output_path = render_histogram(report, image_dir or config.output.image_dir)
        except OSError as exc:
            typer.echo(f"error: could not write chart: {exc}", err=True)
            raise typer.Exit(code=1) from exc

    for line in format_console_report(report):
        typer.echo(line)
    if output_path is not None:
        typer.echo(f"chart_written={output_path}")


@app.command()
def list_stats(
    data: Annotated[
        Path | None,
        typer.Option(
            "--data",
            "-d",
            help="Cache file to read the header row from (defaults to the profile's cache_path).",
        ),
    ] = None,
    config_dir: Annotated[
        Path | None,
        typer.Option("--config-dir", help="Optional override for the analysis config directory."),
    ] = None,
    config_name: Annotated[
        str,
        typer.Option("--config-name", help="Analysis config filename."),
    ] = "default.toml",
) -> None:
    """Print the stat columns available in a cache file with their indices."""
    if data is None:
        data = _load_profile(config_dir, config_name).output.cache_path

    try:
        season = read_cache(data)
    except (RankingError, FileNotFoundError) as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    for index, column in enumerate(season.stats):
        typer.echo(f"{index:2d}. {column}")


@app.command()
def list_configs(
    config_dir: Annotated[
        Path | None,
        typer.Option("--config-dir", help="Optional override for the analysis config directory."),
    ] = None,
) -> None:
    """Print all analysis profiles in the config directory."""
    for config in load_analysis_configs(config_dir or DEFAULT_CONFIG_DIR):
        typer.echo(
            f"{config.file_path.name} name={config.name} "
            f"averaging={config.records.averaging.value} "
            f"bins={config.histogram.bins} "
            f"description={config.description or '-'}"
        )


if __name__ == "__main__":
    app()
