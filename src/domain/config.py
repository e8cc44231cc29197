"""Load analysis profiles from TOML files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import tomllib

from domain.protocol import AveragingMode

ROOT_DIR = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG_DIR = ROOT_DIR / "configs" / "analysis"

DEFAULT_BASE_URL = "https://www.thebluealliance.com/api/v2"
DEFAULT_APP_ID = "frc-auto-rankings:auto rankings:1.0.0"


@dataclass(frozen=True)
class RecordParameters:
    team_index: int = 1
    match_count_index: int = 9
    averaging: AveragingMode = AveragingMode.INCREMENTAL


@dataclass(frozen=True)
class HistogramParameters:
    bins: int = 20
    label_decimals: int = 2


@dataclass(frozen=True)
class ProviderParameters:
    base_url: str = DEFAULT_BASE_URL
    app_id: str = DEFAULT_APP_ID
    auth_key_env: str | None = "TBA_AUTH_KEY"
    timeout_seconds: float = 30.0
    max_workers: int = 8


@dataclass(frozen=True)
class OutputParameters:
    cache_path: Path = Path("data.rd")
    image_dir: Path = Path("images")


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis profile."""

    name: str
    description: str | None
    file_path: Path
    records: RecordParameters = field(default_factory=RecordParameters)
    histogram: HistogramParameters = field(default_factory=HistogramParameters)
    provider: ProviderParameters = field(default_factory=ProviderParameters)
    output: OutputParameters = field(default_factory=OutputParameters)


def load_analysis_configs(config_dir: Path) -> list[AnalysisConfig]:
    """Load and validate every ``*.toml`` profile in a directory, sorted by file name."""
    if not config_dir.exists():
        raise FileNotFoundError(f"Config directory not found: {config_dir}")
    if not config_dir.is_dir():
        raise NotADirectoryError(f"Config path is not a directory: {config_dir}")

    config_files = sorted(config_dir.glob("*.toml"))
    if not config_files:
        raise ValueError(f"No .toml config files found in: {config_dir}")

    profiles: list[AnalysisConfig] = []
    for file_path in config_files:
        with file_path.open("rb") as file:
            raw = tomllib.load(file)
        profiles.append(_parse_analysis_config(raw, file_path))

    names = [profile.name for profile in profiles]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ValueError(
            f"Duplicate analysis profile names found in {config_dir}: {', '.join(duplicates)}"
        )

    return profiles


def _parse_analysis_config(raw: dict[str, Any], file_path: Path) -> AnalysisConfig:
    system_raw = raw.get("system", {})
    records_raw = raw.get("records", {})
    histogram_raw = raw.get("histogram", {})
    provider_raw = raw.get("provider", {})
    output_raw = raw.get("output", {})

    name = str(system_raw.get("name", "")).strip()
    if not name:
        raise ValueError(f"{file_path}: [system].name is required")

    description_value = system_raw.get("description")
    description = None if description_value is None else str(description_value)

    averaging_value = str(records_raw.get("averaging", AveragingMode.INCREMENTAL.value)).lower()
    try:
        averaging = AveragingMode(averaging_value)
    except ValueError as exc:
        choices = ", ".join(mode.value for mode in AveragingMode)
        raise ValueError(
            f"{file_path}: [records].averaging must be one of {choices}, got {averaging_value!r}"
        ) from exc

    records = RecordParameters(
        team_index=int(records_raw.get("team_index", 1)),
        match_count_index=int(records_raw.get("match_count_index", 9)),
        averaging=averaging,
    )
    histogram = HistogramParameters(
        bins=int(histogram_raw.get("bins", 20)),
        label_decimals=int(histogram_raw.get("label_decimals", 2)),
    )

    auth_key_env_value = provider_raw.get("auth_key_env", "TBA_AUTH_KEY")
    provider = ProviderParameters(
        base_url=str(provider_raw.get("base_url", DEFAULT_BASE_URL)).rstrip("/"),
        app_id=str(provider_raw.get("app_id", DEFAULT_APP_ID)),
        auth_key_env=None if not auth_key_env_value else str(auth_key_env_value),
        timeout_seconds=float(provider_raw.get("timeout_seconds", 30.0)),
        max_workers=int(provider_raw.get("max_workers", 8)),
    )
    output = OutputParameters(
        cache_path=Path(output_raw.get("cache_path", "data.rd")),
        image_dir=Path(output_raw.get("image_dir", "images")),
    )

    _validate_parameters(
        file_path=file_path,
        records=records,
        histogram=histogram,
        provider=provider,
    )

    return AnalysisConfig(
        name=name,
        description=description,
        file_path=file_path,
        records=records,
        histogram=histogram,
        provider=provider,
        output=output,
    )


def _validate_parameters(
    *,
    file_path: Path,
    records: RecordParameters,
    histogram: HistogramParameters,
    provider: ProviderParameters,
) -> None:
    if records.team_index < 0:
        raise ValueError(f"{file_path}: [records].team_index must be >= 0")
    if records.match_count_index < 0:
        raise ValueError(f"{file_path}: [records].match_count_index must be >= 0")
    if histogram.bins <= 0:
        raise ValueError(f"{file_path}: [histogram].bins must be > 0")
    if histogram.label_decimals < 0:
        raise ValueError(f"{file_path}: [histogram].label_decimals must be >= 0")
    if not provider.base_url:
        raise ValueError(f"{file_path}: [provider].base_url is required")
    if provider.timeout_seconds <= 0.0:
        raise ValueError(f"{file_path}: [provider].timeout_seconds must be > 0")
    if provider.max_workers <= 0:
        raise ValueError(f"{file_path}: [provider].max_workers must be > 0")


__all__ = [
    "AnalysisConfig",
    "DEFAULT_CONFIG_DIR",
    "HistogramParameters",
    "OutputParameters",
    "ProviderParameters",
    "RecordParameters",
    "load_analysis_configs",
]
