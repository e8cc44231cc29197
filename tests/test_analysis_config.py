"""Tests for TOML-based analysis profile loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from domain.config import DEFAULT_CONFIG_DIR, load_analysis_configs
from domain.protocol import AveragingMode


def test_load_analysis_configs_from_directory(tmp_path: Path) -> None:
    config_path = tmp_path / "default.toml"
    config_path.write_text(
        """
[system]
name = "profile_a"
description = "A test profile"

[records]
team_index = 0
match_count_index = 7
averaging = "legacy"

[histogram]
bins = 12
label_decimals = 1

[provider]
base_url = "http://provider.test/api/"
app_id = "tester:stats:0.1"
auth_key_env = "TEST_AUTH"
timeout_seconds = 5.5
max_workers = 3

[output]
cache_path = "cache/season.json"
image_dir = "out"
""".strip()
    )

    configs = load_analysis_configs(tmp_path)
    assert len(configs) == 1

    profile = configs[0]
    assert profile.name == "profile_a"
    assert profile.description == "A test profile"
    assert profile.records.team_index == 0
    assert profile.records.match_count_index == 7
    assert profile.records.averaging is AveragingMode.LEGACY
    assert profile.histogram.bins == 12
    assert profile.histogram.label_decimals == 1
    assert profile.provider.base_url == "http://provider.test/api"
    assert profile.provider.app_id == "tester:stats:0.1"
    assert profile.provider.auth_key_env == "TEST_AUTH"
    assert profile.provider.timeout_seconds == pytest.approx(5.5)
    assert profile.provider.max_workers == 3
    assert profile.output.cache_path == Path("cache/season.json")
    assert profile.output.image_dir == Path("out")


def test_all_defaults_when_omitted(tmp_path: Path) -> None:
    (tmp_path / "defaulted.toml").write_text('[system]\nname = "defaulted"\n')

    profile = load_analysis_configs(tmp_path)[0]
    assert profile.description is None
    assert profile.records.team_index == 1
    assert profile.records.match_count_index == 9
    assert profile.records.averaging is AveragingMode.INCREMENTAL
    assert profile.histogram.bins == 20
    assert profile.histogram.label_decimals == 2
    assert profile.provider.max_workers == 8
    assert profile.provider.timeout_seconds == pytest.approx(30.0)
    assert profile.output.cache_path == Path("data.rd")
    assert profile.output.image_dir == Path("images")


def test_duplicate_names_raise_error(tmp_path: Path) -> None:
    template = '[system]\nname = "dup"\n'
    (tmp_path / "a.toml").write_text(template)
    (tmp_path / "b.toml").write_text(template)

    with pytest.raises(ValueError, match="Duplicate analysis profile names.*: dup$"):
        load_analysis_configs(tmp_path)


def test_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Config directory not found"):
        load_analysis_configs(tmp_path / "absent")


def test_file_instead_of_directory_raises(tmp_path: Path) -> None:
    config_file = tmp_path / "default.toml"
    config_file.write_text('[system]\nname = "single"\n')

    with pytest.raises(NotADirectoryError):
        load_analysis_configs(config_file)


def test_profiles_load_in_file_name_order(tmp_path: Path) -> None:
    (tmp_path / "b.toml").write_text('[system]\nname = "second"\n')
    (tmp_path / "a.toml").write_text('[system]\nname = "first"\n')

    profiles = load_analysis_configs(tmp_path)
    assert [profile.name for profile in profiles] == ["first", "second"]
    assert profiles[0].file_path == tmp_path / "a.toml"


def test_missing_name_raises(tmp_path: Path) -> None:
    (tmp_path / "nameless.toml").write_text("[histogram]\nbins = 4\n")

    with pytest.raises(ValueError, match=r"\[system\].name is required"):
        load_analysis_configs(tmp_path)


@pytest.mark.parametrize(
    ("section", "body", "message"),
    [
        ("histogram", "bins = 0", r"\[histogram\].bins must be > 0"),
        ("histogram", "label_decimals = -1", r"\[histogram\].label_decimals must be >= 0"),
        ("records", "match_count_index = -2", r"\[records\].match_count_index must be >= 0"),
        ("records", 'averaging = "median"', r"\[records\].averaging must be one of"),
        ("provider", "max_workers = 0", r"\[provider\].max_workers must be > 0"),
        ("provider", "timeout_seconds = 0.0", r"\[provider\].timeout_seconds must be > 0"),
    ],
)
def test_invalid_values_raise_validation_error(
    tmp_path: Path, section: str, body: str, message: str
) -> None:
    (tmp_path / "invalid.toml").write_text(f'[system]\nname = "bad"\n\n[{section}]\n{body}\n')

    with pytest.raises(ValueError, match=message):
        load_analysis_configs(tmp_path)


def test_empty_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="No .toml config files"):
        load_analysis_configs(tmp_path)


def test_shipped_profiles_load() -> None:
    names = {profile.name for profile in load_analysis_configs(DEFAULT_CONFIG_DIR)}
    assert {"default", "legacy"} <= names
