from __future__ import annotations

import os
from datetime import date

import pytest

from hal.infra.config import HalConfig, load_default_env_files, load_hal_config, read_env_file


def test_load_hal_config_defaults() -> None:
    assert load_hal_config(env={}) == HalConfig()


def test_load_hal_config_reads_env_values() -> None:
    config = load_hal_config(
        env={
            "HAL_KILL_DAVE": "no",
            "HAL_OXYGEN_RATIO": "0.5",
            "HAL_MISSION_DAY": "2001-05-01",
            "HAL_LOG_LEVEL": "debug",
            "HAL_LOG_FORMAT": "JSON",
            "HAL_LOG_DIR": "logs",
        }
    )
    assert config == HalConfig(
        kill_dave=False,
        oxygen_ratio=0.5,
        mission_day=date(2001, 5, 1),
        log_level="DEBUG",
        log_format="json",
        log_dir="logs",
    )


def test_load_hal_config_rejects_malformed_values() -> None:
    with pytest.raises(ValueError):
        load_hal_config(env={"HAL_MISSION_DAY": "yesterday"})
    with pytest.raises(ValueError):
        load_hal_config(env={"HAL_OXYGEN_RATIO": "plenty"})


def test_read_env_file_parses_quotes_and_comments(tmp_path) -> None:
    env_file = tmp_path / ".env.hal"
    env_file.write_text(
        "# comment\nHAL_KILL_DAVE=\"0\"\nbroken line\n#HAL_LOG_LEVEL=DEBUG\nHAL_LOG_DIR='logs'\nHAL_OXYGEN_RATIO = 0.4\n",
        encoding="utf-8",
    )
    assert read_env_file(env_file) == {"HAL_KILL_DAVE": "0", "HAL_LOG_DIR": "logs", "HAL_OXYGEN_RATIO": "0.4"}


def test_read_env_file_missing_file_is_empty(tmp_path) -> None:
    assert read_env_file(tmp_path / "absent.env") == {}


def test_load_default_env_files_keeps_existing_values_when_asked(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env.hal"
    env_file.write_text("HAL_KILL_DAVE=0\nHAL_OXYGEN_RATIO=0.4\n", encoding="utf-8")
    monkeypatch.setenv("HAL_KILL_DAVE", "unset")
    monkeypatch.delenv("HAL_KILL_DAVE")
    monkeypatch.setenv("HAL_OXYGEN_RATIO", "0.9")
    applied = load_default_env_files(override_existing=False, paths=(str(env_file),))
    assert applied == {"HAL_KILL_DAVE": "0"}
    assert os.environ["HAL_KILL_DAVE"] == "0"
    assert os.environ["HAL_OXYGEN_RATIO"] == "0.9"


def test_load_default_env_files_later_files_win(tmp_path, monkeypatch) -> None:
    base = tmp_path / ".env.hal"
    local = tmp_path / ".env.hal.local"
    base.write_text("HAL_LOG_LEVEL=INFO\n", encoding="utf-8")
    local.write_text("HAL_LOG_LEVEL=DEBUG\n", encoding="utf-8")
    monkeypatch.setenv("HAL_LOG_LEVEL", "ERROR")
    load_default_env_files(paths=(str(base), str(local)))
    assert os.environ["HAL_LOG_LEVEL"] == "DEBUG"
