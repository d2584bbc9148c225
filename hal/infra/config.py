"""HAL configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date
from pathlib import Path

DEFAULT_MISSION_DAY = date(2001, 4, 2)


@dataclass(frozen=True, slots=True)
class HalConfig:
    kill_dave: bool = True
    oxygen_ratio: float = 0.98
    mission_day: date = DEFAULT_MISSION_DAY
    log_level: str = "INFO"
    log_format: str = "text"
    log_dir: str | None = None


HAL_ENV_FILES = (".env.hal", ".env.hal.local")


def read_env_file(path: str | Path) -> dict[str, str]:
    """Parse `KEY=VALUE` lines; a missing file reads as empty.

    Blank lines, `#` comments and lines without `=` are skipped. One layer of
    matching quotes around a value is removed.
    """
    env_path = Path(path)
    if not env_path.is_file():
        return {}
    values: dict[str, str] = {}
    for line in env_path.read_text(encoding="utf-8").splitlines():
        key, separator, value = line.partition("=")
        key = key.strip()
        if not separator or not key or key.startswith("#"):
            continue
        values[key] = _unquote(value.strip())
    return values


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> dict[str, str]:
    """Apply `.env.hal` then `.env.hal.local` to the process environment.

    Later files win over earlier ones. Returns the variables actually applied.
    """
    merged: dict[str, str] = {}
    for path in HAL_ENV_FILES if paths is None else paths:
        merged.update(read_env_file(path))
    applied = {key: value for key, value in merged.items() if override_existing or key not in os.environ}
    os.environ.update(applied)
    return applied


def load_hal_config(*, env: Mapping[str, str] | None = None) -> HalConfig:
    """Build HAL configuration from env vars; malformed values raise ValueError."""
    source = os.environ if env is None else env
    defaults = HalConfig()
    raw_day = source.get("HAL_MISSION_DAY", "").strip()
    log_dir = source.get("HAL_LOG_DIR", "").strip()
    return HalConfig(
        kill_dave=_parse_flag(source.get("HAL_KILL_DAVE"), defaults.kill_dave),
        oxygen_ratio=float(source.get("HAL_OXYGEN_RATIO", defaults.oxygen_ratio)),
        mission_day=date.fromisoformat(raw_day) if raw_day else defaults.mission_day,
        log_level=source.get("HAL_LOG_LEVEL", source.get("LOG_LEVEL", defaults.log_level)).strip().upper(),
        log_format=source.get("HAL_LOG_FORMAT", defaults.log_format).strip().lower(),
        log_dir=log_dir or None,
    )


def _parse_flag(raw: str | None, default: bool) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        return value[1:-1]
    return value
