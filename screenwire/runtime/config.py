"""Screenwire configuration sourced from environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool = False, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class ScreenwireConfig:
    """Immutable library configuration."""

    trace_assembly: bool
    log_level: str


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with library-prefixed override."""
    value = _raw("SCREENWIRE_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def load_config(*, env: Mapping[str, str] | None = None) -> ScreenwireConfig:
    """Load immutable configuration from env vars."""
    return ScreenwireConfig(
        trace_assembly=trace_assembly_enabled(env=env),
        log_level=resolve_log_level_name(env=env),
    )


def trace_assembly_enabled(*, env: Mapping[str, str] | None = None) -> bool:
    """Whether assemblers log each construction; read when an assembler is created."""
    return _flag("SCREENWIRE_TRACE_ASSEMBLY", False, env=env)
