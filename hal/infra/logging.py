"""App-level logging policy over screenwire logging."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from hal.infra.config import HalConfig
from screenwire.runtime.logging import LoggingConfig, configure_logging


def setup_logging(config: HalConfig) -> None:
    """Configure application logging; a log dir adds a JSONL run file."""
    file_path = _resolve_run_log_file_path(config.log_dir)
    configure_logging(
        LoggingConfig(
            level_name=config.log_level,
            console_format=config.log_format,
            file_path=file_path,
            file_format="json",
        )
    )
    if file_path is not None:
        logging.getLogger(__name__).info("logging_file=%s", file_path)


def _resolve_run_log_file_path(log_dir: str | None) -> str | None:
    if not log_dir:
        return None
    base_dir = Path(log_dir)
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(base_dir / f"hal_run_{stamp}.jsonl")
