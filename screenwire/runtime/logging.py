"""Screenwire logging pipeline.

Every record screenwire emits starts its message with an event name
(`binding_missing`, `binding_stale`, `assembled`, `router_present`, ...) and
carries the component or binding involved in `extra`. The JSON formatter lifts
both out so a run log can be filtered by event and by the slot or component
that produced it.
"""

from __future__ import annotations

import json
import logging
import queue
from dataclasses import dataclass
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from screenwire.runtime.config import ScreenwireConfig, load_config

# Extras describing what screenwire was doing when the record was emitted.
CONTEXT_FIELDS = ("component", "depth", "route", "binding_owner", "binding_slot")

_BASE_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))) | {
    "message",
    "asctime",
}
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_listener: QueueListener | None = None


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Where records go and how each destination renders them."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json

    @classmethod
    def from_screenwire(cls, config: ScreenwireConfig) -> LoggingConfig:
        return cls(level_name=config.log_level)


class JsonFormatter(logging.Formatter):
    """One JSON object per record with the event name and screenwire context split out."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        entry: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": message.split(" ", 1)[0],
            "msg": message,
        }
        extras = {key: value for key, value in vars(record).items() if key not in _BASE_RECORD_ATTRIBUTES}
        context = {name: extras.pop(name) for name in CONTEXT_FIELDS if name in extras}
        if context:
            entry["context"] = context
        if extras:
            entry["fields"] = extras
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=True, default=str)


def configure_logging(config: LoggingConfig) -> None:
    """Replace root handlers: console output, plus a queued file writer when a path is set."""
    global _listener

    shutdown_logging()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.getLevelNamesMapping().get(config.level_name.strip().upper(), logging.INFO))

    console = logging.StreamHandler()
    console.setFormatter(_formatter(config.console_format))
    if not config.file_path:
        root.addHandler(console)
        return

    path = Path(config.file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    writer = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    writer.setFormatter(_formatter(config.file_format))
    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(records))
    _listener = QueueListener(records, console, writer, respect_handler_level=True)
    _listener.start()


def shutdown_logging() -> None:
    """Stop the queued file writer, flushing pending records."""
    global _listener

    if _listener is not None:
        _listener.stop()
        _listener = None


def setup_logging(config: ScreenwireConfig | None = None) -> None:
    """Console logging at the configured level, unless the host already configured logging."""
    if logging.getLogger().handlers:
        return
    configure_logging(LoggingConfig.from_screenwire(config or load_config()))


def _formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(_TEXT_FORMAT)
