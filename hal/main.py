"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace
from datetime import date
from functools import partial

from hal.app.composition import compose
from hal.app.events import EVENT_NAMES, parse_event
from hal.console import ConsolePresenter, ConsoleSurface, run_script
from hal.infra.config import HalConfig, load_default_env_files, load_hal_config
from hal.infra.logging import setup_logging
from screenwire.runtime.logging import shutdown_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hal", description="Talk to HAL 9000.")
    intent = parser.add_mutually_exclusive_group()
    intent.add_argument("--kill-dave", dest="kill_dave", action="store_true", default=None)
    intent.add_argument("--spare-dave", dest="kill_dave", action="store_false")
    parser.add_argument("--oxygen", type=float, default=None, help="oxygen reserve ratio (0..1)")
    parser.add_argument("--mission-day", type=date.fromisoformat, default=None, help="YYYY-MM-DD")
    parser.add_argument("--qt", action="store_true", help="open the PyQt6 window instead of the console")
    parser.add_argument("events", nargs="*", metavar="EVENT", help=f"one of: {', '.join(EVENT_NAMES)}")
    parser.set_defaults(kill_dave=None)
    return parser


def resolve_config(args: argparse.Namespace, base: HalConfig) -> HalConfig:
    """Apply command-line overrides on top of env configuration."""
    config = base
    if args.kill_dave is not None:
        config = replace(config, kill_dave=args.kill_dave)
    if args.oxygen is not None:
        config = replace(config, oxygen_ratio=args.oxygen)
    if args.mission_day is not None:
        config = replace(config, mission_day=args.mission_day)
    return config


def main(argv: Sequence[str] | None = None) -> int:
    """Run HAL over scripted console events or in a Qt window."""
    load_default_env_files(override_existing=False)
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        events = [parse_event(name) for name in args.events]
    except ValueError as exc:
        parser.error(str(exc))
    config = resolve_config(args, load_hal_config())
    setup_logging(config)
    try:
        if args.qt:
            from hal.qt.bootstrap import run_qt

            return run_qt(config)
        presenter = ConsolePresenter(sys.stdout)
        application = compose(config, surface_factory=partial(ConsoleSurface, stream=sys.stdout))
        application.start(presenter)
        unmatched = run_script(presenter, events)
        logger.info("session_done events=%d unmatched=%d", len(events), unmatched)
        return 0
    finally:
        shutdown_logging()
