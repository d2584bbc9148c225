"""Console surface and presenter for scripted HAL sessions."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from hal.app.render import render_payload
from hal.app.screens import Screen
from screenwire.api.payload import Payload

logger = logging.getLogger(__name__)


class ConsoleSurface:
    """Writes one rendered line per shown payload."""

    def __init__(self, route: str, stream: TextIO | None = None) -> None:
        self._route = route
        self._stream = stream if stream is not None else sys.stdout
        self.last_rendered: str | None = None

    def show(self, payload: Payload) -> None:
        line = render_payload(payload)
        self.last_rendered = line
        self._stream.write(f"[{self._route}] {line}\n")


class ConsolePresenter:
    """Keeps the current screen and announces screen changes."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self.current: Screen | None = None

    def present(self, screen: object) -> None:
        if not isinstance(screen, Screen):
            raise TypeError(f"console presenter cannot show {type(screen).__qualname__}")
        self.current = screen
        self._stream.write(f"== {screen.route} ==\n")


def run_script(presenter: ConsolePresenter, events: Iterable[object]) -> int:
    """Deliver events to whichever screen is current; return unmatched count."""
    unmatched = 0
    for event in events:
        screen = presenter.current
        if screen is None:
            raise RuntimeError("no screen presented")
        if not screen.handle(event):
            unmatched += 1
            logger.info(
                "event_ignored route=%s event=%s",
                screen.route,
                type(event).__qualname__,
                extra={"route": screen.route},
            )
    return unmatched
