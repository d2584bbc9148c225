"""Qt widgets implementing HAL display and presentation capabilities."""

from __future__ import annotations

from collections.abc import Callable

from hal.app.events import BackPressed, DoorTapped, StatusRequested
from hal.app.render import render_payload
from hal.app.screens import Screen
from screenwire.api.payload import Payload

try:
    from PyQt6.QtCore import Qt
    from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QStackedWidget, QVBoxLayout, QWidget
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the Qt surface. Install dependency 'PyQt6'.") from exc


class SurfacePage:
    """One screen page: a payload label plus event buttons."""

    def __init__(self, route: str) -> None:
        self.route = route
        self.widget = QWidget()
        self._label = QLabel("")
        self._label.setWordWrap(True)
        self._label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._buttons = QHBoxLayout()
        layout = QVBoxLayout(self.widget)
        layout.addWidget(QLabel(route.replace("_", " ").upper()))
        layout.addWidget(self._label, 1)
        layout.addLayout(self._buttons)
        self._sink: Callable[[object], bool] | None = None
        for text, event_type in (
            ("Open the pod bay doors", DoorTapped),
            ("Status", StatusRequested),
            ("Back", BackPressed),
        ):
            button = QPushButton(text)
            button.clicked.connect(lambda _checked=False, et=event_type: self._emit(et()))
            self._buttons.addWidget(button)

    def text(self) -> str:
        return self._label.text()

    def show(self, payload: Payload) -> None:
        self._label.setText(render_payload(payload))

    def connect_sink(self, sink: Callable[[object], bool]) -> None:
        self._sink = sink

    def _emit(self, event: object) -> None:
        if self._sink is not None:
            self._sink(event)


class StackPresenter(QStackedWidget):
    """Shows one screen page at a time; drops the previous screen."""

    def __init__(self) -> None:
        super().__init__()
        self.current: Screen | None = None

    def present(self, screen: object) -> None:
        if not isinstance(screen, Screen) or not isinstance(screen.surface, SurfacePage):
            raise TypeError(f"stack presenter cannot show {type(screen).__qualname__}")
        page = screen.surface
        page.connect_sink(screen.handler.handle)
        previous = self.currentWidget()
        self.addWidget(page.widget)
        self.setCurrentWidget(page.widget)
        if previous is not None:
            self.removeWidget(previous)
            previous.deleteLater()
        self.current = screen
