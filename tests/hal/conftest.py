from __future__ import annotations

from datetime import date

import pytest

from hal.app.services import StaticShipSensors
from hal.infra.config import HalConfig


class RecordingSurface:
    def __init__(self, route: str = "test") -> None:
        self.route = route
        self.shown: list[object] = []

    def show(self, payload: object) -> None:
        self.shown.append(payload)


class RecordingPresenter:
    def __init__(self) -> None:
        self.presented: list[object] = []

    @property
    def current(self):
        return self.presented[-1] if self.presented else None

    def present(self, screen: object) -> None:
        self.presented.append(screen)


@pytest.fixture
def sensors() -> StaticShipSensors:
    return StaticShipSensors(oxygen=0.875, day=date(2001, 4, 2))


@pytest.fixture
def config_factory():
    def _make(kill_dave: bool = True) -> HalConfig:
        return HalConfig(kill_dave=kill_dave, oxygen_ratio=0.875, mission_day=date(2001, 4, 2))

    return _make
