"""Ship services injected into HAL handlers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Protocol


class ShipSensors(Protocol):
    """Read-only ship telemetry."""

    def oxygen_ratio(self) -> float: ...

    def mission_day(self) -> date: ...


@dataclass(frozen=True, slots=True)
class StaticShipSensors:
    """Telemetry fixed at startup from configuration."""

    oxygen: float
    day: date

    def __post_init__(self) -> None:
        if not 0.0 <= self.oxygen <= 1.0:
            raise ValueError(f"oxygen ratio out of range: {self.oxygen}")

    def oxygen_ratio(self) -> float:
        return self.oxygen

    def mission_day(self) -> date:
        return self.day
