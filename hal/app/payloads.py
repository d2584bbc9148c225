"""Display payloads pushed by HAL screen handlers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from screenwire.api.payload import format_date, format_percent


@dataclass(frozen=True, slots=True)
class HalSpeech:
    """One line spoken by HAL."""

    text: str


@dataclass(frozen=True, slots=True)
class PodBayStatus:
    """Pod bay readout."""

    doors_open: bool
    oxygen_ratio: float
    mission_day: date

    def doors_label(self) -> str:
        return "OPEN" if self.doors_open else "SEALED"

    def oxygen_label(self) -> str:
        return format_percent(self.oxygen_ratio, decimals=1)

    def mission_day_label(self) -> str:
        return format_date(self.mission_day, pattern="%Y-%m-%d")
