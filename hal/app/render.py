"""Payload to text projection shared by HAL surfaces."""

from __future__ import annotations

from hal.app.payloads import HalSpeech, PodBayStatus
from screenwire.api.payload import Payload


def render_payload(payload: Payload) -> str:
    """Return the single display line for a payload."""
    if isinstance(payload, HalSpeech):
        return f"HAL: {payload.text}"
    if isinstance(payload, PodBayStatus):
        return (
            f"doors={payload.doors_label()} oxygen={payload.oxygen_label()} "
            f"day={payload.mission_day_label()}"
        )
    raise TypeError(f"no rendering for payload {type(payload).__qualname__}")
