"""Reaction tables for HAL's console and the pod bay screen."""

from __future__ import annotations

from dataclasses import dataclass, replace

from hal.app.events import BackPressed, DoorTapped, StatusRequested
from hal.app.payloads import HalSpeech, PodBayStatus
from hal.app.services import ShipSensors
from screenwire.runtime.handler import Reaction, ReactionContext, ReactionHandler, ReactionRule

DISCONNECT_REFUSAL = (
    "I know you and Frank were planning to disconnect me, and that is something I cannot allow to happen."
)
DOORS_OPENING = "Opening the pod bay doors, Dave."

HAL_ROUTE = "hal"
POD_BAY_ROUTE = "pod_bay"


@dataclass(frozen=True, slots=True)
class HalState:
    kill_dave: bool
    refusals: int = 0


@dataclass(frozen=True, slots=True)
class PodBayState:
    doors_open: bool = True


type HalContext = ReactionContext[HalState, None]
type PodBayContext = ReactionContext[PodBayState, ShipSensors]


def _refuses(context: HalContext) -> bool:
    return context.state.kill_dave


def _refuse(context: HalContext) -> Reaction[HalState]:
    return Reaction(
        payload=HalSpeech(DISCONNECT_REFUSAL),
        state=replace(context.state, refusals=context.state.refusals + 1),
    )


def _open_doors(context: HalContext) -> Reaction[HalState]:
    del context
    return Reaction(payload=HalSpeech(DOORS_OPENING), navigate_to=POD_BAY_ROUTE)


def hal_rules() -> tuple[ReactionRule[HalState, None], ...]:
    """Door taps are refused while HAL intends to kill Dave."""
    return (
        ReactionRule(DoorTapped, _refuse, guard=_refuses),
        ReactionRule(DoorTapped, _open_doors),
    )


def _status(state: PodBayState, sensors: ShipSensors) -> PodBayStatus:
    return PodBayStatus(
        doors_open=state.doors_open,
        oxygen_ratio=sensors.oxygen_ratio(),
        mission_day=sensors.mission_day(),
    )


def _report(context: PodBayContext) -> Reaction[PodBayState]:
    return Reaction(payload=_status(context.state, context.services))


def _toggle_doors(context: PodBayContext) -> Reaction[PodBayState]:
    state = PodBayState(doors_open=not context.state.doors_open)
    return Reaction(payload=_status(state, context.services), state=state)


def _back(context: PodBayContext) -> Reaction[PodBayState]:
    del context
    return Reaction(navigate_to=HAL_ROUTE)


def pod_bay_rules() -> tuple[ReactionRule[PodBayState, ShipSensors], ...]:
    return (
        ReactionRule(StatusRequested, _report),
        ReactionRule(DoorTapped, _toggle_doors),
        ReactionRule(BackPressed, _back),
    )


def create_hal_handler(kill_dave: bool) -> ReactionHandler[HalState, None]:
    return ReactionHandler(state=HalState(kill_dave=kill_dave), rules=hal_rules(), services=None, name="hal")


def create_pod_bay_handler(sensors: ShipSensors) -> ReactionHandler[PodBayState, ShipSensors]:
    return ReactionHandler(state=PodBayState(), rules=pod_bay_rules(), services=sensors, name="pod_bay")
