"""HAL composition root: the single place the object graph is wired."""

from __future__ import annotations

import logging
import weakref
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from hal.app.handlers import HAL_ROUTE, POD_BAY_ROUTE, create_hal_handler, create_pod_bay_handler
from hal.app.screens import open_screen
from hal.app.services import StaticShipSensors
from hal.infra.config import HalConfig
from screenwire.api.display import DisplayContract
from screenwire.api.presentation import Presenter
from screenwire.runtime.plan import CompositionPlan
from screenwire.runtime.router import Router

logger = logging.getLogger(__name__)

type SurfaceFactory = Callable[[str], DisplayContract]


@dataclass(frozen=True, slots=True)
class HalApplication:
    """Wired application: the router owns every screen builder."""

    router: Router
    entry_route: str = HAL_ROUTE

    def start(self, presenter: Presenter) -> None:
        """Bind the platform presenter and show the entry screen."""
        self.router.bind(presenter)
        self.router.present(self.entry_route)


def build_plan(config: HalConfig, *, surface_factory: SurfaceFactory, router: Router) -> CompositionPlan:
    """Declare every HAL builder by name.

    Screens receive the router as a weak reference: the router owns the screen
    builders, so a strong edge back to it would form a cycle.
    """
    plan = CompositionPlan()
    plan.provide("router", weakref.ref(router))
    plan.provide("kill_dave", config.kill_dave)
    plan.provide("oxygen", config.oxygen_ratio)
    plan.provide("mission_day", config.mission_day)

    plan.add("sensors", StaticShipSensors, oxygen="oxygen", day="mission_day")

    plan.add("hal_handler", create_hal_handler, kill_dave="kill_dave")
    plan.add("hal_surface", partial(surface_factory, HAL_ROUTE))
    plan.add(
        "hal_screen",
        partial(open_screen, HAL_ROUTE),
        handler="hal_handler",
        surface="hal_surface",
        router="router",
    )

    plan.add("pod_bay_handler", create_pod_bay_handler, sensors="sensors")
    plan.add("pod_bay_surface", partial(surface_factory, POD_BAY_ROUTE))
    plan.add(
        "pod_bay_screen",
        partial(open_screen, POD_BAY_ROUTE),
        handler="pod_bay_handler",
        surface="pod_bay_surface",
        router="router",
    )
    return plan


def compose(config: HalConfig, *, surface_factory: SurfaceFactory) -> HalApplication:
    """Build the builder graph and register screen routes."""
    router = Router()
    builders = build_plan(config, surface_factory=surface_factory, router=router).assemble()
    router.add_route(HAL_ROUTE, builders["hal_screen"])
    router.add_route(POD_BAY_ROUTE, builders["pod_bay_screen"])
    logger.info("hal_composed routes=%s kill_dave=%s", ",".join(router.routes()), config.kill_dave)
    return HalApplication(router=router)
