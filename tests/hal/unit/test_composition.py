from __future__ import annotations

import gc
import logging
import weakref
from dataclasses import replace

import pytest

from hal.app.composition import build_plan, compose
from hal.app.events import BackPressed, DoorTapped, StatusRequested
from hal.app.handlers import DISCONNECT_REFUSAL, DOORS_OPENING, create_pod_bay_handler
from hal.app.payloads import HalSpeech, PodBayStatus
from hal.app.screens import Screen, open_screen
from screenwire.runtime.router import Router
from tests.hal.conftest import RecordingPresenter, RecordingSurface


def test_plan_orders_dependencies_before_screens(config_factory) -> None:
    order = build_plan(config_factory(), surface_factory=RecordingSurface, router=Router()).execution_order()
    assert order.index("sensors") < order.index("pod_bay_handler") < order.index("pod_bay_screen")
    assert order.index("hal_handler") < order.index("hal_screen")
    assert order.index("hal_surface") < order.index("hal_screen")


def test_start_presents_hal_screen_bound_to_its_surface(config_factory) -> None:
    presenter = RecordingPresenter()
    application = compose(config_factory(kill_dave=True), surface_factory=RecordingSurface)
    application.start(presenter)
    screen = presenter.current
    assert isinstance(screen, Screen)
    assert screen.route == "hal"
    assert screen.handler.binding_state == "bound"
    screen.handle(DoorTapped())
    assert screen.surface.shown == [HalSpeech(DISCONNECT_REFUSAL)]


def test_spared_session_walks_to_pod_bay_and_back(config_factory) -> None:
    presenter = RecordingPresenter()
    application = compose(config_factory(kill_dave=False), surface_factory=RecordingSurface)
    application.start(presenter)
    hal_screen = presenter.current
    hal_screen.handle(DoorTapped())
    pod_bay = presenter.current
    assert pod_bay.route == "pod_bay"
    assert hal_screen.surface.shown == [HalSpeech(DOORS_OPENING)]
    pod_bay.handle(StatusRequested())
    assert isinstance(pod_bay.surface.shown[0], PodBayStatus)
    pod_bay.handle(BackPressed())
    assert presenter.current.route == "hal"
    assert presenter.current is not hal_screen
    assert presenter.current.handler is not hal_screen.handler
    assert [screen.route for screen in presenter.presented] == ["hal", "pod_bay", "hal"]


def test_screens_hold_no_strong_reference_to_router(config_factory) -> None:
    presenter = RecordingPresenter()
    application = compose(config_factory(), surface_factory=RecordingSurface)
    application.start(presenter)
    router_ref = weakref.ref(application.router)
    del application
    gc.collect()
    assert router_ref() is None
    assert presenter.current.handler.binding_state == "bound"


def test_misconfigured_sensors_fail_at_build_time(config_factory) -> None:
    presenter = RecordingPresenter()
    application = compose(replace(config_factory(kill_dave=False), oxygen_ratio=1.5), surface_factory=RecordingSurface)
    application.start(presenter)
    with pytest.raises(ValueError, match="oxygen ratio"):
        presenter.current.handle(DoorTapped())
    assert [screen.route for screen in presenter.presented] == ["hal"]


def test_screen_opened_after_router_collected_ignores_navigation(sensors, caplog) -> None:
    router = Router()
    reference = weakref.ref(router)
    del router
    gc.collect()
    surface = RecordingSurface("pod_bay")
    screen = open_screen("pod_bay", handler=create_pod_bay_handler(sensors), surface=surface, router=reference)
    assert screen.handler.binding_state == "bound"
    with caplog.at_level(logging.WARNING, logger="screenwire.runtime.binding"):
        assert screen.handle(BackPressed())
    assert "binding_stale" in caplog.text
