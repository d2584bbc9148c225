from __future__ import annotations

from datetime import date, datetime

import pytest

from screenwire.api.payload import (
    ensure_payload,
    format_date,
    format_duration,
    format_number,
    format_percent,
)
from tests.screenwire.conftest import MutableNote, Note, RecordingDisplay


def test_ensure_payload_accepts_frozen_dataclass_instance() -> None:
    note = Note("hello")
    assert ensure_payload(note) is note


@pytest.mark.parametrize("value", [MutableNote("x"), Note, {"text": "x"}, "text"])
def test_ensure_payload_rejects_mutable_or_non_dataclass_values(value: object) -> None:
    with pytest.raises(TypeError):
        ensure_payload(value)


def test_equal_payloads_render_identically_regardless_of_order() -> None:
    first = RecordingDisplay()
    second = RecordingDisplay()
    first.show(Note("other"))
    first.show(Note("same"))
    second.show(Note("same"))
    second.show(Note("same"))
    assert first.rendered == second.rendered


def test_format_number_grouping_and_decimals() -> None:
    assert format_number(1234567.891, decimals=2) == "1,234,567.89"
    assert format_number(1234.5, grouping=False) == "1234"
    assert format_number(3.5, decimals=-1) == "4"


def test_format_percent() -> None:
    assert format_percent(0.25) == "25%"
    assert format_percent(0.98765, decimals=1) == "98.8%"


def test_format_date_accepts_date_and_datetime() -> None:
    assert format_date(date(2001, 4, 2), pattern="%Y-%m-%d") == "2001-04-02"
    assert format_date(datetime(2001, 4, 2, 23, 59), pattern="%Y-%m-%d") == "2001-04-02"


def test_format_duration() -> None:
    assert format_duration(59.4) == "0:59"
    assert format_duration(3725) == "1:02:05"
    assert format_duration(-3) == "0:00"
