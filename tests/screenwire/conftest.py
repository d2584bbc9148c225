from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Note:
    text: str


@dataclass(slots=True)
class MutableNote:
    text: str


class RecordingDisplay:
    def __init__(self) -> None:
        self.shown: list[object] = []
        self.rendered: str | None = None

    def show(self, payload: object) -> None:
        self.shown.append(payload)
        self.rendered = f"{type(payload).__name__}:{payload!r}"


class RecordingPresenter:
    def __init__(self) -> None:
        self.presented: list[object] = []

    def present(self, screen: object) -> None:
        self.presented.append(screen)


class CountingBuilder:
    def __init__(self, factory) -> None:
        self._factory = factory
        self.calls = 0

    def build(self, **arguments: object) -> object:
        self.calls += 1
        return self._factory(**arguments)
