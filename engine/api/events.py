"""Public event bus API contracts."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Protocol, TypeVar

TEvent = TypeVar("TEvent")


@dataclass(frozen=True, slots=True)
class Subscription:
    """Handle returned by `subscribe`; hand it back to `unsubscribe`."""

    event_type: type[object]
    token: int


class EventBus(Protocol):
    """Typed in-process dispatch for game events and their observers."""

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription:
        """Register handler for `event_type` and every subclass of it."""

    def unsubscribe(self, subscription: Subscription) -> None:
        """Drop a registration; unknown handles are ignored."""

    def publish(self, event: object) -> int:
        """Dispatch one event and return how many handlers ran."""

    def publish_all(self, events: Iterable[object]) -> int:
        """Dispatch events in order and return the total handler count."""


def create_event_bus() -> EventBus:
    """Create default event bus implementation."""
    from engine.runtime.events import TypedEventBus

    return TypedEventBus()
