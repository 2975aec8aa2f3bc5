"""Type-keyed synchronous event dispatch."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from engine.api.events import Subscription

TEvent = TypeVar("TEvent")
Handler = Callable[[Any], None]


class TypedEventBus:
    """Handlers are filed under the type they subscribed to.

    Publishing walks the event's MRO, so a handler for a base class also sees
    subclasses. Matching handlers run inline in the order they subscribed.
    """

    def __init__(self) -> None:
        self._next_token = 1
        self._handlers: dict[type[object], dict[int, Handler]] = {}

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription:
        token = self._next_token
        self._next_token += 1
        self._handlers.setdefault(event_type, {})[token] = handler
        return Subscription(event_type=event_type, token=token)

    def unsubscribe(self, subscription: Subscription) -> None:
        handlers = self._handlers.get(subscription.event_type)
        if handlers is None:
            return
        handlers.pop(subscription.token, None)
        if not handlers:
            del self._handlers[subscription.event_type]

    def publish(self, event: object) -> int:
        matched: list[tuple[int, Handler]] = []
        for event_type in type(event).__mro__:
            handlers = self._handlers.get(event_type)
            if handlers:
                matched.extend(handlers.items())
        matched.sort(key=lambda item: item[0])
        for _, handler in matched:
            handler(event)
        return len(matched)

    def publish_all(self, events: Iterable[object]) -> int:
        return sum(self.publish(event) for event in events)
