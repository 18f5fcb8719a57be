# domain/events.py

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

# published once per successful fetch
ITEM_RECEIVED = "item_received"

# published once per failed fetch
ERROR = "error"

Handler = Callable[[object], None]


class EventBus:
    """
    Synchronous in-process publish/subscribe hub.

    Handlers run in subscription order on the publisher's thread. A handler
    that raises is logged and skipped; remaining handlers still run and the
    publisher never sees the exception.
    """

    __slots__ = ("_subscribers",)

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Handler]] = {}

    def subscribe(self, event: str, handler: Handler) -> None:
        self._subscribers.setdefault(event, []).append(handler)

    def unsubscribe(self, event: str, handler: Handler) -> None:
        """
        Remove a handler from an event. Unknown handlers are ignored.
        """
        handlers = self._subscribers.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event: str, payload: object) -> None:
        """
        Deliver a payload to every handler subscribed to an event.

        Args:
            event (str): The event name.
            payload (object): The value passed to each handler.
        """
        for handler in list(self._subscribers.get(event, ())):
            try:
                handler(payload)
            except Exception:
                logger.exception("Handler %r failed for event %r.", handler, event)
