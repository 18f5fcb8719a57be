# ft_content/__init__.py

from .adapters import HttpTransport
from .domain import (
    ERROR,
    ITEM_RECEIVED,
    CallKind,
    ContentClient,
    EventBus,
    InvalidArgumentError,
    TransportError,
)
from .schemas import ItemFailed, ItemReceived

__all__ = [
    "ContentClient",
    "CallKind",
    "EventBus",
    "HttpTransport",
    "ERROR",
    "ITEM_RECEIVED",
    "InvalidArgumentError",
    "TransportError",
    "ItemFailed",
    "ItemReceived",
]
