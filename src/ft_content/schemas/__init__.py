# schemas/__init__.py

from .events import ItemFailed, ItemReceived

__all__ = [
    "ItemFailed",
    "ItemReceived",
]
