# transport/__init__.py

from .config import TransportConfig
from .http import HttpTransport, make_client

__all__ = [
    "HttpTransport",
    "TransportConfig",
    "make_client",
]
