# adapters/__init__.py

from .transport import HttpTransport, TransportConfig, make_client

__all__ = [
    "HttpTransport",
    "TransportConfig",
    "make_client",
]
