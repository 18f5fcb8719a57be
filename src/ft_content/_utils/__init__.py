# _utils/__init__.py

from .redact import RedactingFilter, redact_api_key

__all__ = [
    "RedactingFilter",
    "redact_api_key",
]
