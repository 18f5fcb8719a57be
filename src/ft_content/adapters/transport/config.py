# transport/config.py

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TransportConfig:
    """
    Immutable configuration for the content API HTTP transport.

    Returns:
        TransportConfig: Immutable configuration object with the API host
            and request timeout.
    """

    # host every request path is resolved against
    base_url: str = "https://api.ft.com"

    # seconds before a request is abandoned
    timeout: float = 30.0
