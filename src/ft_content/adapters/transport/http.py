# transport/http.py

import logging
from collections.abc import Callable

import httpx

from ft_content._utils import RedactingFilter

from .config import TransportConfig

logger = logging.getLogger(__name__)
logger.addFilter(RedactingFilter())

_config = TransportConfig()


def make_client() -> httpx.AsyncClient:
    """
    Create an async HTTP client bound to the content API host.

    Returns:
        httpx.AsyncClient: Client with base URL, timeout and JSON headers.
    """
    return httpx.AsyncClient(
        base_url=_config.base_url,
        timeout=_config.timeout,
        headers={"Accept": "application/json"},
    )


class HttpTransport:
    """
    Async transport fetching a request path from the content API.

    Each call opens a client from the factory, performs a GET and returns
    the decoded JSON body. Failures propagate to the caller unchanged.
    """

    __slots__ = ("_client_factory",)

    def __init__(
        self,
        *,
        client_factory: Callable[[], httpx.AsyncClient] | None = None,
    ) -> None:
        self._client_factory = client_factory or make_client

    async def __call__(self, path: str) -> object:
        """
        Fetch a request path.

        Returns:
            object: The decoded JSON response body.

        Raises:
            httpx.HTTPStatusError: If the response status is not 2xx.
            httpx.HTTPError: If the request could not be completed.
        """
        async with self._client_factory() as client:
            logger.debug("GET %s", path)
            response = await client.get(path)
            response.raise_for_status()
            return response.json()
