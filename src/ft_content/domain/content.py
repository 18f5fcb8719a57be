# domain/content.py

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from functools import partial
from types import MappingProxyType
from typing import NamedTuple

from ft_content._utils import RedactingFilter, redact_api_key
from ft_content.adapters import HttpTransport
from ft_content.schemas import ItemFailed, ItemReceived

from .calls import CallKind, missing_keys
from .config import create_instance_config, merge_config
from .errors import InvalidArgumentError, TransportError
from .events import ERROR, ITEM_RECEIVED, EventBus

logger = logging.getLogger(__name__)
logger.addFilter(RedactingFilter())

Transport = Callable[[str], Awaitable[object]]
Publish = Callable[[str, object], None]


class FetchRequest(NamedTuple):
    """
    A single request planned by the fetcher, fully resolved before dispatch.

    Attributes:
        item_id: The requested id, or None for a collection call.
        kind: The call kind the request belongs to.
        path: The path handed to the transport.
        config: The effective configuration the path was built from.
    """

    item_id: str | None
    kind: CallKind
    path: str
    config: Mapping[str, object]


class ContentClient:
    """
    Client for the content API's four call shapes.

    Every public getter funnels into fetch_items(), which merges the call's
    configuration over the instance's, builds one path per requested id and
    dispatches each request independently. Results are announced through the
    publish capability as "item_received" or "error" events.

    Args:
        api_key (str): Key appended to every request path.
        transport (Transport | None): Awaitable fetching a path; defaults to
            HttpTransport.
        publish (Publish | None): Callable taking (event, payload); defaults
            to the publish method of an owned EventBus exposed as ``events``.

    Raises:
        InvalidArgumentError: If the API key is missing or empty.
    """

    def __init__(
        self,
        api_key: str | None,
        *,
        transport: Transport | None = None,
        publish: Publish | None = None,
    ) -> None:
        self._config = create_instance_config(api_key)
        self._transport = transport or HttpTransport()
        self.events = EventBus() if publish is None else None
        self._publish = publish or self.events.publish

    @property
    def config(self) -> Mapping[str, object]:
        """
        The read-only instance configuration.
        """
        return self._config

    def get_api_content(
        self,
        item_ids: str | Iterable[str] | None,
        call_config: Mapping[str, object] | None = None,
    ) -> list[asyncio.Task]:
        """Fetch content items by id."""
        return self.fetch_items(item_ids, call_config, CallKind.CONTENT)

    def get_page(
        self,
        item_ids: str | Iterable[str] | None,
        call_config: Mapping[str, object] | None = None,
    ) -> list[asyncio.Task]:
        """Fetch site pages by id."""
        return self.fetch_items(item_ids, call_config, CallKind.PAGE)

    def get_page_main_content(
        self,
        item_ids: str | Iterable[str] | None,
        call_config: Mapping[str, object] | None = None,
    ) -> list[asyncio.Task]:
        """Fetch the main content of site pages by id."""
        return self.fetch_items(item_ids, call_config, CallKind.PAGE_CONTENT)

    def get_pages(
        self,
        call_config: Mapping[str, object] | None = None,
    ) -> list[asyncio.Task]:
        """Fetch the collection of all site pages."""
        return self.fetch_items(None, call_config, CallKind.PAGES)

    def plan_requests(
        self,
        item_ids: str | Iterable[str] | None,
        call_config: Mapping[str, object] | None,
        kind: CallKind,
    ) -> list[FetchRequest]:
        """
        Resolve the effective configuration and paths for a call.

        The call configuration is layered over the instance configuration
        into a fresh mapping, so the instance configuration is never touched.
        Collection calls ignore ``item_ids`` and plan exactly one request.

        Returns:
            list[FetchRequest]: One request per id, or one for a collection.
        """
        effective = MappingProxyType(merge_config(self._config, call_config))
        descriptor = kind.value

        absent = missing_keys(kind, effective)
        if absent:
            logger.warning(
                "Configuration for %s call is missing %s; building path anyway.",
                kind.name,
                ", ".join(sorted(absent)),
            )

        if not descriptor.takes_id:
            path = descriptor.build_path(effective)
            return [FetchRequest(None, kind, path, effective)]

        return [
            FetchRequest(
                item_id,
                kind,
                descriptor.build_path(effective, item_id),
                effective,
            )
            for item_id in _normalise_ids(item_ids)
        ]

    def fetch_items(
        self,
        item_ids: str | Iterable[str] | None,
        call_config: Mapping[str, object] | None,
        kind: CallKind,
    ) -> list[asyncio.Task]:
        """
        Dispatch one request per id and return without waiting.

        All paths are built before the transport is first invoked. Each
        request runs as its own task on the running event loop; a failure on
        one id leaves its siblings untouched. Completion order is unspecified.

        Returns:
            list[asyncio.Task]: One task per request. Each resolves to the
                payload it published and never raises transport errors.

        Raises:
            InvalidArgumentError: If the ids are given as bytes.
            RuntimeError: If called outside a running event loop.
        """
        requests = self.plan_requests(item_ids, call_config, kind)
        return [self._dispatch(request) for request in requests]

    def _dispatch(self, request: FetchRequest) -> asyncio.Task:
        """
        Schedule a request and attach its single completion handler.

        Returns:
            asyncio.Task: The scheduled request.
        """
        logger.debug(
            "Dispatching %s request for %s.",
            request.kind.name,
            request.item_id,
        )

        task = asyncio.get_running_loop().create_task(self._request(request))
        task.add_done_callback(partial(self._on_complete, request))
        return task

    async def _request(self, request: FetchRequest) -> ItemReceived | ItemFailed:
        """
        Invoke the transport and turn its outcome into an event payload.

        Returns:
            ItemReceived | ItemFailed: The payload describing the outcome.
        """
        try:
            data = await self._transport(request.path)
        except Exception as error:
            logger.error(
                "%s request for %s failed: %s",
                request.kind.name,
                request.item_id,
                error,
                exc_info=True,
            )
            return _failure(request, error)

        return ItemReceived(
            item_id=request.item_id,
            kind=request.kind,
            path=request.path,
            data=data,
        )

    def _on_complete(self, request: FetchRequest, task: asyncio.Task) -> None:
        """
        Publish the outcome of a finished request.

        Cancelled requests are reported as failures so that every dispatched
        request yields exactly one event.
        """
        if task.cancelled():
            payload = _failure(request, asyncio.CancelledError())
        else:
            payload = task.result()

        event = ITEM_RECEIVED if isinstance(payload, ItemReceived) else ERROR
        self._publish(event, payload)


def _failure(request: FetchRequest, cause: BaseException) -> ItemFailed:
    """
    Build a failure payload with a TransportError chained to its cause.

    Returns:
        ItemFailed: The failure payload.
    """
    message = f"{request.kind.name} request for {request.item_id} failed: {cause!r}"
    error = TransportError(
        redact_api_key(message),
        path=request.path,
    )
    error.__cause__ = cause
    return ItemFailed(
        item_id=request.item_id,
        kind=request.kind,
        path=request.path,
        error=error,
    )


def _normalise_ids(item_ids: str | Iterable[str] | None) -> tuple[str, ...]:
    """
    Coerce the ids argument into a tuple of ids.

    A single string is one id; None is no ids. Other ids are stringified.

    Raises:
        InvalidArgumentError: If the ids are given as bytes.

    Returns:
        tuple[str, ...]: The ids to fetch, in the order given.
    """
    if item_ids is None:
        return ()
    if isinstance(item_ids, str):
        return (item_ids,)
    if isinstance(item_ids, bytes | bytearray):
        raise InvalidArgumentError("Item ids must be str, not bytes.")
    return tuple(str(item_id) for item_id in item_ids)
