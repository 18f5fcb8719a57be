# schemas/events.py

from typing import Any

from pydantic import BaseModel, ConfigDict

from ft_content.domain.calls import CallKind
from ft_content.domain.errors import TransportError


class ItemReceived(BaseModel):
    """
    Payload published when a fetch completes successfully.

    Attributes:
        item_id: The requested item id, or None for a collection call.
        kind: The call kind that produced the request.
        path: The request path handed to the transport.
        data: The decoded response returned by the transport.
    """

    model_config = ConfigDict(frozen=True)

    item_id: str | None
    kind: CallKind
    path: str
    data: Any = None


class ItemFailed(BaseModel):
    """
    Payload published when a fetch fails.

    Attributes:
        item_id: The requested item id, or None for a collection call.
        kind: The call kind that produced the request.
        path: The request path handed to the transport.
        error: The transport error, chained to the underlying cause.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    item_id: str | None
    kind: CallKind
    path: str
    error: TransportError
