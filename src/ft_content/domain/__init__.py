# domain/__init__.py

from .calls import CallDescriptor, CallKind, missing_keys
from .config import (
    API_KEY,
    API_PARAM,
    DEFAULT_CONFIG,
    create_instance_config,
    merge_config,
)
from .content import ContentClient, FetchRequest
from .errors import ContentError, InvalidArgumentError, TransportError
from .events import ERROR, ITEM_RECEIVED, EventBus
from .paths import (
    build_collection_path,
    build_item_path,
    build_page_content_path,
    build_page_path,
)

__all__ = [
    # calls
    "CallDescriptor",
    "CallKind",
    "missing_keys",
    # config
    "API_KEY",
    "API_PARAM",
    "DEFAULT_CONFIG",
    "create_instance_config",
    "merge_config",
    # content
    "ContentClient",
    "FetchRequest",
    # errors
    "ContentError",
    "InvalidArgumentError",
    "TransportError",
    # events
    "ERROR",
    "ITEM_RECEIVED",
    "EventBus",
    # paths
    "build_collection_path",
    "build_item_path",
    "build_page_content_path",
    "build_page_path",
]
