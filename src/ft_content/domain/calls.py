# domain/calls.py

from collections.abc import Callable, Mapping
from enum import Enum
from typing import NamedTuple

from .config import API_KEY
from .paths import (
    build_collection_path,
    build_item_path,
    build_page_content_path,
    build_page_path,
)


class CallDescriptor(NamedTuple):
    """
    Static description of one supported call shape.

    Attributes:
        keys: Configuration keys the call's path builder reads.
        build_path: Path builder taking (config, item_id), or just (config)
            when ``takes_id`` is False.
        takes_id: Whether the call is dispatched once per item id.
    """

    keys: frozenset[str]
    build_path: Callable[..., str]
    takes_id: bool = True


class CallKind(Enum):
    """
    Enumeration of the four call shapes the client supports.

    Attributes:
        CONTENT: A content item by id.
        PAGE: A site page by id.
        PAGE_CONTENT: The main content of a site page by id.
        PAGES: The collection of all site pages.
    """

    CONTENT = CallDescriptor(
        frozenset({"api_item_path", API_KEY}),
        build_item_path,
    )
    PAGE = CallDescriptor(
        frozenset({"page_path", API_KEY}),
        build_page_path,
    )
    PAGE_CONTENT = CallDescriptor(
        frozenset({"page_path", "page_main_content", API_KEY}),
        build_page_content_path,
    )
    PAGES = CallDescriptor(
        frozenset({"page_path", API_KEY}),
        build_collection_path,
        takes_id=False,
    )


def missing_keys(kind: CallKind, config: Mapping[str, object]) -> frozenset[str]:
    """
    Find the keys a call reads that are absent or None in a configuration.

    Returns:
        frozenset[str]: The missing keys, empty if the config is complete.
    """
    return frozenset(key for key in kind.value.keys if config.get(key) is None)
