# domain/config.py

from collections.abc import Mapping
from types import MappingProxyType

from .errors import InvalidArgumentError

# query separator and key name placed before the API key in every path
API_PARAM = "?apiKey="

# configuration key holding the caller's API key
API_KEY = "api_key"

DEFAULT_CONFIG: Mapping[str, object] = MappingProxyType(
    {
        # content item endpoint, item id is appended
        "api_item_path": "/content/items/v1/",
        # site page endpoint, page id is appended
        "page_path": "/site/v1/pages/",
        # suffix selecting a page's main content
        "page_main_content": "/main-content",
    },
)


def merge_config(
    base: Mapping[str, object],
    override: Mapping[str, object] | None = None,
) -> dict[str, object]:
    """
    Merge an override layer on top of a base configuration.

    Returns a new mapping holding every key of ``base``, with any key also
    present in ``override`` taking the override's value. Neither input is
    mutated. A missing override is treated as an empty mapping.

    Args:
        base (Mapping[str, object]): The lower configuration layer.
        override (Mapping[str, object] | None): The upper layer, if any.

    Returns:
        dict[str, object]: A freshly built merged configuration.
    """
    return {**base, **(override or {})}


def create_instance_config(api_key: str | None) -> Mapping[str, object]:
    """
    Build the per-instance configuration from the defaults and an API key.

    Args:
        api_key (str | None): The caller's API key.

    Returns:
        Mapping[str, object]: Read-only view over the merged configuration.

    Raises:
        InvalidArgumentError: If the API key is missing, empty or not a string.
    """
    if not isinstance(api_key, str) or not api_key:
        raise InvalidArgumentError("A non-empty API key is required.")

    return MappingProxyType(merge_config(DEFAULT_CONFIG, {API_KEY: api_key}))
