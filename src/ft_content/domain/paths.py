# domain/paths.py

from collections.abc import Mapping

from .config import API_KEY, API_PARAM


def build_item_path(config: Mapping[str, object], item_id: str) -> str:
    """
    Build the request path for a single content item.

    Returns:
        str: ``api_item_path + item_id + API_PARAM + api_key``.
    """
    return "".join(
        (
            _field(config, "api_item_path"),
            str(item_id),
            API_PARAM,
            _field(config, API_KEY),
        ),
    )


def build_page_path(config: Mapping[str, object], item_id: str) -> str:
    """
    Build the request path for a single site page.

    Returns:
        str: ``page_path + item_id + API_PARAM + api_key``.
    """
    return "".join(
        (
            _field(config, "page_path"),
            str(item_id),
            API_PARAM,
            _field(config, API_KEY),
        ),
    )


def build_page_content_path(config: Mapping[str, object], item_id: str) -> str:
    """
    Build the request path for the main content of a site page.

    Returns:
        str: ``page_path + item_id + page_main_content + API_PARAM + api_key``.
    """
    return "".join(
        (
            _field(config, "page_path"),
            str(item_id),
            _field(config, "page_main_content"),
            API_PARAM,
            _field(config, API_KEY),
        ),
    )


def build_collection_path(config: Mapping[str, object]) -> str:
    """
    Build the request path listing all site pages.

    Returns:
        str: ``page_path + API_PARAM + api_key``.
    """
    return "".join(
        (
            _field(config, "page_path"),
            API_PARAM,
            _field(config, API_KEY),
        ),
    )


def _field(config: Mapping[str, object], key: str) -> str:
    """
    Render a configuration field for concatenation.

    Missing keys and None values render as the empty string, so a malformed
    configuration yields a malformed path rather than an exception.

    Returns:
        str: The field's string form, or "" if absent.
    """
    value = config.get(key)
    return "" if value is None else str(value)
