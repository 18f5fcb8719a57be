# _utils/redact.py

import logging
import re

_API_KEY_VALUE = re.compile(r"(apiKey=)[^&\s'\"]*")


def redact_api_key(text: str) -> str:
    """
    Mask every API key value found in a path, URL or message.

    Returns:
        str: The text with each ``apiKey=<value>`` replaced by ``apiKey=***``.
    """
    return _API_KEY_VALUE.sub(r"\1***", text)


class RedactingFilter(logging.Filter):
    """
    Logging filter masking API keys in messages and attached tracebacks.

    Exception messages such as httpx status errors embed the full request
    URL, so the traceback is rendered and masked before any handler sees it.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = redact_api_key(record.getMessage())
        record.args = None

        if record.exc_info and not record.exc_text:
            formatted = logging.Formatter().formatException(record.exc_info)
            record.exc_text = redact_api_key(formatted)

        return True
