# domain/errors.py


class ContentError(Exception):
    """
    Base class for all errors raised by the content client.
    """


class InvalidArgumentError(ContentError, ValueError):
    """
    Raised when a client is constructed with an invalid argument, such as a
    missing or empty API key.
    """


class TransportError(ContentError):
    """
    Wraps a failure reported by the transport for a single request.

    Never raised out of the fetcher; delivered to subscribers through the
    error event, with the transport's exception attached as ``__cause__``.

    Args:
        message (str): Human-readable description of the failure.
        path (str): The request path that failed.
    """

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path
