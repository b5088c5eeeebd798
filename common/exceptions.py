from typing import Any, Optional


class GraphRestError(Exception):
    """Base class for graph REST client exceptions."""


class InvalidArgumentError(GraphRestError, ValueError):
    """Raised when a caller breaks an argument contract; no request is sent."""


class TransportFailure(GraphRestError):
    """Raised when the server answers with a non-success status or the transport fails."""

    def __init__(self, message: str, *, code: Optional[int] = None, path: Optional[str] = None, data: Any = None):
        self.code = code
        self.path = path
        self.data = data
        super().__init__(message)


class MalformedResponseError(GraphRestError):
    """Raised when a response body does not have the expected shape."""
