"""Error taxonomy for the petstore assertion kit."""

from enum import Enum
from typing import Iterable, Optional

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    DNS_ERROR = "DNS_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


DNS_FAILURE_MARKERS = (
    "name or service not known",
    "nodename nor servname",
    "temporary failure in name resolution",
    "no address associated with hostname",
    "getaddrinfo failed",
)


class PetstoreKitError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(PetstoreKitError):
    pass


class UnresolvedPlaceholder(PetstoreKitError):
    def __init__(self, path: str, names: Iterable[str]):
        self.path = path
        self.names = list(names)
        super().__init__(
            f"Path template {path!r} has unbound placeholder(s): {', '.join(self.names)}"
        )


class TransportError(PetstoreKitError):
    def __init__(self, message: str, category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR,
                 url: Optional[str] = None):
        self.category = category
        self.url = url
        super().__init__(message)


class PathError(PetstoreKitError):
    """Raised while resolving a body path; recorded as a failed result by evaluate()."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class InvalidPath(PathError):
    pass


class PathNotFound(PathError):
    pass


class IndexOutOfRange(PathError):
    pass


class InvalidBody(PathError):
    pass


class ResponseAssertionError(AssertionError):
    def __init__(self, message: str, results=None):
        self.results = list(results or [])
        super().__init__(message)


def categorize_exception(exc: Exception) -> ErrorCategory:
    """Map httpx request errors to ErrorCategory."""
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    # httpx reports resolver failures as ConnectError carrying the getaddrinfo message
    message = str(exc).lower()
    if any(marker in message for marker in DNS_FAILURE_MARKERS):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.NetworkError, httpx.RemoteProtocolError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR
