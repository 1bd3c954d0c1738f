"""Errors raised by search backend operations.

Every error carries an ``ErrorKind`` so callers can tell a missing document
apart from a backend that could not be reached or a bulk call that ran out
of time.
"""
from enum import Enum


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    TIMEOUT = "timeout"
    EXECUTION = "execution"
    NOT_FOUND = "not_found"


class SearchBackendError(Exception):
    """Base class for search backend failures. Subclasses set ``kind``."""

    kind: ErrorKind | None = None

    def __init__(self, message: str, index: str | None = None):
        super().__init__(message)
        self.index = index


class TransportFailure(SearchBackendError):
    """The backend could not be reached or rejected the request."""

    kind = ErrorKind.TRANSPORT


class BulkIndexTimeout(SearchBackendError):
    """Bulk indexing did not finish before its deadline."""

    kind = ErrorKind.TIMEOUT


class BulkIndexError(SearchBackendError):
    """A bulk indexing worker failed unexpectedly."""

    kind = ErrorKind.EXECUTION


class DocumentNotFound(SearchBackendError):
    """The requested document does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str, index: str | None = None, doc_id: str | None = None):
        super().__init__(message, index=index)
        self.doc_id = doc_id
