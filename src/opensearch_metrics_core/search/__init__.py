"""Search backend integration."""
from opensearch_metrics_core.search.errors import (
    BulkIndexError,
    BulkIndexTimeout,
    DocumentNotFound,
    ErrorKind,
    SearchBackendError,
    TransportFailure,
)
from opensearch_metrics_core.search.types import BulkConfig, BulkSummary, DeleteOutcome

__all__ = [
    "BulkConfig",
    "BulkSummary",
    "DeleteOutcome",
    "ErrorKind",
    "SearchBackendError",
    "TransportFailure",
    "BulkIndexTimeout",
    "BulkIndexError",
    "DocumentNotFound",
]
