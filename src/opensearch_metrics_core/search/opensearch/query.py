"""OpenSearch query operations."""
from opensearchpy import OpenSearch, TransportError

from opensearch_metrics_core.search.errors import TransportFailure


def search(client: OpenSearch, body: dict | None = None, index: str | list[str] | None = None, **params) -> dict:
    """Run a search request and return the raw response."""
    try:
        return client.search(index=index, body=body, **params)
    except TransportError as e:
        raise TransportFailure(f"Search failed: {e}", index=index if isinstance(index, str) else None) from e
