"""OpenSearch client and operations."""
from opensearch_metrics_core.search.opensearch.client import get_client
from opensearch_metrics_core.search.opensearch.mapping import get_index_body
from opensearch_metrics_core.search.opensearch.index import (
    index_exists,
    create_index_if_not_exists,
    delete_index,
)
from opensearch_metrics_core.search.opensearch.bulk import bulk_index, partition_documents
from opensearch_metrics_core.search.opensearch.documents import delete_document, get_document
from opensearch_metrics_core.search.opensearch.query import search
from opensearch_metrics_core.search.opensearch.service import IndexService

__all__ = [
    "get_client",
    "get_index_body",
    "index_exists",
    "create_index_if_not_exists",
    "delete_index",
    "bulk_index",
    "partition_documents",
    "delete_document",
    "get_document",
    "search",
    "IndexService",
]
