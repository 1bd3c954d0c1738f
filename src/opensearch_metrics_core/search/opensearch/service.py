"""Index service wrapping a shared OpenSearch client."""
from collections.abc import Mapping

import structlog
from opensearchpy import OpenSearch

from opensearch_metrics_core.search.opensearch import bulk, documents, index, query
from opensearch_metrics_core.search.opensearch.client import get_client
from opensearch_metrics_core.search.types import (
    DEFAULT_NUM_REPLICAS,
    BulkConfig,
    BulkSummary,
    DeleteOutcome,
)
from opensearch_metrics_core.settings import Settings, get_settings


class IndexService:
    """Index lifecycle, bulk indexing, deletion and search for one cluster.

    The client is shared by every operation, including all worker threads of
    a bulk call. ``logger`` is any structlog-style logger; it defaults to
    ``structlog.get_logger()``.
    """

    def __init__(
        self,
        client: OpenSearch,
        bulk_config: BulkConfig | None = None,
        num_replicas: int = DEFAULT_NUM_REPLICAS,
        logger=None,
    ):
        self.client = client
        self.bulk_config = bulk_config or BulkConfig()
        self.num_replicas = num_replicas
        self.logger = logger or structlog.get_logger()

    @classmethod
    def from_settings(cls, settings: Settings | None = None, logger=None) -> "IndexService":
        settings = settings or get_settings()
        return cls(
            get_client(settings),
            bulk_config=settings.bulk_config(),
            num_replicas=settings.index_replicas,
            logger=logger,
        )

    def index_exists(self, index_name: str) -> bool:
        return index.index_exists(self.client, index_name)

    def create_index_if_not_exists(self, index_name: str, alias_name: str | None = None) -> bool:
        return index.create_index_if_not_exists(
            self.client,
            index_name,
            alias_name=alias_name,
            num_replicas=self.num_replicas,
            log=self.logger,
        )

    def delete_index(self, index_name: str) -> bool:
        return index.delete_index(self.client, index_name, log=self.logger)

    def bulk_index(self, index_name: str, docs: Mapping[str, str]) -> BulkSummary:
        return bulk.bulk_index(self.client, index_name, docs, config=self.bulk_config, log=self.logger)

    def delete_document(self, index_name: str, doc_id: str, raise_on_missing: bool = False) -> DeleteOutcome:
        return documents.delete_document(
            self.client, index_name, doc_id, raise_on_missing=raise_on_missing, log=self.logger
        )

    def get_document(self, index_name: str, doc_id: str) -> dict | None:
        return documents.get_document(self.client, index_name, doc_id)

    def search(self, body: dict | None = None, index: str | list[str] | None = None, **params) -> dict:
        return query.search(self.client, body=body, index=index, **params)
