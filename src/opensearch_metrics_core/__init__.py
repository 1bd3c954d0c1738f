"""OpenSearch index management and bulk indexing."""
from opensearch_metrics_core.search.opensearch import IndexService
from opensearch_metrics_core.settings import Settings, get_settings

__all__ = ["IndexService", "Settings", "get_settings"]
