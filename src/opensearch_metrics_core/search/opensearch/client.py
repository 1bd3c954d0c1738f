"""OpenSearch client factory."""
from opensearchpy import OpenSearch, RequestsHttpConnection

from opensearch_metrics_core.settings import Settings, get_settings


def get_client(settings: Settings | None = None) -> OpenSearch:
    """Create an OpenSearch client from settings.

    The returned client is safe to share between the threads of a bulk
    indexing call.
    """
    settings = settings or get_settings()
    url = settings.opensearch_url

    kwargs = {
        "hosts": [url],
        "use_ssl": url.startswith("https"),
        "verify_certs": settings.opensearch_verify_certs,
        "timeout": settings.opensearch_timeout,
        "connection_class": RequestsHttpConnection,
    }
    if settings.opensearch_username and settings.opensearch_password:
        kwargs["http_auth"] = (settings.opensearch_username, settings.opensearch_password)

    return OpenSearch(**kwargs)
