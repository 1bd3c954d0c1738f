"""OpenSearch index operations."""
import structlog
from opensearchpy import OpenSearch, TransportError

from opensearch_metrics_core.search.errors import TransportFailure
from opensearch_metrics_core.search.opensearch.mapping import get_alias_actions, get_index_body
from opensearch_metrics_core.search.types import DEFAULT_NUM_REPLICAS

logger = structlog.get_logger()


def index_exists(client: OpenSearch, index_name: str) -> bool:
    """Check whether an index exists."""
    try:
        return bool(client.indices.exists(index=index_name))
    except TransportError as e:
        raise TransportFailure(f"Failed to check index {index_name}: {e}", index=index_name) from e


def create_index_if_not_exists(
    client: OpenSearch,
    index_name: str,
    alias_name: str | None = None,
    num_replicas: int = DEFAULT_NUM_REPLICAS,
    log=None,
) -> bool:
    """Create an index unless it exists, optionally attaching an alias.

    The alias is only attached to a freshly created index. If attaching it
    fails the index is left in place.

    Returns True if the index was created, False if it already existed.
    """
    log = (log or logger).bind(index=index_name)
    if index_exists(client, index_name):
        log.info("index_already_exists")
        return False

    log.info("creating_index", replicas=num_replicas)
    try:
        resp = client.indices.create(index=index_name, body=get_index_body(num_replicas))
    except TransportError as e:
        raise TransportFailure(f"Failed to create index {index_name}: {e}", index=index_name) from e
    log.info(
        "created_index",
        acknowledged=resp.get("acknowledged"),
        shards_acknowledged=resp.get("shards_acknowledged"),
    )

    if alias_name:
        try:
            alias_resp = client.indices.update_aliases(body=get_alias_actions(index_name, alias_name))
        except TransportError as e:
            raise TransportFailure(
                f"Failed to attach alias {alias_name} to {index_name}: {e}", index=index_name
            ) from e
        log.info("alias_attached", alias=alias_name, acknowledged=alias_resp.get("acknowledged"))
    return True


def delete_index(client: OpenSearch, index_name: str, log=None) -> bool:
    """Delete an index. Returns False if it did not exist."""
    if not index_exists(client, index_name):
        return False
    try:
        client.indices.delete(index=index_name)
    except TransportError as e:
        raise TransportFailure(f"Failed to delete index {index_name}: {e}", index=index_name) from e
    (log or logger).info("deleted_index", index=index_name)
    return True
