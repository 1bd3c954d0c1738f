"""OpenSearch index settings."""
from opensearch_metrics_core.search.types import DEFAULT_NUM_REPLICAS


def get_index_body(num_replicas: int = DEFAULT_NUM_REPLICAS) -> dict:
    """Get the create-index body for a metrics index.

    Mappings are left to dynamic mapping; documents arrive as opaque JSON.
    """
    return {
        "settings": {
            "index": {
                "number_of_replicas": num_replicas,
            }
        }
    }


def get_alias_actions(index_name: str, alias_name: str) -> dict:
    """Get the update-aliases body that points an alias at one index."""
    return {"actions": [{"add": {"index": index_name, "alias": alias_name}}]}
