"""OpenSearch single-document operations."""
import structlog
from opensearchpy import NotFoundError, OpenSearch, TransportError

from opensearch_metrics_core.search.errors import DocumentNotFound, TransportFailure
from opensearch_metrics_core.search.types import DeleteOutcome

logger = structlog.get_logger()

INDEX_NOT_FOUND = "index_not_found_exception"


def delete_document(
    client: OpenSearch,
    index_name: str,
    doc_id: str,
    raise_on_missing: bool = False,
    log=None,
) -> DeleteOutcome:
    """Delete a document by id.

    A missing document is logged as an error and reported as
    ``DeleteOutcome.NOT_FOUND``; a missing index is reported as
    ``DeleteOutcome.INDEX_NOT_FOUND``. With ``raise_on_missing`` both raise
    ``DocumentNotFound`` instead.
    """
    log = (log or logger).bind(index=index_name, doc_id=doc_id)
    try:
        resp = client.delete(index=index_name, id=doc_id)
    except NotFoundError as e:
        if e.error == INDEX_NOT_FOUND:
            log.error("index_not_found")
            if raise_on_missing:
                raise DocumentNotFound(
                    f"Index {index_name} not found", index=index_name, doc_id=doc_id
                ) from e
            return DeleteOutcome.INDEX_NOT_FOUND
        resp = {"result": "not_found"}
    except TransportError as e:
        log.error("document_delete_failed", error=str(e))
        raise TransportFailure(f"Failed to remove document {doc_id}: {e}", index=index_name) from e

    if resp.get("result") == "not_found":
        log.error("document_not_found")
        if raise_on_missing:
            raise DocumentNotFound(
                f"Document not found by id: {doc_id}", index=index_name, doc_id=doc_id
            )
        return DeleteOutcome.NOT_FOUND
    return DeleteOutcome.DELETED


def get_document(client: OpenSearch, index_name: str, doc_id: str) -> dict | None:
    """Get a document's source by id. None if it does not exist."""
    try:
        resp = client.get(index=index_name, id=doc_id)
    except NotFoundError:
        return None
    except TransportError as e:
        raise TransportFailure(f"Failed to fetch document {doc_id}: {e}", index=index_name) from e
    return resp.get("_source")
