"""Concurrent bulk indexing into OpenSearch.

Documents are split into contiguous partitions, one thread-pool task per
partition. Each task sends its partition in bulk requests of at most
``BulkConfig.batch_size`` documents. A failed request is logged and the task
moves on to its next batch; only a missed deadline or an unexpected worker
error fails the whole call.
"""
import json
from collections.abc import Mapping
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait

import structlog
from opensearchpy import OpenSearch
from opensearchpy.helpers import bulk

from opensearch_metrics_core.search.errors import BulkIndexError, BulkIndexTimeout
from opensearch_metrics_core.search.types import BulkConfig, BulkSummary

logger = structlog.get_logger()

Partition = list[tuple[str, str]]


def partition_documents(documents: Mapping[str, str], workers: int) -> list[Partition]:
    """Split documents into contiguous partitions of max(1, n // workers) items."""
    items = list(documents.items())
    size = max(1, len(items) // workers)
    return [items[i : i + size] for i in range(0, len(items), size)]


def build_failure_message(errors: list[dict]) -> str:
    """Summarize the failed items returned by ``helpers.bulk``."""
    lines = ["failure in bulk execution:"]
    for i, error in enumerate(errors):
        item = next(iter(error.values()), {})
        reason = item.get("error")
        if isinstance(reason, dict):
            reason = reason.get("reason", reason)
        lines.append(f"[{i}]: index [{item.get('_index')}], id [{item.get('_id')}], message [{reason}]")
    return "\n".join(lines)


def _exec_bulk(client: OpenSearch, actions: list[dict], log) -> tuple[int, int]:
    """Send one bulk request. Returns (indexed, failed) document counts."""
    success, errors = bulk(
        client,
        actions,
        chunk_size=len(actions),
        raise_on_error=False,
        raise_on_exception=False,
    )
    if not errors:
        return success, 0

    # raise_on_exception=False reports a transport failure once per document
    exc = next(iter(errors[0].values()), {}).get("exception")
    if exc is not None:
        log.error("bulk_request_failed", error=str(exc), doc_count=len(actions))
    else:
        log.warning(
            "bulk_index_errors",
            failed_count=len(errors),
            doc_count=len(actions),
            message=build_failure_message(errors),
        )
    return success, len(errors)


def _index_partition(
    client: OpenSearch, index_name: str, partition: Partition, batch_size: int, log
) -> BulkSummary:
    log.info("bulk_partition_started", doc_count=len(partition))
    summary = BulkSummary(partitions=1)
    actions: list[dict] = []

    def flush():
        nonlocal actions
        indexed, failed = _exec_bulk(client, actions, log)
        summary.batches += 1
        summary.indexed += indexed
        summary.failed += failed
        actions = []

    for doc_id, source in partition:
        try:
            doc = json.loads(source)
        except (TypeError, ValueError) as e:
            log.error("invalid_document_json", doc_id=doc_id, error=str(e))
            summary.failed += 1
            continue
        actions.append({"_index": index_name, "_id": doc_id, "_source": doc})
        if len(actions) >= batch_size:
            flush()
    if actions:
        flush()

    log.info("bulk_partition_finished", batches=summary.batches, failed=summary.failed)
    return summary


def bulk_index(
    client: OpenSearch,
    index_name: str,
    documents: Mapping[str, str],
    config: BulkConfig | None = None,
    log=None,
) -> BulkSummary:
    """Bulk index JSON documents keyed by document id.

    Payloads are parsed and re-serialized by the client, so any valid JSON
    text is accepted. A payload that is not valid JSON is logged and counted
    as failed.

    Blocks until every partition has been sent or ``config.timeout_seconds``
    has passed. Raises ``BulkIndexTimeout`` on the deadline and
    ``BulkIndexError`` if a worker fails; per-batch backend failures are only
    logged and counted in the returned summary.
    """
    if not index_name:
        raise ValueError("index_name must not be empty")
    if documents is None:
        raise ValueError("documents must not be None")

    config = config or BulkConfig()
    log = (log or logger).bind(index=index_name)
    if not documents:
        log.info("empty_bulk_index_input")
        return BulkSummary()

    partitions = partition_documents(documents, config.workers)
    log.info(
        "bulk_index_started",
        doc_count=len(documents),
        partitions=len(partitions),
        workers=config.workers,
    )

    executor = ThreadPoolExecutor(max_workers=config.workers, thread_name_prefix="bulk-index")
    try:
        futures = [
            executor.submit(
                _index_partition,
                client,
                index_name,
                partition,
                config.batch_size,
                log.bind(partition=n),
            )
            for n, partition in enumerate(partitions)
        ]
        done, not_done = wait(futures, timeout=config.timeout_seconds, return_when=FIRST_EXCEPTION)

        summary = BulkSummary()
        for future in done:
            exc = future.exception()
            if exc is not None:
                log.error("bulk_index_worker_failed", error=str(exc))
                raise BulkIndexError(f"Bulk indexing into {index_name} failed: {exc}", index=index_name) from exc
            summary = summary.merge(future.result())

        if not_done:
            log.error(
                "bulk_index_timeout",
                timeout_seconds=config.timeout_seconds,
                pending_partitions=len(not_done),
            )
            raise BulkIndexTimeout(
                f"Bulk indexing into {index_name} did not finish within {config.timeout_seconds}s",
                index=index_name,
            )
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    log.info(
        "bulk_index_finished",
        batches=summary.batches,
        indexed=summary.indexed,
        failed=summary.failed,
    )
    return summary
