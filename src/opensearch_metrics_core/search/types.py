"""Search type definitions."""
from enum import Enum

from pydantic import BaseModel, Field

DEFAULT_BULK_WORKERS = 8
DEFAULT_BULK_BATCH_SIZE = 200
DEFAULT_BULK_TIMEOUT_SECONDS = 600.0
DEFAULT_NUM_REPLICAS = 2


class BulkConfig(BaseModel):
    """Parameters for one bulk indexing call."""

    workers: int = Field(default=DEFAULT_BULK_WORKERS, ge=1)
    batch_size: int = Field(default=DEFAULT_BULK_BATCH_SIZE, ge=1)
    timeout_seconds: float = Field(default=DEFAULT_BULK_TIMEOUT_SECONDS, gt=0)


class BulkSummary(BaseModel):
    """Counts collected while bulk indexing."""

    partitions: int = 0
    batches: int = 0
    indexed: int = 0
    failed: int = 0

    def merge(self, other: "BulkSummary") -> "BulkSummary":
        return BulkSummary(
            partitions=self.partitions + other.partitions,
            batches=self.batches + other.batches,
            indexed=self.indexed + other.indexed,
            failed=self.failed + other.failed,
        )


class DeleteOutcome(str, Enum):
    """Result of a single document deletion."""

    DELETED = "deleted"
    NOT_FOUND = "not_found"
    INDEX_NOT_FOUND = "index_not_found"
