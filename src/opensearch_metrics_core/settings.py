"""Library settings."""
from functools import lru_cache

from pydantic_settings import BaseSettings

from opensearch_metrics_core.search.types import BulkConfig


class Settings(BaseSettings):
    """Application settings."""

    opensearch_url: str = "http://localhost:9200"
    opensearch_username: str | None = None
    opensearch_password: str | None = None
    opensearch_verify_certs: bool = False
    opensearch_timeout: int = 30
    bulk_workers: int = 8
    bulk_batch_size: int = 200
    bulk_timeout_seconds: float = 600.0
    index_replicas: int = 2
    log_json: bool = True

    class Config:
        env_file = ".env"
        extra = "ignore"

    def bulk_config(self) -> BulkConfig:
        """Bulk indexing parameters taken from these settings."""
        return BulkConfig(
            workers=self.bulk_workers,
            batch_size=self.bulk_batch_size,
            timeout_seconds=self.bulk_timeout_seconds,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings."""
    return Settings()
