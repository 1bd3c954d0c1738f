"""Logging configuration."""
import structlog

from opensearch_metrics_core.settings import get_settings


def configure_logging(json_output: bool | None = None):
    """Configure structured logging.

    Renders JSON unless ``json_output`` (or the LOG_JSON setting) is false.
    """
    if json_output is None:
        json_output = get_settings().log_json
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ]
    )
