"""Utility functions for the scheduler client."""

from scheduler_client.utils.logging import (
    StructuredFormatter,
    configure_structured_logging,
    get_logger,
)

__all__ = [
    "StructuredFormatter",
    "configure_structured_logging",
    "get_logger",
]
