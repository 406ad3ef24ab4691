"""Utility functions for gadgetbox."""

from gadgetbox.utils.logging import (
    StructuredFormatter,
    configure_logging,
    get_logger,
)

__all__ = [
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
]
