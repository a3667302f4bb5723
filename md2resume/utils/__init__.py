"""Utility functions for MD2Resume."""

from md2resume.utils.files import materialize_source
from md2resume.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "materialize_source",
]
