"""
Utility helpers shared across sqlport packages.
"""

from .logging import DialectNameFilter, configure_logging, get_logger

__all__ = ["DialectNameFilter", "configure_logging", "get_logger"]
