"""
Fallback dialect for backends without dedicated support.
"""

from __future__ import annotations

from .base import DEFAULT_CONFIG, ConfiguredDialect, Dialect


class DefaultDialect(ConfiguredDialect):
    """
    Dialect advertising no optional capabilities.

    Pagination leaves the SQL untouched so callers page in memory, and no
    failure is ever classified.
    """

    def __init__(self) -> None:
        super().__init__(DEFAULT_CONFIG)


def get_default_dialect() -> Dialect:
    return DefaultDialect()
