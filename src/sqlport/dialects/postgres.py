"""
PostgreSQL dialect implementation.
"""

from __future__ import annotations

from typing import Final

from ..query.pagination import LimitOffsetClausePagination
from .base import DEFAULT_CONFIG, ConfiguredDialect, Dialect, DialectCapabilities
from .signals import ErrorClassifier, SignalSource

UNIQUE_VIOLATION_SQL_STATE: Final[str] = "23505"
QUERY_CANCELED_SQL_STATE: Final[str] = "57014"

POSTGRES_CONFIG = DEFAULT_CONFIG.merge(
    name="postgresql",
    capabilities=DialectCapabilities(
        supports_offset=True,
        supports_sequence=True,
        supports_identity=True,
        supports_identity_with_batch_insert=True,
    ),
    pagination=LimitOffsetClausePagination(),
    errors=ErrorClassifier(
        source=SignalSource.SQL_STATE,
        duplicate=frozenset({UNIQUE_VIOLATION_SQL_STATE}),
        timeout=frozenset({QUERY_CANCELED_SQL_STATE}),
    ),
    sequence_sql="select nextval('{name}')",
)


class PostgresDialect(ConfiguredDialect):
    """
    PostgreSQL dialect; offset-only windows need no row count sentinel.
    """

    def __init__(self) -> None:
        super().__init__(POSTGRES_CONFIG)


def get_postgres_dialect() -> Dialect:
    return PostgresDialect()
