"""
TiDB dialect implementation.
"""

from __future__ import annotations

from typing import Final

from ..query.pagination import LimitOffsetPairPagination
from .base import DEFAULT_CONFIG, ConfiguredDialect, Dialect, DialectCapabilities
from .converters import TimestampValueConverter
from .signals import ErrorClassifier, SignalSource

# TiDB drivers report the MySQL error number through the state field.
UNIQUE_ERROR_SQL_STATE: Final[str] = "1062"
QUERY_CANCEL_SQL_STATE: Final[str] = "3024"

TIDB_CONFIG = DEFAULT_CONFIG.merge(
    name="tidb",
    capabilities=DialectCapabilities(
        supports_offset=True,
        supports_sequence=True,
        supports_identity=True,
        supports_identity_with_batch_insert=True,
    ),
    pagination=LimitOffsetPairPagination(),
    errors=ErrorClassifier(
        source=SignalSource.SQL_STATE,
        duplicate=frozenset({UNIQUE_ERROR_SQL_STATE}),
        timeout=frozenset({QUERY_CANCEL_SQL_STATE}),
    ),
    converter=TimestampValueConverter(),
    sequence_sql="select nextval({name})",
)


class TiDBDialect(ConfiguredDialect):
    """
    TiDB dialect.

    TiDB cannot express an offset without a row count, so an offset-only
    window is paired with ``MAX_INT`` rows.
    """

    def __init__(self) -> None:
        super().__init__(TIDB_CONFIG)


def get_tidb_dialect() -> Dialect:
    return TiDBDialect()
