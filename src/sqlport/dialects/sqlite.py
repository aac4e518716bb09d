"""
SQLite dialect implementation.
"""

from __future__ import annotations

from typing import Final

from ..query.pagination import LimitOffsetPairPagination
from .base import DEFAULT_CONFIG, ConfiguredDialect, Dialect, DialectCapabilities
from .converters import TimestampValueConverter
from .signals import ErrorClassifier, SignalSource

# Extended result codes, as exposed by ``sqlite3.Error.sqlite_errorcode``.
SQLITE_CONSTRAINT_PRIMARYKEY: Final[int] = 1555
SQLITE_CONSTRAINT_UNIQUE: Final[int] = 2067
SQLITE_INTERRUPT: Final[int] = 9
# A negative LIMIT means no upper bound.
UNBOUNDED_LIMIT: Final[int] = -1

SQLITE_CONFIG = DEFAULT_CONFIG.merge(
    name="sqlite",
    capabilities=DialectCapabilities(
        supports_offset=True,
        supports_sequence=False,
        supports_identity=True,
        supports_identity_with_batch_insert=False,
    ),
    pagination=LimitOffsetPairPagination(max_rows=UNBOUNDED_LIMIT),
    errors=ErrorClassifier(
        source=SignalSource.ERROR_CODE,
        duplicate=frozenset({SQLITE_CONSTRAINT_UNIQUE, SQLITE_CONSTRAINT_PRIMARYKEY}),
        timeout=frozenset({SQLITE_INTERRUPT}),
    ),
    converter=TimestampValueConverter(),
)


class SQLiteDialect(ConfiguredDialect):
    """
    SQLite dialect; identity means ``INTEGER PRIMARY KEY`` rowid aliases.
    """

    def __init__(self) -> None:
        super().__init__(SQLITE_CONFIG)


def get_sqlite_dialect() -> Dialect:
    return SQLiteDialect()
