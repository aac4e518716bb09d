"""
DB2 dialect implementation.
"""

from __future__ import annotations

from typing import Final

from ..query.pagination import RowNumberPagination
from .base import DEFAULT_CONFIG, ConfiguredDialect, Dialect, DialectCapabilities
from .signals import ErrorClassifier, SignalSource

DUPLICATE_KEY_SQL_STATE: Final[str] = "23505"
INTERRUPTED_SQL_STATE: Final[str] = "57014"

DB2_CONFIG = DEFAULT_CONFIG.merge(
    name="db2",
    capabilities=DialectCapabilities(
        supports_offset=True,
        supports_sequence=True,
        supports_identity=True,
        supports_identity_with_batch_insert=False,
    ),
    pagination=RowNumberPagination("ROW_NUMBER() OVER()"),
    errors=ErrorClassifier(
        source=SignalSource.SQL_STATE,
        duplicate=frozenset({DUPLICATE_KEY_SQL_STATE}),
        timeout=frozenset({INTERRUPTED_SQL_STATE}),
    ),
    ping_sql="SELECT 1 FROM SYSIBM.SYSDUMMY1",
    sequence_sql="SELECT NEXTVAL FOR {name} FROM SYSIBM.SYSDUMMY1",
)


class DB2Dialect(ConfiguredDialect):
    def __init__(self) -> None:
        super().__init__(DB2_CONFIG)


def get_db2_dialect() -> Dialect:
    return DB2Dialect()
