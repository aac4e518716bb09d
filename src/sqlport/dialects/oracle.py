"""
Oracle dialect implementation.
"""

from __future__ import annotations

from typing import Final

from ..query.pagination import RowNumberPagination
from .base import DEFAULT_CONFIG, ConfiguredDialect, Dialect, DialectCapabilities
from .converters import TimestampValueConverter
from .signals import ErrorClassifier, SignalSource

# ORA-00001: unique constraint violated
UNIQUE_CONSTRAINT_ERROR_CODE: Final[int] = 1
# ORA-01013: user requested cancel of current operation
USER_CANCEL_ERROR_CODE: Final[int] = 1013

ORACLE_CONFIG = DEFAULT_CONFIG.merge(
    name="oracle",
    capabilities=DialectCapabilities(
        supports_offset=True,
        supports_sequence=True,
        supports_identity=False,
        supports_identity_with_batch_insert=False,
    ),
    pagination=RowNumberPagination("ROWNUM"),
    errors=ErrorClassifier(
        source=SignalSource.ERROR_CODE,
        duplicate=frozenset({UNIQUE_CONSTRAINT_ERROR_CODE}),
        timeout=frozenset({USER_CANCEL_ERROR_CODE}),
    ),
    converter=TimestampValueConverter(),
    ping_sql="select 1 from dual",
    sequence_sql="SELECT {name}.NEXTVAL FROM DUAL",
)


class OracleDialect(ConfiguredDialect):
    """
    Oracle dialect paginating through the ``ROWNUM`` pseudo column.
    """

    def __init__(self) -> None:
        super().__init__(ORACLE_CONFIG)


def get_oracle_dialect() -> Dialect:
    return OracleDialect()
