"""
MySQL dialect implementation.
"""

from __future__ import annotations

from typing import Final

from ..query.pagination import LimitOffsetPairPagination
from .base import DEFAULT_CONFIG, ConfiguredDialect, Dialect, DialectCapabilities
from .converters import TimestampValueConverter
from .signals import ErrorClassifier, SignalSource

# ER_DUP_ENTRY (SQLSTATE 23000)
DUP_ENTRY_ERROR_CODE: Final[int] = 1062
# ER_QUERY_TIMEOUT (SQLSTATE HY000)
QUERY_TIMEOUT_ERROR_CODE: Final[int] = 3024
# Largest row count MySQL accepts; stands in for "all remaining rows".
MAX_ROW_COUNT: Final[int] = 18446744073709551615

MYSQL_CONFIG = DEFAULT_CONFIG.merge(
    name="mysql",
    capabilities=DialectCapabilities(
        supports_offset=True,
        supports_sequence=False,
        supports_identity=True,
        supports_identity_with_batch_insert=True,
    ),
    pagination=LimitOffsetPairPagination(max_rows=MAX_ROW_COUNT),
    errors=ErrorClassifier(
        source=SignalSource.ERROR_CODE,
        duplicate=frozenset({DUP_ENTRY_ERROR_CODE}),
        timeout=frozenset({QUERY_TIMEOUT_ERROR_CODE}),
    ),
    converter=TimestampValueConverter(),
)


class MySQLDialect(ConfiguredDialect):
    """
    MySQL dialect classifying failures by vendor error code.
    """

    def __init__(self) -> None:
        super().__init__(MYSQL_CONFIG)


def get_mysql_dialect() -> Dialect:
    return MySQLDialect()
