"""
Backend dialects and their shared contract.
"""

from .base import DEFAULT_CONFIG, ConfiguredDialect, Dialect, DialectCapabilities, DialectConfig
from .converters import (
    ColumnValueConverter,
    NativeValueConverter,
    SqlType,
    TimestampValueConverter,
    convert_row,
)
from .db2 import DB2Dialect
from .default import DefaultDialect
from .errors import DialectConfigurationError, DialectError, UnsupportedDialectOperationError
from .mysql import MySQLDialect
from .oracle import OracleDialect
from .postgres import PostgresDialect
from .registry import available_dialects, dialect_from_env, get_dialect
from .signals import (
    ErrorClassifier,
    FailureCategory,
    SignalSource,
    extract_error_code,
    extract_sql_state,
)
from .sqlite import SQLiteDialect
from .tidb import TiDBDialect

__all__ = [
    "Dialect",
    "DialectCapabilities",
    "DialectConfig",
    "DEFAULT_CONFIG",
    "ConfiguredDialect",
    "DefaultDialect",
    "MySQLDialect",
    "TiDBDialect",
    "PostgresDialect",
    "OracleDialect",
    "DB2Dialect",
    "SQLiteDialect",
    "get_dialect",
    "dialect_from_env",
    "available_dialects",
    "ErrorClassifier",
    "FailureCategory",
    "SignalSource",
    "extract_error_code",
    "extract_sql_state",
    "ColumnValueConverter",
    "NativeValueConverter",
    "TimestampValueConverter",
    "SqlType",
    "convert_row",
    "DialectError",
    "DialectConfigurationError",
    "UnsupportedDialectOperationError",
]
