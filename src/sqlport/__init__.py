"""
sqlport public package initialization.

Backend dialects translating pagination, row counting, and failure
classification for the data-access layer.
"""

from .dialects import (  # noqa: F401
    ConfiguredDialect,
    DB2Dialect,
    DefaultDialect,
    Dialect,
    DialectCapabilities,
    DialectConfig,
    DialectConfigurationError,
    DialectError,
    FailureCategory,
    MySQLDialect,
    OracleDialect,
    PostgresDialect,
    SQLiteDialect,
    SqlType,
    TiDBDialect,
    UnsupportedDialectOperationError,
    available_dialects,
    dialect_from_env,
    get_dialect,
)
from .query import SelectOption  # noqa: F401

__all__ = [
    "Dialect",
    "DialectCapabilities",
    "DialectConfig",
    "ConfiguredDialect",
    "DefaultDialect",
    "MySQLDialect",
    "TiDBDialect",
    "PostgresDialect",
    "OracleDialect",
    "DB2Dialect",
    "SQLiteDialect",
    "SelectOption",
    "SqlType",
    "FailureCategory",
    "DialectError",
    "DialectConfigurationError",
    "UnsupportedDialectOperationError",
    "get_dialect",
    "dialect_from_env",
    "available_dialects",
]
