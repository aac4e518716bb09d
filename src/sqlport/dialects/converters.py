"""
Per-column value coercion applied while reading result rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Protocol, Sequence


class SqlType(Enum):
    """
    Generic SQL column types reported by a result cursor.
    """

    CHAR = "char"
    VARCHAR = "varchar"
    CLOB = "clob"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    BIGINT = "bigint"
    DECIMAL = "decimal"
    FLOAT = "float"
    DATE = "date"
    TIME = "time"
    TIMESTAMP = "timestamp"
    BINARY = "binary"
    BLOB = "blob"
    OTHER = "other"

    @classmethod
    def from_declared(cls, declared: str | None) -> "SqlType":
        """
        Map a declared column type such as ``VARCHAR(10)`` onto a ``SqlType``.
        """

        if not declared:
            return cls.OTHER
        base = declared.split("(", 1)[0].strip().upper()
        if base.startswith("TIMESTAMP"):
            return cls.TIMESTAMP
        return _DECLARED_TYPES.get(base, cls.OTHER)


_DECLARED_TYPES: dict[str, SqlType] = {
    "CHAR": SqlType.CHAR,
    "NCHAR": SqlType.CHAR,
    "CHARACTER": SqlType.CHAR,
    "VARCHAR": SqlType.VARCHAR,
    "VARCHAR2": SqlType.VARCHAR,
    "NVARCHAR": SqlType.VARCHAR,
    "NVARCHAR2": SqlType.VARCHAR,
    "CHARACTER VARYING": SqlType.VARCHAR,
    "TEXT": SqlType.CLOB,
    "CLOB": SqlType.CLOB,
    "BOOLEAN": SqlType.BOOLEAN,
    "BOOL": SqlType.BOOLEAN,
    "INT": SqlType.INTEGER,
    "INTEGER": SqlType.INTEGER,
    "SMALLINT": SqlType.INTEGER,
    "TINYINT": SqlType.INTEGER,
    "MEDIUMINT": SqlType.INTEGER,
    "BIGINT": SqlType.BIGINT,
    "DECIMAL": SqlType.DECIMAL,
    "NUMERIC": SqlType.DECIMAL,
    "NUMBER": SqlType.DECIMAL,
    "REAL": SqlType.FLOAT,
    "FLOAT": SqlType.FLOAT,
    "DOUBLE": SqlType.FLOAT,
    "DOUBLE PRECISION": SqlType.FLOAT,
    "DATE": SqlType.DATE,
    "TIME": SqlType.TIME,
    "DATETIME": SqlType.TIMESTAMP,
    "BINARY": SqlType.BINARY,
    "VARBINARY": SqlType.BINARY,
    "BYTEA": SqlType.BINARY,
    "RAW": SqlType.BINARY,
    "BLOB": SqlType.BLOB,
}


class ColumnValueConverter(Protocol):
    """
    Converts one raw column value into the value handed to callers.
    """

    def is_convertible(self, sql_type: SqlType) -> bool: ...

    def convert(self, value: Any, sql_type: SqlType) -> Any: ...


@dataclass(frozen=True)
class NativeValueConverter:
    """
    Accepts every column and returns the driver's own value unchanged.
    """

    def is_convertible(self, sql_type: SqlType) -> bool:
        return True

    def convert(self, value: Any, sql_type: SqlType) -> Any:
        return value


@dataclass(frozen=True)
class TimestampValueConverter:
    """
    Returns DATE columns in the same representation as TIMESTAMP columns.
    """

    def is_convertible(self, sql_type: SqlType) -> bool:
        return True

    def convert(self, value: Any, sql_type: SqlType) -> Any:
        if sql_type is SqlType.DATE and isinstance(value, date) and not isinstance(value, datetime):
            return datetime.combine(value, time.min)
        return value


def convert_row(
    converter: ColumnValueConverter, row: Sequence[Any], sql_types: Sequence[SqlType]
) -> tuple[Any, ...]:
    if len(row) != len(sql_types):
        raise ValueError(
            f"Row has {len(row)} columns but {len(sql_types)} column types were given."
        )
    converted = []
    for value, sql_type in zip(row, sql_types):
        if converter.is_convertible(sql_type):
            converted.append(converter.convert(value, sql_type))
        else:
            converted.append(value)
    return tuple(converted)
