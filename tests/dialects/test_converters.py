from datetime import date, datetime
from decimal import Decimal

import pytest

from sqlport.dialects import (
    DB2Dialect,
    DefaultDialect,
    MySQLDialect,
    NativeValueConverter,
    PostgresDialect,
    SqlType,
    TimestampValueConverter,
    TiDBDialect,
    convert_row,
)


@pytest.mark.parametrize(
    "declared,expected",
    [
        ("DATE", SqlType.DATE),
        ("datetime", SqlType.TIMESTAMP),
        ("TIMESTAMP(6)", SqlType.TIMESTAMP),
        ("timestamp with time zone", SqlType.TIMESTAMP),
        ("VARCHAR(10)", SqlType.VARCHAR),
        ("character varying(20)", SqlType.VARCHAR),
        ("NUMBER(10, 2)", SqlType.DECIMAL),
        ("BIGINT", SqlType.BIGINT),
        ("BYTEA", SqlType.BINARY),
        ("GEOMETRY", SqlType.OTHER),
        (None, SqlType.OTHER),
    ],
)
def test_sql_type_from_declared(declared, expected):
    assert SqlType.from_declared(declared) is expected


def test_timestamp_converter_normalizes_dates():
    converter = TimestampValueConverter()
    assert converter.convert(date(2015, 3, 9), SqlType.DATE) == datetime(2015, 3, 9, 0, 0, 0)
    stamp = datetime(2015, 3, 9, 12, 30, 1)
    assert converter.convert(stamp, SqlType.TIMESTAMP) is stamp
    assert converter.convert(stamp, SqlType.DATE) is stamp


def test_timestamp_converter_passes_other_types():
    converter = TimestampValueConverter()
    assert converter.convert("12345", SqlType.VARCHAR) == "12345"
    assert converter.convert(100, SqlType.INTEGER) == 100
    assert converter.convert(Decimal("12345.54321"), SqlType.DECIMAL) == Decimal("12345.54321")
    assert converter.convert(b"\x00\x50\xff", SqlType.BINARY) == b"\x00\x50\xff"
    assert converter.convert(None, SqlType.DATE) is None


class DecliningConverter:
    def is_convertible(self, sql_type):
        return sql_type is not SqlType.DATE

    def convert(self, value, sql_type):
        return ("converted", value)


def test_every_column_convertible_for_every_dialect():
    for dialect in (DefaultDialect(), MySQLDialect(), TiDBDialect(), PostgresDialect(), DB2Dialect()):
        converter = dialect.get_column_value_converter()
        assert all(converter.is_convertible(sql_type) for sql_type in SqlType)


def test_native_converter_keeps_driver_values():
    converter = NativeValueConverter()
    assert converter.is_convertible(SqlType.DATE)
    assert converter.convert(date(2015, 3, 9), SqlType.DATE) == date(2015, 3, 9)


def test_convert_row():
    row = (1, "12345", date(2015, 3, 9))
    types = (SqlType.BIGINT, SqlType.VARCHAR, SqlType.DATE)
    assert convert_row(TimestampValueConverter(), row, types) == (1, "12345", datetime(2015, 3, 9))
    assert convert_row(NativeValueConverter(), row, types) == row


def test_convert_row_leaves_declined_columns():
    row = (1, date(2015, 3, 9))
    types = (SqlType.INTEGER, SqlType.DATE)
    assert convert_row(DecliningConverter(), row, types) == (("converted", 1), date(2015, 3, 9))


def test_convert_row_rejects_mismatched_types():
    with pytest.raises(ValueError):
        convert_row(TimestampValueConverter(), (1, 2), (SqlType.INTEGER,))
