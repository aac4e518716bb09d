import sqlite3

import pytest

from sqlport.dialects import FailureCategory, SQLiteDialect, UnsupportedDialectOperationError
from sqlport.query import SelectOption


def test_sqlite_capabilities():
    dialect = SQLiteDialect()
    assert dialect.supports_offset() is True
    assert dialect.supports_sequence() is False
    assert dialect.supports_identity() is True
    assert dialect.supports_identity_with_batch_insert() is False


def test_sqlite_unique_violation_is_duplicate(hundred_rows):
    dialect = SQLiteDialect()
    with pytest.raises(sqlite3.IntegrityError) as excinfo:
        hundred_rows.execute("INSERT INTO dialect (entity_id, str) VALUES (?, ?)", (101, "name_0"))
    assert dialect.is_duplicate_exception(excinfo.value)
    assert dialect.classify_failure(excinfo.value) is FailureCategory.DUPLICATE


def test_sqlite_primary_key_violation_is_duplicate(hundred_rows):
    dialect = SQLiteDialect()
    with pytest.raises(sqlite3.IntegrityError) as excinfo:
        hundred_rows.execute("INSERT INTO dialect (entity_id, str) VALUES (?, ?)", (1, "fresh"))
    assert dialect.is_duplicate_exception(excinfo.value)


def test_sqlite_other_errors_unclassified(hundred_rows):
    dialect = SQLiteDialect()
    with pytest.raises(sqlite3.OperationalError) as excinfo:
        hundred_rows.execute("SELECT * FROM missing_table")
    assert not dialect.is_duplicate_exception(excinfo.value)
    assert not dialect.is_transaction_timeout_error(excinfo.value)
    assert dialect.classify_failure(excinfo.value) is FailureCategory.UNCLASSIFIED


def test_sqlite_interrupt_is_timeout():
    assert SQLiteDialect().is_transaction_timeout_error(9)


def test_sqlite_pagination_executes(hundred_rows):
    dialect = SQLiteDialect()
    sql = dialect.convert_pagination_sql("select entity_id from dialect order by entity_id", SelectOption(5, 10))
    assert [row[0] for row in hundred_rows.execute(sql)] == list(range(6, 16))


def test_sqlite_offset_only_returns_all_remaining_rows(hundred_rows):
    dialect = SQLiteDialect()
    sql = dialect.convert_pagination_sql(
        "select entity_id from dialect order by entity_id", SelectOption(50, 0)
    )
    assert sql.endswith("LIMIT 50, -1")
    assert [row[0] for row in hundred_rows.execute(sql)] == list(range(51, 101))


def test_sqlite_sequence_unsupported():
    with pytest.raises(UnsupportedDialectOperationError) as excinfo:
        SQLiteDialect().build_sequence_generator_sql("seq")
    assert excinfo.value.dialect == "sqlite"
