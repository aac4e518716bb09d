import pytest

from sqlport.dialects import DefaultDialect, FailureCategory, UnsupportedDialectOperationError
from sqlport.query import SelectOption


def test_default_has_no_capabilities():
    dialect = DefaultDialect()
    assert dialect.supports_offset() is False
    assert dialect.supports_sequence() is False
    assert dialect.supports_identity() is False
    assert dialect.supports_identity_with_batch_insert() is False


def test_default_never_classifies():
    dialect = DefaultDialect()
    assert dialect.is_duplicate_exception(1062) is False
    assert dialect.is_transaction_timeout_error("57014") is False
    assert dialect.classify_failure(RuntimeError("boom")) is FailureCategory.UNCLASSIFIED


def test_default_pagination_is_noop():
    sql = "select * from dual"
    assert DefaultDialect().convert_pagination_sql(sql, SelectOption(5, 10)) == sql


def test_default_count_sql():
    assert (
        DefaultDialect().convert_count_sql("SELECT * FROM DUAL")
        == "SELECT COUNT(*) COUNT_ FROM (SELECT * FROM DUAL) SUB_"
    )


def test_default_sequence_unsupported(caplog):
    with pytest.raises(UnsupportedDialectOperationError):
        DefaultDialect().build_sequence_generator_sql("seq")
    assert any("has no sequences" in record.message for record in caplog.records)


def test_default_ping_sql():
    assert DefaultDialect().get_ping_sql() == "select 1"
