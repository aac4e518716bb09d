"""
Dialect strategy interfaces and the shared configuration-driven implementation.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Protocol

from ..query.counting import SHARED_COUNT, CountRewriter
from ..query.options import SelectOption
from ..query.pagination import NoPagination, PaginationRewriter
from ..utils import get_logger
from .converters import ColumnValueConverter, NativeValueConverter
from .errors import DialectConfigurationError, UnsupportedDialectOperationError
from .signals import ErrorClassifier, FailureCategory

logger = get_logger("dialects")


@dataclass(frozen=True)
class DialectCapabilities:
    """
    Feature flags describing backend capabilities.
    """

    supports_offset: bool = False
    supports_sequence: bool = False
    supports_identity: bool = False
    supports_identity_with_batch_insert: bool = False


@dataclass(frozen=True)
class DialectConfig:
    """
    Flat record holding everything that differs between backends.

    Backends start from ``DEFAULT_CONFIG`` and ``merge`` their overrides, so
    the effective behavior of a dialect can be inspected in one place.
    ``sequence_sql`` is a ``str.format`` template with a ``{name}`` field.
    """

    name: str
    capabilities: DialectCapabilities = field(default_factory=DialectCapabilities)
    pagination: PaginationRewriter = field(default_factory=NoPagination)
    counting: CountRewriter = SHARED_COUNT
    errors: ErrorClassifier = field(default_factory=ErrorClassifier)
    converter: ColumnValueConverter = field(default_factory=NativeValueConverter)
    ping_sql: str = "select 1"
    sequence_sql: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise DialectConfigurationError("Dialect name must not be empty.")
        if self.capabilities.supports_sequence and not self.sequence_sql:
            raise DialectConfigurationError(
                f"Dialect '{self.name}' supports sequences but defines no sequence SQL."
            )
        if not self.capabilities.supports_sequence and self.sequence_sql:
            raise DialectConfigurationError(
                f"Dialect '{self.name}' defines sequence SQL without supporting sequences."
            )
        if self.capabilities.supports_identity_with_batch_insert and not self.capabilities.supports_identity:
            raise DialectConfigurationError(
                f"Dialect '{self.name}' cannot batch insert identity columns without identity support."
            )
        if not self.ping_sql:
            raise DialectConfigurationError(f"Dialect '{self.name}' must define a ping SQL.")

    def merge(self, **overrides: Any) -> "DialectConfig":
        return replace(self, **overrides)


DEFAULT_CONFIG = DialectConfig(name="default")


class Dialect(Protocol):
    """
    Strategy interface consumed by the data-access layer.
    """

    @property
    def name(self) -> str: ...

    @property
    def capabilities(self) -> DialectCapabilities: ...

    def is_duplicate_exception(self, failure: Any) -> bool: ...

    def is_transaction_timeout_error(self, failure: Any) -> bool: ...

    def classify_failure(self, failure: Any) -> FailureCategory: ...

    def supports_offset(self) -> bool: ...

    def supports_sequence(self) -> bool: ...

    def supports_identity(self) -> bool: ...

    def supports_identity_with_batch_insert(self) -> bool: ...

    def convert_pagination_sql(self, sql: str, select_option: SelectOption) -> str: ...

    def convert_count_sql(self, sql: str) -> str: ...

    def build_sequence_generator_sql(self, sequence_name: str) -> str: ...

    def get_ping_sql(self) -> str: ...

    def get_column_value_converter(self) -> ColumnValueConverter: ...


class ConfiguredDialect:
    """
    Dialect whose behavior is read entirely from a ``DialectConfig``.

    Instances hold no state besides the frozen configuration and may be
    shared across threads.
    """

    __slots__ = ("_config",)

    def __init__(self, config: DialectConfig) -> None:
        self._config = config

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    @property
    def config(self) -> DialectConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def capabilities(self) -> DialectCapabilities:
        return self._config.capabilities

    # ------------------------------------------------------------------ #
    # Failure classification
    # ------------------------------------------------------------------ #
    def is_duplicate_exception(self, failure: Any) -> bool:
        return self._config.errors.is_duplicate(failure)

    def is_transaction_timeout_error(self, failure: Any) -> bool:
        return self._config.errors.is_timeout(failure)

    def classify_failure(self, failure: Any) -> FailureCategory:
        return self._config.errors.classify(failure)

    # ------------------------------------------------------------------ #
    # Capabilities
    # ------------------------------------------------------------------ #
    def supports_offset(self) -> bool:
        return self._config.capabilities.supports_offset

    def supports_sequence(self) -> bool:
        return self._config.capabilities.supports_sequence

    def supports_identity(self) -> bool:
        return self._config.capabilities.supports_identity

    def supports_identity_with_batch_insert(self) -> bool:
        return self._config.capabilities.supports_identity_with_batch_insert

    # ------------------------------------------------------------------ #
    # SQL generation
    # ------------------------------------------------------------------ #
    def convert_pagination_sql(self, sql: str, select_option: SelectOption) -> str:
        converted = self._config.pagination.rewrite(sql, select_option)
        logger.debug(
            "Pagination SQL converted for %s",
            self.name,
            extra={
                "dialect": self.name,
                "sql": converted,
                "offset": select_option.offset,
                "limit": select_option.limit,
            },
        )
        return converted

    def convert_count_sql(self, sql: str) -> str:
        converted = self._config.counting.rewrite(sql)
        logger.debug(
            "Count SQL converted for %s", self.name, extra={"dialect": self.name, "sql": converted}
        )
        return converted

    def build_sequence_generator_sql(self, sequence_name: str) -> str:
        template = self._config.sequence_sql
        if not self.supports_sequence() or template is None:
            logger.warning(
                "Sequence SQL requested from %s, which has no sequences",
                self.name,
                extra={"dialect": self.name, "sequence": sequence_name},
            )
            raise UnsupportedDialectOperationError(self.name, "sequence generation")
        return template.format(name=sequence_name)

    def get_ping_sql(self) -> str:
        return self._config.ping_sql

    def get_column_value_converter(self) -> ColumnValueConverter:
        return self._config.converter
