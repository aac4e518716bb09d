"""
Classification of driver failures into backend-agnostic categories.

A backend reports failures either through a numeric vendor code or through a
SQLSTATE-like string. Each dialect owns one ``ErrorClassifier`` naming the
field it reads and the exact values that mean "duplicate key" or "timeout".
The classifier accepts the raised driver exception or the bare signal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Final, Iterable

from .errors import DialectConfigurationError

# Driver attributes carrying a numeric vendor code, in lookup order:
# mysql-connector, sqlite3 (3.11+), ibm_db style drivers, python-oracledb.
_ERROR_CODE_ATTRIBUTES: Final[tuple[str, ...]] = ("errno", "sqlite_errorcode", "sqlcode", "code")

# psycopg 3 / mysql-connector, psycopg2, generic wrappers.
_SQL_STATE_ATTRIBUTES: Final[tuple[str, ...]] = ("sqlstate", "pgcode", "sql_state")


class SignalSource(Enum):
    ERROR_CODE = "error_code"
    SQL_STATE = "sql_state"


class FailureCategory(Enum):
    DUPLICATE = "duplicate"
    TIMEOUT = "timeout"
    UNCLASSIFIED = "unclassified"


def _is_code(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def extract_error_code(failure: Any) -> int | None:
    """
    Return the numeric vendor code carried by ``failure``.

    PyMySQL and mysqlclient put the code in ``args[0]``; python-oracledb wraps
    it in an error object exposing ``code``.
    """

    if _is_code(failure):
        return failure
    if failure is None or isinstance(failure, (str, bool)):
        return None
    for attribute in _ERROR_CODE_ATTRIBUTES:
        value = getattr(failure, attribute, None)
        if _is_code(value):
            return value
    args = getattr(failure, "args", None) or ()
    if args:
        first = args[0]
        if _is_code(first):
            return first
        nested = getattr(first, "code", None)
        if _is_code(nested):
            return nested
    return None


def extract_sql_state(failure: Any) -> str | None:
    """
    Return the SQLSTATE-like string carried by ``failure``.
    """

    if isinstance(failure, str):
        return failure
    if failure is None or isinstance(failure, (int, bool)):
        return None
    for attribute in _SQL_STATE_ATTRIBUTES:
        value = getattr(failure, attribute, None)
        if isinstance(value, str):
            return value
    diag = getattr(failure, "diag", None)
    value = getattr(diag, "sqlstate", None)
    if isinstance(value, str):
        return value
    return None


@dataclass(frozen=True)
class ErrorClassifier:
    """
    Exact-match classifier over one signal field.
    """

    source: SignalSource = SignalSource.ERROR_CODE
    duplicate: frozenset[Any] = field(default_factory=frozenset)
    timeout: frozenset[Any] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "duplicate", frozenset(self.duplicate))
        object.__setattr__(self, "timeout", frozenset(self.timeout))
        self._validate(self.duplicate, "duplicate")
        self._validate(self.timeout, "timeout")

    def _validate(self, values: Iterable[Any], label: str) -> None:
        for value in values:
            if self.source is SignalSource.ERROR_CODE and not _is_code(value):
                raise DialectConfigurationError(
                    f"{label} signal {value!r} must be an integer error code"
                )
            if self.source is SignalSource.SQL_STATE and not isinstance(value, str):
                raise DialectConfigurationError(
                    f"{label} signal {value!r} must be a SQLSTATE string"
                )

    def signal_of(self, failure: Any) -> int | str | None:
        if self.source is SignalSource.SQL_STATE:
            return extract_sql_state(failure)
        return extract_error_code(failure)

    def is_duplicate(self, failure: Any) -> bool:
        signal = self.signal_of(failure)
        return signal is not None and signal in self.duplicate

    def is_timeout(self, failure: Any) -> bool:
        signal = self.signal_of(failure)
        return signal is not None and signal in self.timeout

    def classify(self, failure: Any) -> FailureCategory:
        if self.is_duplicate(failure):
            return FailureCategory.DUPLICATE
        if self.is_timeout(failure):
            return FailureCategory.TIMEOUT
        return FailureCategory.UNCLASSIFIED
