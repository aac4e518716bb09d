"""
Pagination rewriters turning an opaque query into a windowed query.

Every rewriter treats the incoming SQL as text: it either appends a trailing
clause or wraps the statement in a numbered subquery. A window with neither
an offset nor a limit returns the SQL untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Protocol

from .options import SelectOption

MAX_INT: Final[int] = 2147483647


class PaginationRewriter(Protocol):
    """
    Strategy that restricts a query to the rows described by a ``SelectOption``.
    """

    def rewrite(self, sql: str, option: SelectOption) -> str: ...


@dataclass(frozen=True)
class NoPagination:
    """
    Leaves the SQL unchanged for backends that cannot skip rows server side.
    """

    def rewrite(self, sql: str, option: SelectOption) -> str:
        return sql


@dataclass(frozen=True)
class LimitOffsetPairPagination:
    """
    Appends ``LIMIT <offset>, <count>`` (MySQL family).

    The engine has no "unlimited" keyword, so an offset-only window uses
    ``max_rows`` as the row count.
    """

    max_rows: int = MAX_INT

    def rewrite(self, sql: str, option: SelectOption) -> str:
        if option.has_limit:
            if option.has_offset:
                return f"{sql} LIMIT {option.offset}, {option.limit}"
            return f"{sql} LIMIT {option.limit}"
        if option.has_offset:
            return f"{sql} LIMIT {option.offset}, {self.max_rows}"
        return sql


@dataclass(frozen=True)
class LimitOffsetClausePagination:
    """
    Appends ``LIMIT <count> OFFSET <offset>``, each part only when set.
    """

    def rewrite(self, sql: str, option: SelectOption) -> str:
        parts: list[str] = []
        if option.has_limit:
            parts.append(f"LIMIT {option.limit}")
        if option.has_offset:
            parts.append(f"OFFSET {option.offset}")
        if not parts:
            return sql
        return f"{sql} {' '.join(parts)}"


@dataclass(frozen=True)
class RowNumberPagination:
    """
    Wraps the query and filters on a 1-based row counter.

    ``row_number_expression`` is ``ROWNUM`` for Oracle and a window function
    such as ``ROW_NUMBER() OVER()`` elsewhere. The lower bound is exclusive,
    so an offset of 5 starts at the sixth row.
    """

    row_number_expression: str = "ROWNUM"

    def rewrite(self, sql: str, option: SelectOption) -> str:
        conditions: list[str] = []
        if option.has_offset:
            conditions.append(f"SUB2.ROWNUM_ > {option.offset}")
        if option.has_limit:
            conditions.append(f"SUB2.ROWNUM_ <= {option.offset + option.limit}")
        if not conditions:
            return sql
        return (
            f"SELECT SUB2.* FROM (SELECT SUB1.*, {self.row_number_expression} ROWNUM_ "
            f"FROM ({sql}) SUB1) SUB2 WHERE {' AND '.join(conditions)}"
        )
