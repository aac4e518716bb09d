"""
Row counting by wrapping a query as a subquery.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Protocol

COUNT_TEMPLATE: Final[str] = "SELECT COUNT(*) COUNT_ FROM ({sql}) SUB_"


class CountRewriter(Protocol):
    def rewrite(self, sql: str) -> str: ...


@dataclass(frozen=True)
class SubqueryCount:
    """
    Counts the rows of any query, including ordered or aggregated ones.
    """

    template: str = COUNT_TEMPLATE

    def rewrite(self, sql: str) -> str:
        return self.template.format(sql=sql)


SHARED_COUNT: Final[SubqueryCount] = SubqueryCount()
