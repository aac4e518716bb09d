"""
Query window options and the SQL rewriters built on them.
"""

from .counting import COUNT_TEMPLATE, SHARED_COUNT, CountRewriter, SubqueryCount
from .options import SelectOption
from .pagination import (
    MAX_INT,
    LimitOffsetClausePagination,
    LimitOffsetPairPagination,
    NoPagination,
    PaginationRewriter,
    RowNumberPagination,
)

__all__ = [
    "SelectOption",
    "PaginationRewriter",
    "NoPagination",
    "LimitOffsetPairPagination",
    "LimitOffsetClausePagination",
    "RowNumberPagination",
    "MAX_INT",
    "CountRewriter",
    "SubqueryCount",
    "SHARED_COUNT",
    "COUNT_TEMPLATE",
]
