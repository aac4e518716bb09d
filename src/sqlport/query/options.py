"""
Result window requested for a single query execution.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectOption:
    """
    Offset/limit pair describing which slice of an ordered result to return.

    ``offset`` is the number of leading rows to skip and ``limit`` the maximum
    number of rows to return. Zero means "no skipping" and "no cap"
    respectively.
    """

    offset: int = 0
    limit: int = 0

    def __post_init__(self) -> None:
        for field_name in ("offset", "limit"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{field_name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{field_name} must not be negative, got {value}")

    @classmethod
    def starting_at(cls, start_position: int, max_rows: int = 0) -> "SelectOption":
        """
        Build a window from a 1-based start position.

        ``SelectOption.starting_at(5, 10)`` returns rows 5..14, which is an
        offset of 4.
        """

        if isinstance(start_position, bool) or not isinstance(start_position, int):
            raise ValueError(f"start_position must be an integer, got {start_position!r}")
        if start_position < 1:
            raise ValueError(f"start_position is 1-based, got {start_position}")
        return cls(offset=start_position - 1, limit=max_rows)

    @property
    def has_offset(self) -> bool:
        return self.offset > 0

    @property
    def has_limit(self) -> bool:
        return self.limit > 0
