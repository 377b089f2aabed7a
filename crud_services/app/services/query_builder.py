"""
SQL assembly for the customer listing.

``ListParams.from_query`` normalizes the raw query-string values of
``/api/data`` and ``build_list_query`` turns them into three
parameterized statements: the unfiltered count, the filtered count and
the page query.  Search values, ``LIMIT`` and ``OFFSET`` are always
bound parameters.  The sort column and direction are the only pieces
interpolated into the SQL text, and both come from the fixed
fragments below, never from user input.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

# Largest value SQLite can bind as an INTEGER.
MAX_SQL_INT = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")

TOTAL_COUNT_SQL = "SELECT COUNT(*) FROM pelanggan"


class SortColumn(str, Enum):
    """Columns the listing may be ordered by, mapped to their SQL fragment."""

    ID = "id"
    NAMA = "nama"
    ALAMAT = "alamat"

    @property
    def fragment(self) -> str:
        return _SORT_FRAGMENTS[self]

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortColumn":
        """Return the column named by ``value``, or ``ID`` for anything else."""
        try:
            return cls(value)
        except ValueError:
            return cls.ID


_SORT_FRAGMENTS = {
    SortColumn.ID: "id",
    SortColumn.NAMA: "nama",
    SortColumn.ALAMAT: "alamat",
}


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @property
    def fragment(self) -> str:
        return "DESC" if self is SortOrder.DESC else "ASC"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortOrder":
        # Only the exact string "desc" selects descending order.
        return cls.DESC if value == "desc" else cls.ASC


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse an optionally signed run of ASCII digits, or return ``None``.

    Whitespace, underscores and non-ASCII digits are rejected, unlike
    with a bare ``int()``.
    """
    if value is None or not _INT_RE.fullmatch(value):
        return None
    return int(value)


def _positive_int(value: Optional[str], default: int) -> int:
    """Parse ``value`` as an integer, returning ``default`` when missing, invalid or < 1.

    Values above the SQLite integer range saturate at ``MAX_SQL_INT``.
    """
    number = parse_int(value)
    if number is None or number < 1:
        return default
    return min(number, MAX_SQL_INT)


@dataclass(frozen=True)
class ListParams:
    """Validated listing parameters."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort: SortColumn = SortColumn.ID
    order: SortOrder = SortOrder.ASC
    search_nama: str = ""
    search_alamat: str = ""

    @property
    def offset(self) -> int:
        # Capped so that far-away pages bind and simply come back empty.
        return min((self.page - 1) * self.limit, MAX_SQL_INT)

    @classmethod
    def from_query(
        cls,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        sort: Optional[str] = None,
        order: Optional[str] = None,
        search_nama: Optional[str] = None,
        search_alamat: Optional[str] = None,
    ) -> "ListParams":
        """Build parameters from raw query-string values.

        - ``page`` and ``limit`` fall back to 1 and 10 when missing,
          unparseable or below 1.  ``limit`` has no upper bound.
        - ``sort`` must be ``id``, ``nama`` or ``alamat``; anything else
          sorts by ``id``.
        - ``order`` is descending only for the exact value ``desc``.
        - Empty search strings disable the corresponding filter.
        """
        return cls(
            page=_positive_int(page, DEFAULT_PAGE),
            limit=_positive_int(limit, DEFAULT_LIMIT),
            sort=SortColumn.parse(sort),
            order=SortOrder.parse(order),
            search_nama=search_nama or "",
            search_alamat=search_alamat or "",
        )


@dataclass
class ListQuery:
    """The statements and bound parameters of one listing request."""

    where_clause: str = ""
    where_params: List[str] = field(default_factory=list)
    order_by: str = "id ASC"
    limit: int = DEFAULT_LIMIT
    offset: int = 0

    @property
    def total_sql(self) -> str:
        return TOTAL_COUNT_SQL

    @property
    def count_sql(self) -> str:
        return f"SELECT COUNT(*) FROM pelanggan{self.where_clause}"

    @property
    def page_sql(self) -> str:
        return (
            f"SELECT id, nama, alamat FROM pelanggan{self.where_clause}"
            f" ORDER BY {self.order_by} LIMIT ? OFFSET ?"
        )

    @property
    def page_params(self) -> tuple:
        return (*self.where_params, self.limit, self.offset)


def build_list_query(params: ListParams) -> ListQuery:
    """Translate ``params`` into a :class:`ListQuery`.

    Each non-empty search value becomes a ``LIKE '%value%'`` condition;
    both conditions are joined with ``AND``.
    """
    conditions: List[str] = []
    values: List[str] = []
    if params.search_nama:
        conditions.append("nama LIKE ?")
        values.append(f"%{params.search_nama}%")
    if params.search_alamat:
        conditions.append("alamat LIKE ?")
        values.append(f"%{params.search_alamat}%")

    where_clause = ""
    if conditions:
        where_clause = " WHERE " + " AND ".join(conditions)

    return ListQuery(
        where_clause=where_clause,
        where_params=values,
        order_by=f"{params.sort.fragment} {params.order.fragment}",
        limit=params.limit,
        offset=params.offset,
    )
