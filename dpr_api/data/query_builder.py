"""
dpr_api/data/query_builder.py

Predicate construction for member search.

Both the page-of-rows query and the total-count query are derived from the
same MemberQueryBuilder instance, so the two can never disagree on which
records match. All user input reaches the database as bound parameters.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

from sqlalchemy import and_, asc, desc, func, or_
from sqlalchemy.orm import Query, Session

from dpr_api.data.errors import ValidationError
from dpr_api.models import AnggotaDPR, SORTABLE_COLUMNS

logger = logging.getLogger(__name__)

DEFAULT_SORT_FIELD = "nama"

# Columns scanned by the free-text query, combined with OR
SEARCH_COLUMNS = (
    AnggotaDPR.nama,
    AnggotaDPR.fraksi,
    AnggotaDPR.partai,
    AnggotaDPR.dapil,
    AnggotaDPR.kota_lahir,
    AnggotaDPR.pendidikan_terakhir,
)


def _optional_int(value: Any, name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be an integer, got bool")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name} must be an integer, got {value!r}") from e


@dataclass
class MemberFilters:
    """Structured filter set; every non-empty field is ANDed into the predicate."""
    fraksi: Optional[str] = None
    partai: Optional[str] = None
    agama: Optional[str] = None
    pendidikan: Optional[str] = None
    min_usia: Optional[int] = None
    max_usia: Optional[int] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "MemberFilters":
        """
        Build filters from a request mapping.

        Accepts the wire names (``minUsia``/``maxUsia``) as well as snake_case.
        Unknown keys are ignored.

        Raises:
            ValidationError: If the mapping is not a mapping or an age bound is not an integer
        """
        if data is None:
            return cls()
        if isinstance(data, MemberFilters):
            return data
        if not isinstance(data, Mapping):
            raise ValidationError(f"Filters must be a mapping, got {type(data).__name__}")

        min_usia = data.get("minUsia", data.get("min_usia"))
        max_usia = data.get("maxUsia", data.get("max_usia"))
        return cls(
            fraksi=data.get("fraksi") or None,
            partai=data.get("partai") or None,
            agama=data.get("agama") or None,
            pendidikan=data.get("pendidikan") or None,
            min_usia=_optional_int(min_usia, "minUsia"),
            max_usia=_optional_int(max_usia, "maxUsia"),
        )


def resolve_sort(sort_by: Optional[str], sort_order: Optional[str]) -> Tuple[str, str]:
    """
    Map client sort parameters onto the allow-list.

    Unknown fields fall back to ``nama``; any order other than ``desc``
    (case-insensitive) is ascending.

    Returns:
        Tuple of (field name, "ASC" | "DESC")
    """
    field = sort_by if sort_by in SORTABLE_COLUMNS else DEFAULT_SORT_FIELD
    direction = "DESC" if str(sort_order or "").strip().upper() == "DESC" else "ASC"
    return field, direction


class MemberQueryBuilder:
    """
    Accumulates the search/filter predicate for member queries.

    Usage:
        builder = MemberQueryBuilder("jakarta", {"fraksi": "golkar"})
        total = builder.count_query(session).scalar()
        rows = builder.rows_query(session, "usia", "desc", 25, 0).all()
    """

    def __init__(self, query: Optional[str] = "", filters: Any = None) -> None:
        self.query = (query or "").strip()
        self.filters = MemberFilters.from_mapping(filters)
        self.conditions: List[Any] = []
        self._build()

    def _build(self) -> None:
        if self.query:
            self.conditions.append(
                or_(*(column.icontains(self.query, autoescape=True) for column in SEARCH_COLUMNS))
            )

        filters = self.filters
        if filters.fraksi:
            self.conditions.append(AnggotaDPR.fraksi.icontains(filters.fraksi, autoescape=True))
        if filters.partai:
            self.conditions.append(AnggotaDPR.partai.icontains(filters.partai, autoescape=True))
        if filters.agama:
            self.conditions.append(AnggotaDPR.agama == filters.agama)
        if filters.pendidikan:
            self.conditions.append(
                AnggotaDPR.pendidikan_terakhir.icontains(filters.pendidikan, autoescape=True)
            )
        # Zero bounds are falsy and therefore not applied
        if filters.min_usia:
            self.conditions.append(AnggotaDPR.usia >= filters.min_usia)
        if filters.max_usia:
            self.conditions.append(AnggotaDPR.usia <= filters.max_usia)

    def apply(self, query: Query) -> Query:
        """Apply the accumulated predicate to an ORM query."""
        if self.conditions:
            return query.filter(and_(*self.conditions))
        return query

    def count_query(self, session: Session) -> Query:
        """Query returning the number of matching records (no sort, no limit)."""
        return self.apply(session.query(func.count(AnggotaDPR.id)))

    def rows_query(
        self,
        session: Session,
        sort_by: Optional[str] = DEFAULT_SORT_FIELD,
        sort_order: Optional[str] = "ASC",
        limit: Optional[int] = None,
        offset: int = 0
    ) -> Query:
        """Query returning one page of matching records, sorted and sliced."""
        field, direction = resolve_sort(sort_by, sort_order)
        order = desc if direction == "DESC" else asc

        query = self.apply(session.query(AnggotaDPR))
        query = query.order_by(order(SORTABLE_COLUMNS[field]), AnggotaDPR.id.asc())

        if limit is not None:
            query = query.limit(limit)
        if offset:
            query = query.offset(offset)
        return query
