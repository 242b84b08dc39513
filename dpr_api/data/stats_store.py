"""
dpr_api/data/stats_store.py

This module provides the StatsStore class for aggregate statistics and the
distinct values that populate the UI filter controls.

Each bundle is a fan-out of independent read queries. Every query opens its
own session, and a failing query degrades to an empty list (see fanout.py).
"""

import logging
from decimal import Decimal
from functools import partial
from typing import Any, Dict, List

from sqlalchemy import case, desc, func, text
from sqlalchemy.orm import InstrumentedAttribute

from dpr_api.data.base_store import BaseStore
from dpr_api.data.fanout import gather_isolated
from dpr_api.models import AnggotaDPR

logger = logging.getLogger(__name__)

UNKNOWN_LABEL = "Tidak diketahui"

# Ordered (label, predicate) pairs; rows matching none fall into UNKNOWN_LABEL
AGE_BUCKETS = (
    ("Di bawah 30", AnggotaDPR.usia < 30),
    ("30-40 tahun", AnggotaDPR.usia.between(30, 40)),
    ("41-50 tahun", AnggotaDPR.usia.between(41, 50)),
    ("51-60 tahun", AnggotaDPR.usia.between(51, 60)),
    ("Di atas 60", AnggotaDPR.usia > 60),
)

# Name fragments used by the gender heuristic. This is a guess from honorifics
# and common given names, not recorded data; many members land in UNKNOWN_LABEL
# and some are misclassified.
FEMALE_NAME_PATTERNS = ("hj.%", "%siti%", "%dewi%", "%sri%")
MALE_NAME_PATTERNS = ("h.%", "%ahmad%", "%muhammad%")

# Filter option key -> column
FILTER_OPTION_COLUMNS = {
    "fraksi": AnggotaDPR.fraksi,
    "partai": AnggotaDPR.partai,
    "agama": AnggotaDPR.agama,
    "pendidikan": AnggotaDPR.pendidikan_terakhir,
    "dapil": AnggotaDPR.dapil,
}


def _to_number(value: Any) -> Any:
    """Normalize driver-specific numeric types (e.g. Decimal from PostgreSQL AVG)."""
    if isinstance(value, Decimal):
        return float(value)
    return value


class StatsStore(BaseStore):
    """
    StatsStore computes the aggregate statistics bundle and filter options.
    """

    def __init__(self, session_factory, recent_limit: int = 5, include_gender: bool = True) -> None:
        """
        Args:
            session_factory: sessionmaker bound to the application engine
            recent_limit: Number of most recently added members in the bundle
            include_gender: Whether to compute the name-based gender heuristic
        """
        super().__init__(session_factory)
        self.recent_limit = recent_limit
        self.include_gender = include_gender

    # -----------------------------------------------------------------------------
    # Individual queries (each runs on its own worker thread and session)
    # -----------------------------------------------------------------------------
    def _total(self) -> List[Dict[str, Any]]:
        with self.session_scope() as session:
            count = session.query(func.count(AnggotaDPR.id)).scalar()
            return [{"count": int(count or 0)}]

    def _group_count(self, column: InstrumentedAttribute) -> List[Dict[str, Any]]:
        """Count per distinct non-empty value of ``column``, largest group first."""
        with self.session_scope() as session:
            rows = (
                session.query(column, func.count(AnggotaDPR.id).label("count"))
                .filter(column.isnot(None), column != "")
                .group_by(column)
                .order_by(desc("count"), column.asc())
                .all()
            )
            return [row._asdict() for row in rows]

    def _age_histogram(self) -> List[Dict[str, Any]]:
        bucket = case(*[(predicate, label) for label, predicate in AGE_BUCKETS], else_=UNKNOWN_LABEL)

        with self.session_scope() as session:
            rows = (
                session.query(
                    bucket.label("kategori_usia"),
                    func.count(AnggotaDPR.id).label("count"),
                    func.avg(AnggotaDPR.usia).label("avg_usia"),
                )
                .group_by(text("kategori_usia"))
                .order_by(desc("count"))
                .all()
            )
            return [
                {key: _to_number(value) for key, value in row._asdict().items()}
                for row in rows
            ]

    def _gender_breakdown(self) -> List[Dict[str, Any]]:
        """Best-effort gender guess from name patterns; see FEMALE_NAME_PATTERNS."""
        female = [AnggotaDPR.nama.ilike(pattern) for pattern in FEMALE_NAME_PATTERNS]
        male = [AnggotaDPR.nama.ilike(pattern) for pattern in MALE_NAME_PATTERNS]
        guess = case(
            *[(cond, "Perempuan") for cond in female],
            *[(cond, "Laki-laki") for cond in male],
            else_=UNKNOWN_LABEL,
        )

        with self.session_scope() as session:
            rows = (
                session.query(guess.label("gender"), func.count(AnggotaDPR.id).label("count"))
                .group_by(text("gender"))
                .order_by(desc("count"))
                .all()
            )
            return [row._asdict() for row in rows]

    def _age_summary(self) -> List[Dict[str, Any]]:
        with self.session_scope() as session:
            row = (
                session.query(
                    func.avg(AnggotaDPR.usia).label("avg_age"),
                    func.min(AnggotaDPR.usia).label("min_age"),
                    func.max(AnggotaDPR.usia).label("max_age"),
                )
                .filter(AnggotaDPR.usia.isnot(None))
                .one()
            )
            return [{key: _to_number(value) for key, value in row._asdict().items()}]

    def _recent_members(self) -> List[Dict[str, Any]]:
        with self.session_scope() as session:
            rows = (
                session.query(AnggotaDPR.nama, AnggotaDPR.fraksi, AnggotaDPR.partai)
                .order_by(AnggotaDPR.id.desc())
                .limit(self.recent_limit)
                .all()
            )
            return [row._asdict() for row in rows]

    def _distinct_values(self, column: InstrumentedAttribute) -> List[Any]:
        with self.session_scope() as session:
            rows = (
                session.query(column)
                .filter(column.isnot(None), column != "")
                .distinct()
                .order_by(column.asc())
                .all()
            )
            return [row[0] for row in rows]

    # -----------------------------------------------------------------------------
    # Bundles
    # -----------------------------------------------------------------------------
    async def get_stats(self) -> Dict[str, Any]:
        """
        Compute the aggregate statistics bundle.

        Returns:
            Dict with total, byFraksi, byPartai, byPendidikan, byAgama, byUsia,
            byGender (when enabled), avgAge and recentMembers. A sub-query that
            fails contributes an empty list.
        """
        queries = {
            "total": self._total,
            "byFraksi": partial(self._group_count, AnggotaDPR.fraksi),
            "byPartai": partial(self._group_count, AnggotaDPR.partai),
            "byPendidikan": partial(self._group_count, AnggotaDPR.pendidikan_terakhir),
            "byAgama": partial(self._group_count, AnggotaDPR.agama),
            "byUsia": self._age_histogram,
        }
        if self.include_gender:
            queries["byGender"] = self._gender_breakdown
        queries["avgAge"] = self._age_summary
        queries["recentMembers"] = self._recent_members

        return await gather_isolated(queries)

    async def get_filter_options(self) -> Dict[str, List[Any]]:
        """
        Distinct non-empty values per filterable column, ascending.

        Returns:
            Dict with fraksi, partai, agama, pendidikan and dapil lists
        """
        queries = {
            key: partial(self._distinct_values, column)
            for key, column in FILTER_OPTION_COLUMNS.items()
        }
        return await gather_isolated(queries)
