"""
dpr_api/data/member_store.py

This module provides the MemberStore class for searching and retrieving
member records.
"""

import logging
from typing import Any, Dict, List, Optional, TypedDict

from sqlalchemy import case, or_

from dpr_api.data.base_store import BaseStore, database_operation
from dpr_api.data.pagination import calculate_pagination_info, normalize_page_params
from dpr_api.data.query_builder import DEFAULT_SORT_FIELD, MemberQueryBuilder
from dpr_api.models import AnggotaDPR

logger = logging.getLogger(__name__)


class MemberPage(TypedDict):
    """One page of search results with its pagination metadata."""
    items: List[Dict[str, Any]]
    total: int
    pagination: Dict[str, Any]


class MemberStore(BaseStore):
    """
    MemberStore handles all member search and lookup operations.
    """

    @database_operation("searching members")
    def search(
        self,
        query: str = "",
        filters: Optional[Any] = None,
        sort_by: str = DEFAULT_SORT_FIELD,
        sort_order: str = "ASC",
        limit: int = 25,
        offset: int = 0
    ) -> List[Dict[str, Any]]:
        """
        Return one page of member records matching the query and filters.

        Args:
            query: Free-text query matched against name, faction, party,
                constituency, birthplace and education
            filters: Mapping or MemberFilters with the structured constraints
            sort_by: Sort field; values outside the allow-list sort by name
            sort_order: 'ASC' or 'DESC'; anything else is ascending
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            List[Dict[str, Any]]: Member records as dictionaries

        Raises:
            ValidationError: If pagination parameters or filters are invalid
            DatabaseOperationError: On database errors
        """
        self._validate_pagination_params(limit, offset)
        builder = MemberQueryBuilder(query, filters)

        with self.session_scope() as session:
            records = builder.rows_query(session, sort_by, sort_order, limit, offset).all()
            return [record.to_dict() for record in records]

    @database_operation("counting members")
    def count(self, query: str = "", filters: Optional[Any] = None) -> int:
        """
        Return the total number of records matching the query and filters.

        Uses the same predicate as search(), without sort or limit.
        """
        builder = MemberQueryBuilder(query, filters)

        with self.session_scope() as session:
            return int(builder.count_query(session).scalar() or 0)

    def search_page(
        self,
        query: str = "",
        filters: Optional[Any] = None,
        page: Any = 1,
        limit: Any = 25,
        sort_by: str = DEFAULT_SORT_FIELD,
        sort_order: str = "ASC",
        default_limit: int = 25
    ) -> MemberPage:
        """
        Run search() and count() for a 1-based page and build pagination metadata.

        Args:
            query: Free-text query
            filters: Structured filters
            page: Requested page; non-positive values become 1
            limit: Page size; non-positive values become ``default_limit``
            sort_by: Sort field
            sort_order: Sort direction
            default_limit: Fallback page size

        Returns:
            MemberPage: items, total and pagination
        """
        page_num, page_size, offset = normalize_page_params(page, limit, default_limit)

        items = self.search(query, filters, sort_by, sort_order, page_size, offset)
        total = self.count(query, filters)

        return {
            "items": items,
            "total": total,
            "pagination": calculate_pagination_info(page_num, page_size, total),
        }

    @database_operation("retrieving member")
    def get_member(self, identifier: Any) -> Optional[Dict[str, Any]]:
        """
        Look up a member by primary key or by external reference id (``anggota``).

        When one row matches by id and another by anggota, the id match wins.

        Args:
            identifier: Value from the URL; non-integer values never match

        Returns:
            Optional[Dict[str, Any]]: The record, or None if not found
        """
        try:
            member_id = int(str(identifier).strip())
        except (TypeError, ValueError):
            logger.info("Member lookup with non-numeric id %r", identifier)
            return None

        with self.session_scope() as session:
            record = (
                session.query(AnggotaDPR)
                .filter(or_(AnggotaDPR.id == member_id, AnggotaDPR.anggota == member_id))
                .order_by(case((AnggotaDPR.id == member_id, 0), else_=1))
                .first()
            )
            return record.to_dict() if record else None

    def list_for_export(self, limit: int) -> List[Dict[str, Any]]:
        """Unfiltered records ordered by name, capped at ``limit``."""
        return self.search("", None, DEFAULT_SORT_FIELD, "ASC", limit, 0)
