"""
dpr_api/data/data_store.py

This module provides the main DataStore class that owns the process-wide
engine and combines the specialized stores behind a single object for the
API layer.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

from dpr_api.data.base_store import BaseStore
from dpr_api.data.errors import ConnectionError
from dpr_api.data.member_store import MemberPage, MemberStore
from dpr_api.data.query_builder import DEFAULT_SORT_FIELD
from dpr_api.data.stats_store import StatsStore
from dpr_api.models import create_db_engine, init_db

logger = logging.getLogger(__name__)


class DataStore(BaseStore):
    """
    DataStore centralizes database access for the members API.

    It is created once at startup (before the server accepts traffic),
    shared by all requests and closed on shutdown. The specialized stores
    share its session factory, so the whole process uses one pool.
    """

    def __init__(
        self,
        db_url: Optional[str] = None,
        echo: bool = False,
        recent_limit: int = 5,
        include_gender: bool = True
    ) -> None:
        """
        Connect to the database, ensure the schema and build the stores.

        Args:
            db_url: SQLAlchemy database URL; defaults to DATABASE_URL or the local SQLite file
            echo: Log emitted SQL
            recent_limit: Size of the recentMembers statistic
            include_gender: Compute the name-based gender heuristic in statistics

        Raises:
            ConnectionError: If the database cannot be reached or initialized
        """
        self.engine: Optional[Engine] = create_db_engine(db_url, echo=echo)
        try:
            session_factory = init_db(self.engine)
        except Exception as e:
            self.engine.dispose()
            self.engine = None
            error_msg = f"Failed to initialize database: {e}"
            logger.error(error_msg)
            raise ConnectionError(error_msg) from e

        super().__init__(session_factory)

        # Create store components
        self.member_store = MemberStore(session_factory)
        self.stats_store = StatsStore(
            session_factory,
            recent_limit=recent_limit,
            include_gender=include_gender
        )

    # -----------------------------------------------------------------------------
    # LIFECYCLE
    # -----------------------------------------------------------------------------
    def ping(self) -> bool:
        """
        Check that the database answers a trivial query.

        Returns:
            bool: True if the database responded
        """
        try:
            with self.session_scope() as session:
                session.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Database ping failed: {e}")
            return False

    def close(self) -> None:
        """
        Dispose of the engine and its pooled connections.
        """
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
            logger.info("Database engine disposed.")

    def __enter__(self) -> "DataStore":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    # -----------------------------------------------------------------------------
    # MEMBER METHODS - Delegate to MemberStore
    # -----------------------------------------------------------------------------
    def search_members(
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
        Search members and return one page with pagination metadata.

        Args:
            query: Free-text query
            filters: Structured filter mapping
            page: 1-based page number
            limit: Page size
            sort_by: Sort field
            sort_order: Sort direction
            default_limit: Page size used when ``limit`` is not positive

        Returns:
            MemberPage: items, total and pagination
        """
        return self.member_store.search_page(
            query=query,
            filters=filters,
            page=page,
            limit=limit,
            sort_by=sort_by,
            sort_order=sort_order,
            default_limit=default_limit
        )

    def get_member(self, identifier: Any) -> Optional[Dict[str, Any]]:
        """
        Retrieve a member by id or external reference id.

        Returns:
            Optional[Dict[str, Any]]: The record, or None if not found
        """
        return self.member_store.get_member(identifier)

    def export_members(self, limit: int) -> List[Dict[str, Any]]:
        """
        Retrieve up to ``limit`` unfiltered members for export.
        """
        return self.member_store.list_for_export(limit)

    # -----------------------------------------------------------------------------
    # STATISTICS METHODS - Delegate to StatsStore
    # -----------------------------------------------------------------------------
    async def get_stats(self) -> Dict[str, Any]:
        """
        Compute the aggregate statistics bundle.
        """
        return await self.stats_store.get_stats()

    async def get_filter_options(self) -> Dict[str, List[Any]]:
        """
        Distinct values for each filterable column.
        """
        return await self.stats_store.get_filter_options()
