"""
dpr_api/data/__init__.py

Data access layer for the members API. Query construction, pagination and
aggregate statistics live in specialized store classes; DataStore combines
them for the API layer.
"""

from dpr_api.data.base_store import BaseStore, database_operation
from dpr_api.data.member_store import MemberStore
from dpr_api.data.stats_store import StatsStore
from dpr_api.data.query_builder import MemberFilters, MemberQueryBuilder, resolve_sort
from dpr_api.data.pagination import calculate_pagination_info, normalize_page_params
from dpr_api.data.fanout import gather_isolated
from dpr_api.data.errors import (
    DataStoreError, ConnectionError, ValidationError, DatabaseOperationError
)
from dpr_api.data.data_store import DataStore

__all__ = [
    'DataStore',
    'BaseStore',
    'MemberStore',
    'StatsStore',
    'MemberFilters',
    'MemberQueryBuilder',
    'resolve_sort',
    'calculate_pagination_info',
    'normalize_page_params',
    'gather_isolated',
    'database_operation',
    'DataStoreError',
    'ConnectionError',
    'ValidationError',
    'DatabaseOperationError',
]
