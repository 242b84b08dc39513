"""
API Models

This module contains the Pydantic models used for request and response validation
in the members API. Field names on the wire follow the client's camelCase
(``sortBy``, ``minUsia``); Python attributes are snake_case.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dpr_api.data.pagination import DEFAULT_PAGE_SIZE
from dpr_api.data.query_builder import DEFAULT_SORT_FIELD


# -----------------------------------------------------------------------------
# Search request models
# -----------------------------------------------------------------------------
class SearchFilters(BaseModel):
    """Structured filters; empty values are treated as absent."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    fraksi: Optional[str] = None
    partai: Optional[str] = None
    agama: Optional[str] = None
    pendidikan: Optional[str] = None
    min_usia: Optional[int] = Field(None, alias="minUsia")
    max_usia: Optional[int] = Field(None, alias="maxUsia")

    @field_validator("min_usia", "max_usia", mode="before")
    @classmethod
    def blank_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_mapping(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class SearchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    query: Optional[str] = ""
    page: Any = 1
    limit: Any = DEFAULT_PAGE_SIZE
    sort_by: Optional[str] = Field(DEFAULT_SORT_FIELD, alias="sortBy")
    sort_order: Optional[str] = Field("ASC", alias="sortOrder")
    filters: SearchFilters = Field(default_factory=SearchFilters)

    @field_validator("query", mode="before")
    @classmethod
    def normalize_query(cls, value):
        if value is None:
            return ""
        return str(value).strip()

    @field_validator("filters", mode="before")
    @classmethod
    def null_filters(cls, value):
        return {} if value is None else value


# -----------------------------------------------------------------------------
# Response models
# -----------------------------------------------------------------------------
class PaginationInfo(BaseModel):
    currentPage: int
    totalPages: int
    totalItems: int
    itemsPerPage: int
    hasNext: bool
    hasPrev: bool


class MemberListResponse(BaseModel):
    success: bool = True
    data: List[Dict[str, Any]]
    pagination: PaginationInfo


class MemberDetailResponse(BaseModel):
    success: bool = True
    data: Dict[str, Any]


class SearchResponse(BaseModel):
    success: bool = True
    results: List[Dict[str, Any]]
    query: str
    count: int
    total: int
    pagination: PaginationInfo


class StatsResponse(BaseModel):
    success: bool = True
    data: Dict[str, Any]


class FilterOptionsResponse(BaseModel):
    success: bool = True
    data: Dict[str, List[Any]]


class ExportResponse(BaseModel):
    success: bool = True
    data: List[Dict[str, Any]]
    count: int


class HealthResponse(BaseModel):
    """API response model for health check"""
    success: bool = True
    status: str
    timestamp: str
    database: str
    environment: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    message: str
