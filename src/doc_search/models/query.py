"""Search filter and request models."""

from enum import Enum
from typing import Optional
from dataclasses import dataclass
from pydantic import BaseModel, Field, field_validator

from .api import ApiCategory, ApiKind


class ContentType(str, Enum):
    """Content selector at the query boundary."""
    ALL = "all"
    API = "api"
    GUIDE = "guide"


class PlatformFilter(str, Enum):
    """Platform selector for filtering."""
    ALL = "all"
    IOS = "ios"
    ANDROID = "android"
    BOTH = "both"


@dataclass(frozen=True)
class SearchFilters:
    """
    Filters applied before scoring.

    None and "all" both mean "no constraint".

    Attributes:
        type: Restrict to API records ("api") or include chunks too
        platform: Platform constraint
        category: API category constraint, ignored for chunks
        kind: API kind constraint, ignored for chunks
    """
    type: Optional[ContentType] = None
    platform: Optional[PlatformFilter] = None
    category: Optional[ApiCategory] = None
    kind: Optional[ApiKind] = None

    @property
    def include_apis(self) -> bool:
        return self.type in (None, ContentType.ALL, ContentType.API)

    @property
    def include_chunks(self) -> bool:
        return self.type in (None, ContentType.ALL, ContentType.GUIDE)


class SearchRequest(BaseModel):
    """Pydantic model for search request validation in service contexts."""

    query: str = Field(..., min_length=1, max_length=1000, description="Natural language query")
    limit: int = Field(5, ge=1, le=20, description="Maximum results to return")
    type: ContentType = Field(ContentType.ALL, description="Content type filter")
    platform: PlatformFilter = Field(PlatformFilter.ALL, description="Platform filter")
    category: Optional[ApiCategory] = Field(None, description="API category filter")
    kind: Optional[ApiKind] = Field(None, description="API kind filter")

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Ensure query text is not just whitespace."""
        if not v.strip():
            raise ValueError("Query text cannot be empty or whitespace only")
        return v.strip()

    @field_validator("category", "kind", mode="before")
    @classmethod
    def all_means_none(cls, v):
        if v == "all":
            return None
        return v

    def to_filters(self) -> SearchFilters:
        """Convert to SearchFilters dataclass."""
        return SearchFilters(
            type=self.type,
            platform=self.platform,
            category=self.category,
            kind=self.kind,
        )
