"""
Documentation Search Engine for Device Info APIs

In-memory BM25 search over extracted API records and markdown documentation
chunks, with fuzzy API name resolution. Rebuilt at process start, read-only
afterwards.
"""

from .api.service import DocSearchService
from .core.engine import DocSearchEngine, ValidationReport
from .core.exceptions import (
    DocSearchError,
    IndexNotReadyError,
    IndexValidationError,
    ValidationError,
)
from .core.index import SearchIndex, build_search_index
from .core.ranking import search
from .core.fuzzy import find_similar_apis, levenshtein_distance
from .models.api import ApiCategory, ApiKind, ApiRecord, Parameter, Platform, PlatformType
from .models.chunk import ChunkType, DocumentationChunk
from .models.query import ContentType, PlatformFilter, SearchFilters, SearchRequest
from .models.result import ApiLookup, Highlight, ResultType, SearchResult

__version__ = "1.0.0"

__all__ = [
    "DocSearchService",
    "DocSearchEngine",
    "ValidationReport",
    "DocSearchError",
    "ValidationError",
    "IndexNotReadyError",
    "IndexValidationError",
    "SearchIndex",
    "build_search_index",
    "search",
    "find_similar_apis",
    "levenshtein_distance",
    "ApiCategory",
    "ApiKind",
    "ApiRecord",
    "Parameter",
    "Platform",
    "PlatformType",
    "ChunkType",
    "DocumentationChunk",
    "ContentType",
    "PlatformFilter",
    "SearchFilters",
    "SearchRequest",
    "ApiLookup",
    "Highlight",
    "ResultType",
    "SearchResult",
]
