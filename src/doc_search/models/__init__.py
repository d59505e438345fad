"""Data models for documentation search."""

from .api import (
    ApiCategory,
    ApiKind,
    ApiRecord,
    ApiRecordModel,
    Parameter,
    Platform,
    PlatformType,
)
from .chunk import ChunkType, DocumentationChunk, DocumentationChunkModel
from .query import ContentType, PlatformFilter, SearchFilters, SearchRequest
from .result import ApiLookup, Highlight, ResultType, SearchResult

__all__ = [
    "ApiCategory",
    "ApiKind",
    "ApiRecord",
    "ApiRecordModel",
    "Parameter",
    "Platform",
    "PlatformType",
    "ChunkType",
    "DocumentationChunk",
    "DocumentationChunkModel",
    "ContentType",
    "PlatformFilter",
    "SearchFilters",
    "SearchRequest",
    "ApiLookup",
    "Highlight",
    "ResultType",
    "SearchResult",
]
