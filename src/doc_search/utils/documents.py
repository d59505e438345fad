"""Adapters from API records and documentation chunks to indexable documents.

Searchable text is never stored; build and query time both go through
these functions so that term counts agree.
"""

from collections import Counter
from typing import Dict, List, Optional

from ..models.api import ApiRecord, PlatformType
from ..models.chunk import DocumentationChunk
from ..models.query import PlatformFilter, SearchFilters
from .text_processing import normalize

API_PREFIX = "api:"
DOC_PREFIX = "doc:"


def api_document_id(api: ApiRecord) -> str:
    return f"{API_PREFIX}{api.name}"


def chunk_document_id(chunk: DocumentationChunk) -> str:
    return f"{DOC_PREFIX}{chunk.id}"


def api_search_text(api: ApiRecord) -> str:
    """Flatten an API record into a single searchable string."""
    parts = [
        api.name,
        api.description,
        api.signature,
        api.return_type,
    ]
    parts.extend(f"{p.name} {p.type} {p.description}" for p in api.parameters)
    parts.extend(api.examples)
    parts.append(api.category.value)
    return " ".join(parts)


def chunk_search_text(chunk: DocumentationChunk) -> str:
    """Flatten a documentation chunk into a single searchable string."""
    return " ".join([chunk.title, chunk.content, *chunk.mentioned_apis])


def api_terms(api: ApiRecord) -> List[str]:
    return normalize(api_search_text(api))


def chunk_terms(chunk: DocumentationChunk) -> List[str]:
    return normalize(chunk_search_text(chunk))


def term_frequencies(terms: List[str]) -> Dict[str, int]:
    """Count occurrences of each term."""
    return dict(Counter(terms))


def platform_matches(api: ApiRecord, platform: Optional[PlatformFilter]) -> bool:
    """Check an API record's platform tag against a platform filter."""
    if platform in (None, PlatformFilter.ALL):
        return True
    if platform == PlatformFilter.IOS:
        return api.platform.supports_ios()
    if platform == PlatformFilter.ANDROID:
        return api.platform.supports_android()
    return api.platform.type == PlatformType.BOTH


def chunk_platform_matches(chunk: DocumentationChunk, platform: Optional[PlatformFilter]) -> bool:
    """Check a chunk's detected platforms; untagged chunks always pass."""
    if platform in (None, PlatformFilter.ALL) or not chunk.platforms:
        return True
    if platform == PlatformFilter.IOS:
        return "ios" in chunk.platforms
    if platform == PlatformFilter.ANDROID:
        return "android" in chunk.platforms
    return "ios" in chunk.platforms and "android" in chunk.platforms


def api_matches_filters(api: ApiRecord, filters: SearchFilters) -> bool:
    """Apply category, kind and platform filters to an API record."""
    if filters.category is not None and api.category != filters.category:
        return False
    if filters.kind is not None and api.kind != filters.kind:
        return False
    return platform_matches(api, filters.platform)


def chunk_matches_filters(chunk: DocumentationChunk, filters: SearchFilters) -> bool:
    """Apply the platform filter to a chunk; category and kind do not apply."""
    return chunk_platform_matches(chunk, filters.platform)
