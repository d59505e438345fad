"""Documentation search engine facade."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..models.api import ApiCategory, ApiKind, ApiRecord
from ..models.chunk import DocumentationChunk
from ..models.query import PlatformFilter, SearchFilters
from ..models.result import ApiLookup, SearchResult
from ..utils.documents import api_matches_filters
from .fuzzy import find_similar_apis
from .index import SearchIndex, build_search_index
from .ranking import search

logger = logging.getLogger(__name__)

MIN_API_COUNT = 80
MIN_DESCRIPTION_LENGTH = 10

DEFAULT_EXPECTED_CATEGORIES = (
    ApiCategory.CORE_DEVICE_INFO,
    ApiCategory.BATTERY_POWER,
    ApiCategory.SYSTEM_RESOURCES,
    ApiCategory.NETWORK,
    ApiCategory.DEVICE_CAPABILITIES,
)


@dataclass(frozen=True)
class ValidationReport:
    """Startup diagnostics for a built index."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


class DocSearchEngine:
    """
    Read-only search facade over a single SearchIndex.

    The engine never mutates its index; to pick up new records build a new
    engine and replace the reference held by callers.
    """

    def __init__(self, index: SearchIndex):
        self.index = index

    @classmethod
    def build(
        cls,
        apis: Iterable[ApiRecord],
        chunks: Iterable[DocumentationChunk],
    ) -> "DocSearchEngine":
        """Build an engine from extracted API records and chunks."""
        return cls(build_search_index(apis, chunks))

    def search(
        self,
        query: str,
        limit: int = 5,
        filters: Optional[SearchFilters] = None,
    ) -> List[SearchResult]:
        """Rank API records and documentation chunks against a query."""
        return search(self.index, query, limit, filters)

    def find_similar(self, name: str, max_distance: int = 3, limit: int = 3) -> List[ApiRecord]:
        """Resolve a partial or misspelled API name."""
        return find_similar_apis(name, self.index.apis.values(), max_distance, limit)

    def get_api(self, name: str) -> Optional[ApiRecord]:
        """Case-insensitive exact lookup of an API record."""
        api = self.index.apis.get(name)
        if api is not None:
            return api

        name_lower = name.lower()
        for api_name, api in self.index.apis.items():
            if api_name.lower() == name_lower:
                return api
        return None

    def lookup_api(self, name: str) -> ApiLookup:
        """Look up an API record, falling back to fuzzy suggestions."""
        api = self.get_api(name)
        if api is not None:
            return ApiLookup(api=api)

        suggestions = self.find_similar(name)
        logger.debug(f"API '{name}' not found, {len(suggestions)} suggestions")
        return ApiLookup(api=None, suggestions=tuple(suggestions))

    def list_apis(
        self,
        category: Optional[ApiCategory] = None,
        platform: Optional[PlatformFilter] = None,
        kind: Optional[ApiKind] = None,
    ) -> Dict[ApiCategory, List[ApiRecord]]:
        """
        List API records grouped by category.

        Args:
            category: Only this category (None for all)
            platform: Platform filter, same semantics as search
            kind: Only methods or only properties (None for both)

        Returns:
            Category -> records sorted by name, categories in canonical order,
            empty categories omitted
        """
        filters = SearchFilters(platform=platform, category=category, kind=kind)

        grouped: Dict[ApiCategory, List[ApiRecord]] = {}
        for api in self.index.apis.values():
            if api_matches_filters(api, filters):
                grouped.setdefault(api.category, []).append(api)

        return {
            cat: sorted(grouped[cat], key=lambda api: (api.name.lower(), api.name))
            for cat in ApiCategory
            if cat in grouped
        }

    def get_stats(self) -> Dict[str, Any]:
        """Get index statistics."""
        category_counts = Counter(api.category.value for api in self.index.apis.values())

        return {
            "api_count": len(self.index.apis),
            "chunk_count": len(self.index.chunks),
            "total_documents": self.index.document_count,
            "average_document_length": round(self.index.average_document_length),
            "term_count": self.index.term_count,
            "category_counts": dict(category_counts),
        }

    def validate(
        self,
        min_api_count: int = MIN_API_COUNT,
        expected_categories: Sequence[ApiCategory] = DEFAULT_EXPECTED_CATEGORIES,
    ) -> ValidationReport:
        """
        Check the index against minimum requirements.

        Errors: empty corpus, fewer API records than ``min_api_count``.
        Warnings: expected categories without records, missing or short
        descriptions. The index stays usable either way.
        """
        errors: List[str] = []
        warnings: List[str] = []
        apis = self.index.apis

        if len(apis) < min_api_count:
            errors.append(
                f"API count ({len(apis)}) is below minimum requirement ({min_api_count})"
            )

        if self.index.document_count == 0:
            errors.append("Index is empty - no documents indexed")

        present = {api.category for api in apis.values()}
        for category in expected_categories:
            if category not in present:
                warnings.append(f"No APIs found in category: {category.value}")

        for name, api in apis.items():
            if not api.description or len(api.description) < MIN_DESCRIPTION_LENGTH:
                warnings.append(f"API '{name}' has missing or short description")

        return ValidationReport(errors=errors, warnings=warnings)
