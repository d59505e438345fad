"""High-level service for documentation search."""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..core.engine import (
    DEFAULT_EXPECTED_CATEGORIES,
    MIN_API_COUNT,
    DocSearchEngine,
    ValidationReport,
)
from ..core.exceptions import (
    DocSearchError,
    IndexNotReadyError,
    IndexValidationError,
    ValidationError,
)
from ..models.api import ApiCategory, ApiKind, ApiRecord
from ..models.query import PlatformFilter, SearchRequest
from ..models.result import ApiLookup, SearchResult
from ..utils.logging_config import setup_logging
from ..utils.validators import coerce_api_records, coerce_chunks, validate_search_request

logger = logging.getLogger(__name__)


class DocSearchService:
    """
    Service interface for documentation search.

    Builds the index at startup, surfaces diagnostics, and answers queries.
    Rebuilding swaps in a fresh engine; in-flight queries keep reading the
    engine they started with.
    """

    def __init__(
        self,
        log_level: str = "INFO",
        min_api_count: int = MIN_API_COUNT,
        expected_categories: Sequence[ApiCategory] = DEFAULT_EXPECTED_CATEGORIES,
        strict: bool = False,
        configure_logging: bool = True
    ):
        """
        Initialize documentation search service.

        Args:
            log_level: Logging level
            min_api_count: Minimum number of API records before validation errors
            expected_categories: Categories that should contain at least one API
            strict: Raise IndexValidationError when diagnostics report errors
            configure_logging: Whether to configure logging handlers
        """
        if configure_logging:
            setup_logging(level=log_level)

        self.min_api_count = min_api_count
        self.expected_categories = tuple(expected_categories)
        self.strict = strict

        self._engine: Optional[DocSearchEngine] = None
        self._last_report: Optional[ValidationReport] = None
        logger.info("Documentation search service initialized")

    @property
    def is_ready(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> DocSearchEngine:
        engine = self._engine
        if engine is None:
            raise IndexNotReadyError("Index has not been built. Call build() first.")
        return engine

    def build(self, api_records: Iterable[Any], chunks: Iterable[Any]) -> ValidationReport:
        """
        Build a new index and make it the active one.

        Args:
            api_records: ApiRecord instances or raw extractor mappings
            chunks: DocumentationChunk instances or raw extractor mappings

        Returns:
            Diagnostics for the new index

        Raises:
            IndexValidationError: In strict mode, if diagnostics report errors
        """
        apis = coerce_api_records(api_records)
        docs = coerce_chunks(chunks)

        engine = DocSearchEngine.build(apis, docs)
        report = engine.validate(
            min_api_count=self.min_api_count,
            expected_categories=self.expected_categories,
        )
        self._log_report(report)

        if self.strict and not report.valid:
            raise IndexValidationError(report)

        self._engine = engine
        self._last_report = report
        return report

    def _log_report(self, report: ValidationReport) -> None:
        for error in report.errors:
            logger.error(f"Index validation error: {error}")
        for warning in report.warnings:
            logger.warning(f"Index validation warning: {warning}")
        if report.valid:
            logger.info(f"Index validation passed with {len(report.warnings)} warnings")

    def search(self, request: SearchRequest) -> List[SearchResult]:
        """
        Search documentation with a validated request.

        Raises:
            IndexNotReadyError: If no index has been built
            DocSearchError: If search fails unexpectedly
        """
        engine = self.engine

        try:
            results = engine.search(request.query, request.limit, request.to_filters())
        except Exception as e:
            logger.error(f"Search failed: {str(e)}")
            raise DocSearchError(f"Search failed: {str(e)}")

        logger.debug(f"Search returned {len(results)} results")
        return results

    def search_text(
        self,
        query: str,
        limit: int = 5,
        type: str = "all",
        platform: str = "all",
        category: Optional[str] = None,
        kind: Optional[str] = None
    ) -> List[SearchResult]:
        """
        Convenience method for simple text search.

        Raises:
            ValidationError: If any parameter is invalid
        """
        request = validate_search_request(
            query=query,
            limit=limit,
            type=type,
            platform=platform,
            category=category,
            kind=kind,
        )
        return self.search(request)

    def find_similar(self, name: str, max_distance: int = 3, limit: int = 3) -> List[ApiRecord]:
        """Resolve a partial or misspelled API name."""
        return self.engine.find_similar(name, max_distance, limit)

    def lookup_api(self, name: str) -> ApiLookup:
        """Look up an API by name, with suggestions when not found."""
        return self.engine.lookup_api(name)

    def list_apis(
        self,
        category: str = "all",
        platform: str = "all",
        kind: str = "all"
    ) -> Dict[ApiCategory, List[ApiRecord]]:
        """
        List APIs grouped by category, with string filters as at the tool boundary.

        Raises:
            ValidationError: If a filter value is unknown
        """
        try:
            filters = dict(
                category=None if category == "all" else ApiCategory(category),
                platform=PlatformFilter(platform),
                kind=None if kind == "all" else ApiKind(kind),
            )
        except ValueError as e:
            raise ValidationError(f"Invalid list filter: {str(e)}")

        return self.engine.list_apis(**filters)

    def get_stats(self) -> Dict[str, Any]:
        """Get service and index statistics."""
        return {
            "service": {
                "ready": self.is_ready,
                "strict": self.strict,
                "min_api_count": self.min_api_count,
            },
            "index": self.engine.get_stats() if self.is_ready else None,
        }

    def health_check(self) -> Dict[str, Any]:
        """Report readiness and the most recent diagnostics."""
        if not self.is_ready:
            return {
                "status": "not_ready",
                "message": "Index has not been built"
            }

        report = self._last_report
        return {
            "status": "healthy" if report is None or report.valid else "degraded",
            "validation": report.to_dict() if report else None,
            "stats": self.engine.get_stats(),
        }
