"""Core indexing and ranking components for documentation search."""

from .exceptions import (
    DocSearchError,
    ValidationError,
    IndexNotReadyError,
    IndexValidationError
)
from .index import SearchIndex, build_search_index
from .ranking import search
from .fuzzy import levenshtein_distance, find_similar_apis
from .engine import DocSearchEngine, ValidationReport

__all__ = [
    "DocSearchEngine",
    "ValidationReport",
    "SearchIndex",
    "build_search_index",
    "search",
    "levenshtein_distance",
    "find_similar_apis",
    "DocSearchError",
    "ValidationError",
    "IndexNotReadyError",
    "IndexValidationError"
]
