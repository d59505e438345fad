"""Search result data models."""

from enum import Enum
from typing import List, Dict, Any, Optional, Tuple, Union
from dataclasses import dataclass

from .api import ApiRecord
from .chunk import DocumentationChunk


class ResultType(str, Enum):
    """Kind of item a search result points at."""
    API = "api"
    DOCUMENTATION = "documentation"


@dataclass(frozen=True)
class Highlight:
    """Excerpt explaining why a result matched."""
    field: str
    excerpt: str


@dataclass
class SearchResult:
    """
    Ranked search result.

    Attributes:
        item: The matched API record or documentation chunk
        score: Relevance score; raw BM25 while ranking, 0-100 once returned
        type: Result type tag
        highlights: Matching excerpts
    """
    item: Union[ApiRecord, DocumentationChunk]
    score: float
    type: ResultType
    highlights: List[Highlight]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "item": self.item.to_dict(),
            "score": self.score,
            "type": self.type.value,
            "highlights": [
                {"field": h.field, "excerpt": h.excerpt} for h in self.highlights
            ],
        }


@dataclass(frozen=True)
class ApiLookup:
    """Outcome of an API name lookup: the record, or close suggestions."""
    api: Optional[ApiRecord]
    suggestions: Tuple[ApiRecord, ...] = ()

    @property
    def found(self) -> bool:
        return self.api is not None
