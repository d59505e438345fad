"""Inverted index construction.

The index is built once from the extracted records and never mutated
afterwards. Mutable structures are local to ``build_search_index`` and are
frozen before the index is returned.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from ..models.api import ApiRecord
from ..models.chunk import DocumentationChunk
from ..utils.documents import (
    api_document_id,
    api_terms,
    chunk_document_id,
    chunk_terms,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchIndex:
    """
    Write-once search index.

    Attributes:
        apis: API name -> record, in build order
        chunks: Documentation chunks in build order
        inverted_index: Term -> ids of documents containing it, in build order
        document_lengths: Document id -> number of normalized terms
        average_document_length: Mean document length (0 for an empty corpus)
        document_count: Number of indexed documents
        term_document_frequencies: Term -> number of documents containing it
    """
    apis: Mapping[str, ApiRecord]
    chunks: Tuple[DocumentationChunk, ...]
    inverted_index: Mapping[str, Tuple[str, ...]]
    document_lengths: Mapping[str, int]
    average_document_length: float
    document_count: int
    term_document_frequencies: Mapping[str, int]

    @property
    def term_count(self) -> int:
        return len(self.inverted_index)

    def document_frequency(self, term: str) -> int:
        return self.term_document_frequencies.get(term, 0)


class _IndexBuilder:
    """Accumulates postings and statistics during a single build pass."""

    def __init__(self):
        self.apis: Dict[str, ApiRecord] = {}
        self.chunks: List[DocumentationChunk] = []
        self.postings: Dict[str, List[str]] = {}
        self.document_lengths: Dict[str, int] = {}
        self.document_frequencies: Dict[str, int] = {}
        self.total_terms = 0

    def add_document(self, doc_id: str, terms: List[str]) -> None:
        self.document_lengths[doc_id] = len(terms)
        self.total_terms += len(terms)

        # dict.fromkeys keeps first-seen order while dropping repeats
        for term in dict.fromkeys(terms):
            self.postings.setdefault(term, []).append(doc_id)
            self.document_frequencies[term] = self.document_frequencies.get(term, 0) + 1

    def add_api(self, api: ApiRecord) -> None:
        if not getattr(api, "name", None):
            logger.warning("Skipping API record without a name")
            return
        if api.name in self.apis:
            logger.warning(f"Skipping duplicate API record: {api.name}")
            return

        self.apis[api.name] = api
        self.add_document(api_document_id(api), api_terms(api))

    def add_chunk(self, chunk: DocumentationChunk) -> None:
        if not getattr(chunk, "id", None):
            logger.warning("Skipping documentation chunk without an id")
            return
        doc_id = chunk_document_id(chunk)
        if doc_id in self.document_lengths:
            logger.warning(f"Skipping duplicate documentation chunk: {chunk.id}")
            return

        self.chunks.append(chunk)
        self.add_document(doc_id, chunk_terms(chunk))

    def freeze(self) -> SearchIndex:
        document_count = len(self.document_lengths)
        average = self.total_terms / document_count if document_count else 0.0

        return SearchIndex(
            apis=MappingProxyType(dict(self.apis)),
            chunks=tuple(self.chunks),
            inverted_index=MappingProxyType(
                {term: tuple(ids) for term, ids in self.postings.items()}
            ),
            document_lengths=MappingProxyType(dict(self.document_lengths)),
            average_document_length=average,
            document_count=document_count,
            term_document_frequencies=MappingProxyType(dict(self.document_frequencies)),
        )


def build_search_index(
    apis: Iterable[ApiRecord],
    chunks: Iterable[DocumentationChunk],
) -> SearchIndex:
    """
    Build a search index from API records and documentation chunks.

    API records are indexed first, then chunks, each in the order given.
    Records without a name/id and duplicates are skipped with a warning;
    building never raises on such input.

    Args:
        apis: API records from the API extractor
        chunks: Documentation chunks from the markdown extractor

    Returns:
        Frozen SearchIndex
    """
    builder = _IndexBuilder()

    for api in apis:
        builder.add_api(api)
    for chunk in chunks:
        builder.add_chunk(chunk)

    index = builder.freeze()

    logger.info(
        f"Built search index: {len(index.apis)} APIs, {len(index.chunks)} chunks, "
        f"{index.term_count} terms, avg length {index.average_document_length:.1f}"
    )
    return index
