"""BM25 ranking over a built SearchIndex.

Formula:
    idf(t)      = ln((N - df + 0.5) / (df + 0.5) + 1)
    score(t, d) = idf(t) * tf * (k1 + 1) / (tf + k1 * (1 - b + b * dl / avgdl))

Where:
    N     = number of indexed documents
    df    = number of documents containing the term
    tf    = occurrences of the term in the document
    dl    = document length in terms
    avgdl = average document length over the corpus

On top of the raw score, API names matching the query and platform-tagged
chunks for platform-specific queries are boosted. Returned scores are
normalized so the best result scores 100.
"""

import logging
import math
import re
from typing import Dict, List, Optional, Sequence

import numpy as np

from ..models.api import ApiRecord
from ..models.chunk import DocumentationChunk
from ..models.query import SearchFilters
from ..models.result import Highlight, ResultType, SearchResult
from ..utils.documents import (
    api_document_id,
    api_matches_filters,
    api_terms,
    chunk_document_id,
    chunk_matches_filters,
    chunk_terms,
    term_frequencies,
)
from ..utils.text_processing import normalize
from .index import SearchIndex

logger = logging.getLogger(__name__)

K1 = 1.2
B = 0.75

EXACT_NAME_BOOST = 3.0
PARTIAL_NAME_BOOST = 1.5
PLATFORM_BOOST = 1.3

CONTENT_EXCERPT_LENGTH = 200
DESCRIPTION_EXCERPT_LENGTH = 150

_SENTENCE_SPLIT = re.compile(r'[.!?]+')


def inverse_document_frequency(document_frequency: int, total_documents: int) -> float:
    return math.log(
        (total_documents - document_frequency + 0.5) / (document_frequency + 0.5) + 1
    )


def bm25_score(
    frequencies: Dict[str, int],
    query_terms: Sequence[str],
    document_length: int,
    index: SearchIndex,
) -> float:
    """
    Compute the raw BM25 score of one document.

    Args:
        frequencies: Term frequency map of the document
        query_terms: Normalized query terms
        document_length: Build-time length of the document
        index: Index providing corpus statistics

    Returns:
        Sum of per-term contributions (0.0 when no query term occurs)
    """
    avgdl = index.average_document_length
    score = 0.0

    for term in query_terms:
        tf = frequencies.get(term, 0)
        if tf == 0:
            continue

        idf = inverse_document_frequency(index.document_frequency(term), index.document_count)
        length_ratio = document_length / avgdl if avgdl else 0.0
        numerator = tf * (K1 + 1)
        denominator = tf + K1 * (1 - B + B * length_ratio)
        score += idf * (numerator / denominator)

    return score


def _name_boost(name: str, query_lower: str) -> float:
    name_lower = name.lower()
    if name_lower == query_lower:
        return EXACT_NAME_BOOST
    if name_lower in query_lower or query_lower in name_lower:
        return PARTIAL_NAME_BOOST
    return 1.0


def _platform_boost(chunk: DocumentationChunk, query_lower: str) -> float:
    # Raw substring check: "iOS-specific" counts as mentioning iOS.
    boost = 1.0
    if "ios" in query_lower and "ios" in chunk.platforms:
        boost *= PLATFORM_BOOST
    if "android" in query_lower and "android" in chunk.platforms:
        boost *= PLATFORM_BOOST
    return boost


def _candidate_ids(index: SearchIndex, query_terms: Sequence[str]) -> set:
    candidates = set()
    for term in query_terms:
        candidates.update(index.inverted_index.get(term, ()))
    return candidates


def _score_apis(
    index: SearchIndex,
    query_terms: List[str],
    query_lower: str,
    filters: SearchFilters,
    candidates: set,
) -> List[SearchResult]:
    results = []
    for api in index.apis.values():
        if not api_matches_filters(api, filters):
            continue
        doc_id = api_document_id(api)
        if doc_id not in candidates:
            continue

        terms = api_terms(api)
        score = bm25_score(
            term_frequencies(terms),
            query_terms,
            index.document_lengths.get(doc_id, len(terms)),
            index,
        )
        score *= _name_boost(api.name, query_lower)

        if score > 0:
            results.append(SearchResult(item=api, score=score, type=ResultType.API, highlights=[]))
    return results


def _score_chunks(
    index: SearchIndex,
    query_terms: List[str],
    query_lower: str,
    filters: SearchFilters,
    candidates: set,
) -> List[SearchResult]:
    results = []
    for chunk in index.chunks:
        if not chunk_matches_filters(chunk, filters):
            continue
        doc_id = chunk_document_id(chunk)
        if doc_id not in candidates:
            continue

        terms = chunk_terms(chunk)
        score = bm25_score(
            term_frequencies(terms),
            query_terms,
            index.document_lengths.get(doc_id, len(terms)),
            index,
        )
        score *= _platform_boost(chunk, query_lower)

        if score > 0:
            results.append(
                SearchResult(item=chunk, score=score, type=ResultType.DOCUMENTATION, highlights=[])
            )
    return results


def normalize_scores(results: List[SearchResult]) -> None:
    """Rescale sorted results in place to integers on a 0-100 scale."""
    if not results:
        return

    scores = np.array([result.score for result in results], dtype=float)
    # floor(x + 0.5) rounds halves up, unlike np.round
    scaled = np.floor(scores / scores.max() * 100 + 0.5).astype(int)
    for result, value in zip(results, scaled):
        result.score = int(value)


def api_highlights(api: ApiRecord, query_terms: Sequence[str]) -> List[Highlight]:
    """Explain an API match via its name and description."""
    highlights = []

    name_lower = api.name.lower()
    if any(term in name_lower for term in query_terms):
        highlights.append(Highlight(field="name", excerpt=api.name))

    description_terms = set(normalize(api.description))
    if any(term in description_terms for term in query_terms):
        excerpt = api.description
        if len(excerpt) > DESCRIPTION_EXCERPT_LENGTH:
            excerpt = excerpt[:DESCRIPTION_EXCERPT_LENGTH] + "..."
        highlights.append(Highlight(field="description", excerpt=excerpt))

    return highlights


def chunk_highlights(chunk: DocumentationChunk, query_terms: Sequence[str]) -> List[Highlight]:
    """Explain a chunk match via its title and first matching sentence."""
    highlights = []

    title_terms = set(normalize(chunk.title))
    if any(term in title_terms for term in query_terms):
        highlights.append(Highlight(field="title", excerpt=chunk.title))

    for sentence in _SENTENCE_SPLIT.split(chunk.content):
        sentence_terms = set(normalize(sentence))
        if any(term in sentence_terms for term in query_terms):
            highlights.append(
                Highlight(field="content", excerpt=sentence.strip()[:CONTENT_EXCERPT_LENGTH])
            )
            break

    return highlights


def search(
    index: SearchIndex,
    query: str,
    limit: int = 5,
    filters: Optional[SearchFilters] = None,
) -> List[SearchResult]:
    """
    Rank indexed documents against a natural-language query.

    Filters are applied before scoring, so filtered-out documents never
    influence score normalization.

    Args:
        index: Built search index
        query: Free-text query
        limit: Maximum number of results
        filters: Optional type/platform/category/kind filters

    Returns:
        Results sorted by descending score, scores normalized to 0-100
    """
    query_terms = normalize(query)
    if not query_terms:
        logger.debug(f"Query normalized to no terms: '{query[:50]}'")
        return []

    filters = filters or SearchFilters()
    query_lower = query.lower()
    candidates = _candidate_ids(index, query_terms)

    results: List[SearchResult] = []
    if filters.include_apis:
        results.extend(_score_apis(index, query_terms, query_lower, filters, candidates))
    if filters.include_chunks:
        results.extend(_score_chunks(index, query_terms, query_lower, filters, candidates))

    # list.sort is stable, so ties keep build order
    results.sort(key=lambda result: result.score, reverse=True)
    normalize_scores(results)
    results = results[:max(limit, 0)]

    for result in results:
        if result.type == ResultType.API:
            result.highlights = api_highlights(result.item, query_terms)
        else:
            result.highlights = chunk_highlights(result.item, query_terms)

    logger.debug(f"Search '{query[:50]}' returned {len(results)} results")
    return results
