"""Fuzzy API name resolution."""

import logging
from typing import Iterable, List, Tuple

import numpy as np

from ..models.api import ApiRecord

logger = logging.getLogger(__name__)

PREFIX_DISTANCE = 0
SUBSTRING_DISTANCE = 1


def levenshtein_distance(a: str, b: str) -> int:
    """
    Calculate Levenshtein edit distance between two strings.

    Fills the full (len(b) + 1) x (len(a) + 1) table; API names are short.
    """
    table = np.zeros((len(b) + 1, len(a) + 1), dtype=int)
    table[:, 0] = np.arange(len(b) + 1)
    table[0, :] = np.arange(len(a) + 1)

    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                table[i, j] = table[i - 1, j - 1]
            else:
                table[i, j] = min(
                    table[i - 1, j - 1] + 1,  # substitution
                    table[i, j - 1] + 1,  # insertion
                    table[i - 1, j] + 1,  # deletion
                )

    return int(table[len(b), len(a)])


def find_similar_apis(
    query: str,
    apis: Iterable[ApiRecord],
    max_distance: int = 3,
    limit: int = 3,
) -> List[ApiRecord]:
    """
    Find API records whose names are close to a possibly misspelled name.

    A case-insensitive exact match short-circuits and is returned alone.
    Otherwise prefix matches rank as distance 0, substring matches as
    distance 1, and remaining names by edit distance up to ``max_distance``.
    Ties keep collection order.

    Args:
        query: Partial or misspelled API name
        apis: API records to search
        max_distance: Maximum edit distance accepted
        limit: Maximum number of suggestions

    Returns:
        Matching API records, closest first
    """
    apis = list(apis)
    query_lower = query.lower()

    for api in apis:
        if api.name.lower() == query_lower:
            return [api]

    candidates: List[Tuple[int, ApiRecord]] = []
    for api in apis:
        name_lower = api.name.lower()

        if name_lower.startswith(query_lower) or query_lower.startswith(name_lower):
            candidates.append((PREFIX_DISTANCE, api))
        elif name_lower in query_lower or query_lower in name_lower:
            candidates.append((SUBSTRING_DISTANCE, api))
        else:
            distance = levenshtein_distance(name_lower, query_lower)
            if distance <= max_distance:
                candidates.append((distance, api))

    candidates.sort(key=lambda candidate: candidate[0])
    logger.debug(f"Fuzzy match for '{query}': {len(candidates)} candidates")
    return [api for _, api in candidates[:max(limit, 0)]]
