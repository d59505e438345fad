"""Utility modules for documentation search."""

from .text_processing import normalize, tokenize, stem
from .validators import coerce_api_records, coerce_chunks, validate_search_request
from .logging_config import setup_logging

__all__ = [
    "normalize",
    "tokenize",
    "stem",
    "coerce_api_records",
    "coerce_chunks",
    "validate_search_request",
    "setup_logging",
]
