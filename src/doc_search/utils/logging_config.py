"""Logging configuration for documentation search."""

import logging
import sys
from typing import Optional


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    include_timestamp: bool = True
) -> None:
    """
    Set up logging for the documentation search engine.

    Logs go to stderr so that stdout stays free for a stdio tool protocol.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        include_timestamp: Whether to include timestamps
    """
    if format_string is None:
        if include_timestamp:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(name)s - %(levelname)s - %(message)s"

    numeric_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=numeric_level,
        format=format_string,
        stream=sys.stderr,
        force=True
    )

    logging.getLogger("doc_search").setLevel(numeric_level)
    logging.getLogger("numpy").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.debug(f"Logging configured with level: {level}")
