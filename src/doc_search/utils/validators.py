"""Input validation and coercion of extractor output."""

import logging
from typing import Any, Iterable, List, Mapping, Union

from pydantic import ValidationError as PydanticValidationError

from ..models.api import ApiRecord, ApiRecordModel
from ..models.chunk import DocumentationChunk, DocumentationChunkModel
from ..models.query import SearchRequest
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def coerce_api_record(raw: Union[ApiRecord, Mapping[str, Any]]) -> ApiRecord:
    """
    Convert one extractor record into an ApiRecord.

    Args:
        raw: ApiRecord instance or mapping with snake_case or camelCase keys

    Raises:
        ValidationError: If the record is malformed
    """
    if isinstance(raw, ApiRecord):
        return raw
    if not isinstance(raw, Mapping):
        raise ValidationError(f"Invalid API record type: {type(raw).__name__}")

    try:
        return ApiRecordModel.model_validate(raw).to_record()
    except PydanticValidationError as e:
        raise ValidationError(f"API record validation failed: {e.error_count()} errors")


def coerce_chunk(raw: Union[DocumentationChunk, Mapping[str, Any]]) -> DocumentationChunk:
    """
    Convert one extractor record into a DocumentationChunk.

    Raises:
        ValidationError: If the record is malformed
    """
    if isinstance(raw, DocumentationChunk):
        return raw
    if not isinstance(raw, Mapping):
        raise ValidationError(f"Invalid documentation chunk type: {type(raw).__name__}")

    try:
        return DocumentationChunkModel.model_validate(raw).to_chunk()
    except PydanticValidationError as e:
        raise ValidationError(f"Documentation chunk validation failed: {e.error_count()} errors")


def coerce_api_records(records: Iterable[Any]) -> List[ApiRecord]:
    """Coerce a batch of API records, skipping malformed ones."""
    coerced = []
    for i, raw in enumerate(records):
        try:
            coerced.append(coerce_api_record(raw))
        except ValidationError as e:
            name = raw.get("name") if isinstance(raw, Mapping) else None
            logger.warning(f"Skipping API record #{i} ({name or 'unnamed'}): {str(e)}")
    return coerced


def coerce_chunks(records: Iterable[Any]) -> List[DocumentationChunk]:
    """Coerce a batch of documentation chunks, skipping malformed ones."""
    coerced = []
    for i, raw in enumerate(records):
        try:
            coerced.append(coerce_chunk(raw))
        except ValidationError as e:
            chunk_id = raw.get("id") if isinstance(raw, Mapping) else None
            logger.warning(f"Skipping documentation chunk #{i} ({chunk_id or 'no id'}): {str(e)}")
    return coerced


def validate_search_request(**kwargs: Any) -> SearchRequest:
    """
    Build a SearchRequest from keyword arguments.

    Raises:
        ValidationError: If any parameter is invalid
    """
    try:
        return SearchRequest(**kwargs)
    except PydanticValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        raise ValidationError(f"Invalid search request: {messages}")
