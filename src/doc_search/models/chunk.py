"""Documentation chunk data model with validation."""

from enum import Enum
from typing import Dict, Any, List, Optional, Tuple
from dataclasses import dataclass
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChunkType(str, Enum):
    """Documentation chunk types."""
    API = "api"
    GUIDE = "guide"
    EXAMPLE = "example"
    TROUBLESHOOTING = "troubleshooting"


PLATFORM_TAGS = ("ios", "android")


@dataclass(frozen=True)
class DocumentationChunk:
    """
    Heading-delimited section of markdown documentation.

    Attributes:
        id: Unique identifier derived from source file and position
        source: Source path relative to the repository root
        title: Heading text
        content: Body text
        type: Chunk type tag
        heading_level: Heading level (1-6)
        parent_id: Identifier of the nearest enclosing heading, if any
        mentioned_apis: API names mentioned in the body
        platforms: Platform tags detected in the body
    """
    id: str
    source: str
    title: str
    content: str
    type: ChunkType = ChunkType.GUIDE
    heading_level: int = 1
    parent_id: Optional[str] = None
    mentioned_apis: Tuple[str, ...] = ()
    platforms: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "source": self.source,
            "title": self.title,
            "content": self.content,
            "type": self.type.value,
            "heading_level": self.heading_level,
            "parent_id": self.parent_id,
            "mentioned_apis": list(self.mentioned_apis),
            "platforms": list(self.platforms),
        }


class DocumentationChunkModel(BaseModel):
    """Pydantic model for chunks handed over by the markdown extractor."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1, description="Chunk identifier")
    source: str = Field("", description="Source path")
    title: str = Field("", description="Heading text")
    content: str = Field("", description="Body text")
    type: ChunkType = Field(ChunkType.GUIDE, description="Chunk type")
    heading_level: int = Field(1, ge=1, le=6, alias="headingLevel")
    parent_id: Optional[str] = Field(None, alias="parentId")
    mentioned_apis: List[str] = Field(default_factory=list, alias="mentionedApis")
    platforms: List[str] = Field(default_factory=list)

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Chunk ID cannot be empty or whitespace only")
        return v.strip()

    @field_validator("platforms")
    @classmethod
    def validate_platforms(cls, v: List[str]) -> List[str]:
        """Keep only known platform tags, lowercased, without duplicates."""
        tags = []
        for tag in v:
            tag = tag.lower()
            if tag in PLATFORM_TAGS and tag not in tags:
                tags.append(tag)
        return tags

    def to_chunk(self) -> DocumentationChunk:
        """Convert to DocumentationChunk dataclass."""
        return DocumentationChunk(
            id=self.id,
            source=self.source,
            title=self.title,
            content=self.content,
            type=self.type,
            heading_level=self.heading_level,
            parent_id=self.parent_id,
            mentioned_apis=tuple(self.mentioned_apis),
            platforms=tuple(self.platforms),
        )
