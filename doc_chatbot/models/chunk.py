"""
Chunk domain models.

Represents a document chunk with deterministic ID, content, and provenance
metadata, and the ordered chunk set cached per document.

Dependencies: pydantic
System role: Data structures for chunks and cache entries
"""

import hashlib
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, field_validator


def generate_chunk_id(content: str, metadata: dict) -> str:
    """
    Generate deterministic chunk ID from content and metadata.

    Args:
        content: Chunk text content
        metadata: Chunk metadata

    Returns:
        str: SHA-256 hash of content + source + start_index
    """
    source = metadata.get("source", "")
    start_index = metadata.get("start_index", 0)
    hash_input = f"{content}:{source}:{start_index}"
    return hashlib.sha256(hash_input.encode()).hexdigest()[:16]


class Chunk(BaseModel):
    """Contiguous slice of a document with provenance metadata."""

    id: str = Field(description="Deterministic chunk identifier (content hash)")
    content: str = Field(description="Chunk text content")
    metadata: dict[str, Any] = Field(
        default_factory=dict, description="Chunk metadata (source, start_index)"
    )


class ChunkSet(BaseModel):
    """Ordered chunks of one document plus a representative metadata snapshot."""

    document_key: str = Field(default="", description="S3 key of the source document")
    chunks: list[Chunk] = Field(default_factory=list, description="Chunks in document order")
    metadata: dict[str, Any] | str | None = Field(
        default=None, description="Metadata of the first chunk, None when empty"
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the chunk set was computed",
    )

    @field_validator("chunks", mode="before")
    @classmethod
    def _upgrade_plain_chunks(cls, value: Any) -> Any:
        # Older cache entries store chunk contents as bare strings
        if isinstance(value, list):
            return [
                {"id": generate_chunk_id(item, {}), "content": item}
                if isinstance(item, str)
                else item
                for item in value
            ]
        return value

    @property
    def chunk_count(self) -> int:
        """Number of chunks in the set."""
        return len(self.chunks)

    @classmethod
    def from_chunks(cls, document_key: str, chunks: list[Chunk]) -> "ChunkSet":
        """Build a chunk set, taking the first chunk's metadata as the snapshot."""
        return cls(
            document_key=document_key,
            chunks=chunks,
            metadata=dict(chunks[0].metadata) if chunks else None,
        )
