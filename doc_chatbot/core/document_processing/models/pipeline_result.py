"""
Pipeline result model for document processing.

Represents the outcome of processing a document through the pipeline.

Dependencies: pydantic
System role: Return type for DocumentPipeline.process()
"""

from pydantic import BaseModel, Field


class PipelineResult(BaseModel):
    """Result of document processing pipeline execution."""

    document_key: str = Field(description="S3 key of the source document")
    cache_key: str = Field(description="S3 key of the chunk cache entry")
    chunk_count: int = Field(ge=0, description="Number of chunks in the chunk set")
    cache_hit: bool = Field(description="True when the chunk set was read from cache")
    processing_time_ms: float = Field(description="Total processing time in milliseconds")

    @property
    def answer(self) -> str:
        """Chunk-count summary returned to the caller."""
        if self.cache_hit:
            return f"Found {self.chunk_count} chunks"
        return f"Processed {self.chunk_count} chunks"
