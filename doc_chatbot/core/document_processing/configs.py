"""
Configuration settings for the document chunking pipeline.

Provides environment-based configuration for storage location, cache keys,
chunking, and the S3 client.

Dependencies: pydantic, pydantic_settings
System role: Centralized pipeline configuration
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from doc_chatbot.core.exceptions import ConfigurationError


class DocumentPipelineSettings(BaseSettings):
    """Settings for the document chunking pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="CHATBOT_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Storage location (required)
    bucket_name: str = Field(
        validation_alias=AliasChoices("BUCKET_NAME", "CHATBOT_BUCKET_NAME"),
        min_length=1,
        description="S3 bucket holding the document and the chunk cache",
    )
    region: str | None = Field(
        default=None,
        validation_alias=AliasChoices("CHATBOT_REGION", "AWS_REGION"),
        description="AWS region for the S3 client (boto3 default chain if unset)",
    )
    s3_max_attempts: int = Field(
        default=3,
        ge=1,
        description="Total attempts per S3 call (botocore standard retry mode)",
    )

    # Document and cache keys
    document_key: str = Field(
        default="input.txt",
        description="S3 key of the document to answer questions against",
    )
    cache_prefix: str = Field(
        default="chunks/",
        description="Key prefix for per-document chunk cache entries",
    )
    cache_key: str | None = Field(
        default=None,
        description="Fixed cache key for every document (legacy single-document mode)",
    )
    conditional_writes: bool = Field(
        default=True,
        description="Create cache entries with create-only conditional writes",
    )

    # Chunking settings
    chunk_size: int = Field(
        default=2000,
        gt=0,
        description="Maximum chunk size in characters",
    )
    chunk_overlap: int = Field(
        default=0,
        ge=0,
        description="Overlap between consecutive chunks",
    )

    @model_validator(mode="after")
    def _check_overlap(self) -> "DocumentPipelineSettings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError("chunk_overlap must be smaller than chunk_size")
        return self

    def cache_key_for(self, document_key: str) -> str:
        """
        Compute the cache key for a document.

        Args:
            document_key: S3 key of the source document

        Returns:
            str: Fixed cache key when configured, else "<cache_prefix><document_key>.json"
        """
        if self.cache_key:
            return self.cache_key
        return f"{self.cache_prefix}{document_key}.json"


@lru_cache
def get_pipeline_settings() -> DocumentPipelineSettings:
    """
    Get cached pipeline settings instance.

    Returns:
        DocumentPipelineSettings: Singleton settings loaded from environment

    Raises:
        ConfigurationError: Required setting missing or invalid
    """
    try:
        return DocumentPipelineSettings()
    except ValidationError as e:
        missing = [
            str(error["loc"][0]) for error in e.errors() if error["type"] == "missing"
        ]
        if missing:
            raise ConfigurationError(
                "Missing required environment variables: BUCKET_NAME", missing=missing
            ) from e
        raise ConfigurationError(f"Invalid pipeline settings: {e}") from e
