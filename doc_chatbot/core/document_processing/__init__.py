"""
Document chunking pipeline.

Self-contained Lambda-ready module: checks the S3 chunk cache, loads and
splits the document on a miss, and persists the chunk set.

Dependencies: boto3, langchain_text_splitters, langchain_core, pydantic
System role: Chunking pipeline entrypoint
"""

from .configs import (
    DocumentPipelineSettings,
    get_pipeline_settings,
)
from .entrypoint import DocumentPipeline
from .models import PipelineResult

__all__ = [
    "DocumentPipeline",
    "DocumentPipelineSettings",
    "get_pipeline_settings",
    "PipelineResult",
]
