"""
Task modules for the chunking pipeline.

Exports: S3LoadTask, ChunkingTask
"""

from .chunking_task import ChunkingTask
from .s3_load_task import S3LoadTask

__all__ = [
    "S3LoadTask",
    "ChunkingTask",
]
