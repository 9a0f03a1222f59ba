"""
AWS boundary modules.

Exports: S3ChunkCache, create_s3_client
"""

from .s3_chunk_cache import S3ChunkCache
from .s3_client import create_s3_client

__all__ = ["S3ChunkCache", "create_s3_client"]
