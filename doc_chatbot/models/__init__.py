"""
Domain models.

Exports: Chunk, ChunkSet, generate_chunk_id, ChatRequest, ChatResponse, ErrorResponse
"""

from .chat import ChatRequest, ChatResponse, ErrorResponse
from .chunk import Chunk, ChunkSet, generate_chunk_id

__all__ = [
    "Chunk",
    "ChunkSet",
    "generate_chunk_id",
    "ChatRequest",
    "ChatResponse",
    "ErrorResponse",
]
