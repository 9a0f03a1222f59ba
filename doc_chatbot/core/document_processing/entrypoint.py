"""
Document chunking pipeline orchestrator.

Coordinates the chunk cache, S3 document load, and chunking tasks:
check cache -> (miss) load -> split -> write -> result.

Dependencies: tasks, boundary.aws, configs
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time

from doc_chatbot.boundary.aws import S3ChunkCache, create_s3_client
from doc_chatbot.core.exceptions import NotFoundError
from doc_chatbot.models import ChunkSet

from .configs import (
    DocumentPipelineSettings,
    get_pipeline_settings,
)
from .models import PipelineResult
from .tasks import ChunkingTask, S3LoadTask

logger = logging.getLogger(__name__)


class DocumentPipeline:
    """Orchestrate document chunking: cache check -> load -> split -> cache write."""

    def __init__(
        self,
        settings: DocumentPipelineSettings | None = None,
        cache: S3ChunkCache | None = None,
        load_task: S3LoadTask | None = None,
        chunking_task: ChunkingTask | None = None,
    ) -> None:
        """
        Initialize pipeline with configuration.

        Args:
            settings: Pipeline settings (loaded from environment if None)
            cache: Chunk cache (S3-backed, created from settings if None)
            load_task: Document loader (created from settings if None)
            chunking_task: Splitter (created from settings if None)
        """
        self._settings = settings or get_pipeline_settings()

        s3_client = None
        if cache is None or load_task is None:
            s3_client = create_s3_client(
                region=self._settings.region,
                max_attempts=self._settings.s3_max_attempts,
            )

        self._cache = cache or S3ChunkCache(
            bucket=self._settings.bucket_name, s3_client=s3_client
        )
        self._load_task = load_task or S3LoadTask(
            bucket=self._settings.bucket_name, s3_client=s3_client
        )
        self._chunking_task = chunking_task or ChunkingTask(
            chunk_size=self._settings.chunk_size,
            chunk_overlap=self._settings.chunk_overlap,
        )

    def process(self, document_key: str | None = None, question: str = "") -> PipelineResult:
        """
        Return the chunk set summary for a document, splitting it on first use.

        The question is accepted but not used: the result only reports chunk counts.

        Args:
            document_key: S3 key of the document (configured default if None)
            question: Question from the chat request

        Returns:
            PipelineResult: Chunk count, cache key, and whether the cache was hit

        Raises:
            DocumentNotFoundError: Source document missing on a cache miss
            StorageError: S3 operation failed
            SerializationError: Cached payload is malformed
        """
        start_time = time.perf_counter()
        doc_key = document_key or self._settings.document_key
        cache_key = self._settings.cache_key_for(doc_key)

        logger.info(
            "process - Received request",
            extra={
                "document_key": doc_key,
                "cache_key": cache_key,
                "question_length": len(question),
            },
        )

        if self._cache.exists(cache_key):
            try:
                chunk_set = self._cache.read(cache_key)
                return self._result(doc_key, cache_key, chunk_set, True, start_time)
            except NotFoundError:
                # Entry removed between the existence check and the read
                logger.info(
                    "process - Cache entry vanished, splitting document",
                    extra={"cache_key": cache_key},
                )

        documents = self._load_task.load(doc_key)
        chunks = self._chunking_task.to_chunks(documents)
        chunk_set = ChunkSet.from_chunks(doc_key, chunks)

        if self._settings.conditional_writes:
            if not self._cache.write_if_absent(cache_key, chunk_set):
                # Another invocation created the entry first; report what is stored
                try:
                    chunk_set = self._cache.read(cache_key)
                except NotFoundError:
                    logger.info(
                        "process - Winning entry already removed, reporting own chunk set",
                        extra={"cache_key": cache_key},
                    )
        else:
            self._cache.write(cache_key, chunk_set)

        return self._result(doc_key, cache_key, chunk_set, False, start_time)

    def process_batch(self, document_keys: list[str]) -> list[PipelineResult]:
        """
        Process multiple documents.

        Args:
            document_keys: List of S3 document keys

        Returns:
            list[PipelineResult]: Results for each document
        """
        return [self.process(key) for key in document_keys]

    def _result(
        self,
        document_key: str,
        cache_key: str,
        chunk_set: ChunkSet,
        cache_hit: bool,
        start_time: float,
    ) -> PipelineResult:
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        result = PipelineResult(
            document_key=document_key,
            cache_key=cache_key,
            chunk_count=chunk_set.chunk_count,
            cache_hit=cache_hit,
            processing_time_ms=elapsed_ms,
        )
        logger.info(
            "process - %s",
            "Cache hit" if cache_hit else "Cache miss, document split",
            extra={
                "cache_key": cache_key,
                "chunk_count": result.chunk_count,
                "processing_time_ms": elapsed_ms,
            },
        )
        return result


if __name__ == "__main__":
    import sys

    from doc_chatbot.observability.logger import configure_logging, get_logger

    configure_logging()
    get_logger(__name__).info("main - Running pipeline locally")
    pipeline = DocumentPipeline()
    result = pipeline.process(sys.argv[1] if len(sys.argv) > 1 else None)
    print(result.answer)
