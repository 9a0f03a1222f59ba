"""
S3-backed chunk cache.

Stores one serialized ChunkSet per cache key as a single JSON object, so
readers never observe a partial write. Create-only writes use S3 conditional
requests (If-None-Match: *).

Dependencies: botocore, pydantic
System role: Chunk cache storage boundary
"""

import logging

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from doc_chatbot.core.exceptions import NotFoundError, SerializationError, StorageError
from doc_chatbot.models import ChunkSet

from .s3_client import NOT_FOUND_CODES, WRITE_CONFLICT_CODES, create_s3_client, error_code

logger = logging.getLogger(__name__)


class S3ChunkCache:
    """Chunk cache keyed by S3 object key."""

    def __init__(self, bucket: str, s3_client=None, region: str | None = None) -> None:
        """
        Initialize chunk cache for a bucket.

        Args:
            bucket: S3 bucket name holding cache entries
            s3_client: Preconfigured boto3 S3 client (created if None)
            region: AWS region used when creating the client
        """
        self._bucket = bucket
        self._s3_client = s3_client or create_s3_client(region)

    def exists(self, key: str) -> bool:
        """
        Check whether a chunk set is cached under a key.

        Args:
            key: Cache key

        Returns:
            bool: True if an entry exists, False otherwise

        Raises:
            StorageError: Any failure other than "not found"
        """
        try:
            self._s3_client.head_object(Bucket=self._bucket, Key=key)
            return True
        except ClientError as e:
            if error_code(e) in NOT_FOUND_CODES:
                return False
            raise StorageError(
                f"Failed to check chunk cache: {e}", operation="exists", key=key
            ) from e
        except BotoCoreError as e:
            raise StorageError(
                f"Failed to check chunk cache: {e}", operation="exists", key=key
            ) from e

    def read(self, key: str) -> ChunkSet:
        """
        Read the chunk set cached under a key.

        Args:
            key: Cache key

        Returns:
            ChunkSet: Deserialized chunk set

        Raises:
            NotFoundError: No entry under key
            StorageError: S3 read failed
            SerializationError: Entry is not a valid chunk set payload
        """
        try:
            response = self._s3_client.get_object(Bucket=self._bucket, Key=key)
            payload = response["Body"].read()
        except ClientError as e:
            if error_code(e) in NOT_FOUND_CODES:
                raise NotFoundError(key) from e
            raise StorageError(
                f"Failed to read chunk cache: {e}", operation="read", key=key
            ) from e
        except BotoCoreError as e:
            raise StorageError(
                f"Failed to read chunk cache: {e}", operation="read", key=key
            ) from e

        try:
            return ChunkSet.model_validate_json(payload.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise SerializationError(
                f"Chunk cache entry is not UTF-8: {e.reason}", cache_key=key
            ) from e
        except ValidationError as e:
            raise SerializationError(
                f"Malformed chunk cache entry: {e.error_count()} validation error(s)",
                cache_key=key,
            ) from e

    def write(self, key: str, chunk_set: ChunkSet) -> None:
        """
        Persist a chunk set, overwriting any prior entry.

        Args:
            key: Cache key
            chunk_set: Chunk set to store

        Raises:
            StorageError: S3 write failed
        """
        try:
            self._put(key, chunk_set)
        except (ClientError, BotoCoreError) as e:
            raise StorageError(
                f"Failed to write chunk cache: {e}", operation="write", key=key
            ) from e

        logger.info(
            "write - Stored chunk set",
            extra={"cache_key": key, "chunk_count": chunk_set.chunk_count},
        )

    def write_if_absent(self, key: str, chunk_set: ChunkSet) -> bool:
        """
        Persist a chunk set only if no entry exists yet.

        Args:
            key: Cache key
            chunk_set: Chunk set to store

        Returns:
            bool: True if this call created the entry, False if another writer won

        Raises:
            StorageError: S3 write failed for any other reason
        """
        try:
            self._put(key, chunk_set, IfNoneMatch="*")
        except ClientError as e:
            if error_code(e) in WRITE_CONFLICT_CODES:
                logger.info(
                    "write_if_absent - Entry created by another writer",
                    extra={"cache_key": key, "error_code": error_code(e)},
                )
                return False
            raise StorageError(
                f"Failed to write chunk cache: {e}", operation="write", key=key
            ) from e
        except BotoCoreError as e:
            raise StorageError(
                f"Failed to write chunk cache: {e}", operation="write", key=key
            ) from e

        logger.info(
            "write_if_absent - Created chunk set",
            extra={"cache_key": key, "chunk_count": chunk_set.chunk_count},
        )
        return True

    def _put(self, key: str, chunk_set: ChunkSet, **kwargs) -> None:
        # Single PutObject of the full payload
        self._s3_client.put_object(
            Bucket=self._bucket,
            Key=key,
            Body=chunk_set.model_dump_json().encode("utf-8"),
            ContentType="application/json",
            **kwargs,
        )
