"""
S3 document load task.

Reads a text document from S3 into a LangChain Document. The object body is
read in memory; no temp files are written.

Dependencies: boto3, botocore, langchain_core
System role: First stage of the chunking pipeline (cold path only)
"""

import logging

from botocore.exceptions import BotoCoreError, ClientError
from langchain_core.documents import Document

from doc_chatbot.boundary.aws.s3_client import NOT_FOUND_CODES, create_s3_client, error_code
from doc_chatbot.core.exceptions import (
    DocumentDecodeError,
    DocumentNotFoundError,
    StorageError,
)

logger = logging.getLogger(__name__)


class S3LoadTask:
    """Load text documents from an S3 bucket."""

    def __init__(self, bucket: str, s3_client=None, region: str | None = None) -> None:
        """
        Initialize S3 load task.

        Args:
            bucket: S3 bucket name for document storage
            s3_client: Preconfigured boto3 S3 client (created if None)
            region: AWS region used when creating the client
        """
        self._bucket = bucket
        self._s3_client = s3_client or create_s3_client(region)

    def load(self, document_key: str) -> list[Document]:
        """
        Load a document from S3.

        Args:
            document_key: S3 object key (e.g., "input.txt")

        Returns:
            list[Document]: Single document with "source" metadata

        Raises:
            DocumentNotFoundError: Object does not exist
            StorageError: S3 read failed
            DocumentDecodeError: Object is not UTF-8 text
        """
        if not document_key:
            raise DocumentNotFoundError(document_key)

        try:
            response = self._s3_client.get_object(Bucket=self._bucket, Key=document_key)
            raw = response["Body"].read()
        except ClientError as e:
            if error_code(e) in NOT_FOUND_CODES:
                raise DocumentNotFoundError(document_key) from e
            raise StorageError(
                f"Failed to load document from S3: {e}", operation="load", key=document_key
            ) from e
        except BotoCoreError as e:
            raise StorageError(
                f"Failed to load document from S3: {e}", operation="load", key=document_key
            ) from e

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DocumentDecodeError(
                f"Document is not valid UTF-8 text: {e.reason}", document_key
            ) from e

        logger.info(
            "load - Loaded document",
            extra={"document_key": document_key, "length": len(text)},
        )
        return [
            Document(
                page_content=text,
                metadata={"source": f"s3://{self._bucket}/{document_key}"},
            )
        ]
