"""
S3 client factory and error helpers.

Shared by the chunk cache and the document load task so both use one client
configuration (region, standard retry mode).

Dependencies: boto3, botocore
System role: S3 client setup for the storage boundary
"""

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound"}
WRITE_CONFLICT_CODES = {"412", "PreconditionFailed", "409", "ConditionalRequestConflict"}


def error_code(error: ClientError) -> str:
    """Return the S3 error code of a ClientError ("Unknown" if absent)."""
    return str(error.response.get("Error", {}).get("Code", "Unknown"))


def create_s3_client(region: str | None = None, max_attempts: int = 3):
    """
    Create a boto3 S3 client with standard retry mode.

    Args:
        region: AWS region (boto3 default chain if None)
        max_attempts: Total attempts per call, including the first

    Returns:
        S3 client
    """
    config = Config(retries={"max_attempts": max_attempts, "mode": "standard"})
    return boto3.client("s3", region_name=region, config=config)
