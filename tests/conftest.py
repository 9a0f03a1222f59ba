"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory S3 client fake, pipeline settings, wired pipeline
Dependencies: pytest, botocore
System role: Test infrastructure and fixture management
"""

import io

import pytest
from botocore.exceptions import ClientError

from doc_chatbot.boundary.aws import S3ChunkCache
from doc_chatbot.core.document_processing.configs import (
    DocumentPipelineSettings,
    get_pipeline_settings,
)
from doc_chatbot.core.document_processing.entrypoint import DocumentPipeline
from doc_chatbot.core.document_processing.tasks import S3LoadTask

TEST_BUCKET = "test-bucket"

# 5000 characters of plain prose, single spaces, no newlines
PROSE_5000 = ("The quick brown fox jumps over the lazy dog. " * 112)[:5000]


def client_error(code: str, operation: str, status: int = 400) -> ClientError:
    """Build a botocore ClientError like the ones S3 returns."""
    return ClientError(
        {
            "Error": {"Code": code, "Message": f"{code} error"},
            "ResponseMetadata": {"HTTPStatusCode": status},
        },
        operation,
    )



def assert_chunks_cover(text: str, chunks) -> None:
    """Assert chunks sit at their start_index in order and only whitespace falls between them."""
    position = 0
    for chunk in chunks:
        start = chunk.metadata["start_index"]
        assert start >= position
        assert text[position:start].strip() == ""
        assert text[start : start + len(chunk.content)] == chunk.content
        position = start + len(chunk.content)
    assert text[position:].strip() == ""


class FakeS3Client:
    """In-memory stand-in for the subset of the boto3 S3 client the pipeline uses."""

    def __init__(self, objects: dict[str, bytes] | None = None) -> None:
        self.objects: dict[str, bytes] = dict(objects or {})
        self.calls: list[tuple[str, str]] = []

    def count(self, operation: str, key: str | None = None) -> int:
        return sum(
            1 for op, k in self.calls if op == operation and (key is None or k == key)
        )

    def head_object(self, Bucket: str, Key: str) -> dict:
        self.calls.append(("head_object", Key))
        if Key not in self.objects:
            raise client_error("404", "HeadObject", 404)
        return {"ContentLength": len(self.objects[Key])}

    def get_object(self, Bucket: str, Key: str) -> dict:
        self.calls.append(("get_object", Key))
        if Key not in self.objects:
            raise client_error("NoSuchKey", "GetObject", 404)
        return {"Body": io.BytesIO(self.objects[Key])}

    def put_object(
        self,
        Bucket: str,
        Key: str,
        Body: bytes,
        ContentType: str | None = None,
        IfNoneMatch: str | None = None,
    ) -> dict:
        self.calls.append(("put_object", Key))
        if IfNoneMatch == "*" and Key in self.objects:
            raise client_error("PreconditionFailed", "PutObject", 412)
        self.objects[Key] = Body if isinstance(Body, bytes) else Body.encode("utf-8")
        return {"ETag": '"fake-etag"'}


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset the cached settings singleton between tests."""
    get_pipeline_settings.cache_clear()
    yield
    get_pipeline_settings.cache_clear()


@pytest.fixture
def prose() -> str:
    """5000 characters of plain prose."""
    return PROSE_5000


@pytest.fixture
def s3_error():
    """Factory for S3 ClientErrors."""
    return client_error


@pytest.fixture
def fake_s3() -> FakeS3Client:
    """S3 fake holding the default document."""
    return FakeS3Client({"input.txt": PROSE_5000.encode("utf-8")})


@pytest.fixture
def settings() -> DocumentPipelineSettings:
    """Pipeline settings independent of the process environment."""
    return DocumentPipelineSettings(
        bucket_name=TEST_BUCKET,
        document_key="input.txt",
        cache_prefix="chunks/",
        cache_key=None,
        chunk_size=2000,
        chunk_overlap=0,
        conditional_writes=True,
    )


@pytest.fixture
def pipeline(settings: DocumentPipelineSettings, fake_s3: FakeS3Client) -> DocumentPipeline:
    """Pipeline wired to the S3 fake."""
    return DocumentPipeline(
        settings=settings,
        cache=S3ChunkCache(TEST_BUCKET, s3_client=fake_s3),
        load_task=S3LoadTask(TEST_BUCKET, s3_client=fake_s3),
    )


@pytest.fixture
def chunks_cover():
    """Checker that chunks account for every non-whitespace character of a text."""
    return assert_chunks_cover
