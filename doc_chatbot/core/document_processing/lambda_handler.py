"""
Lambda handler for the chat endpoint (API Gateway proxy integration).

POST /chat with {"question": "..."} runs the chunking pipeline for the
configured document and answers with a chunk-count summary:
200 {"answer": "..."} on success, 500 {"error": "..."} on any failure.

Environment variables:
- BUCKET_NAME: S3 bucket holding the document and chunk cache (required)
- CHATBOT_*: optional pipeline settings (see configs.py)
- LOG_LEVEL: Logging level

Dependencies: entrypoint, lambda_utils, python-dotenv
System role: Lambda entry point and single error boundary
"""

import logging
import os
from typing import Any, Dict

from dotenv import load_dotenv

# Load environment variables from .env if present
load_dotenv()

from .entrypoint import DocumentPipeline
from .lambda_utils.config import validate_environment
from .lambda_utils.event_parser import parse_chat_request
from .lambda_utils.responses import error_response, success_response

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("LOG_LEVEL", "INFO"))


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for chat requests.

    Every failure (configuration, request parsing, storage, missing document,
    malformed cache entry) is caught here and returned as a 500 response
    carrying the error's string form. Nothing is retried.

    Args:
        event: API Gateway proxy event
        context: Lambda context object

    Returns:
        Dict with statusCode, headers, and JSON body
    """
    request_id = getattr(context, "aws_request_id", None)
    logger.info("handler - Received chat request", extra={"request_id": request_id})

    try:
        validate_environment()
        request = parse_chat_request(event)

        # Initialize pipeline once per warm container
        if not hasattr(handler, "_pipeline"):
            handler._pipeline = DocumentPipeline()

        result = handler._pipeline.process(question=request.question)

    except Exception as e:
        logger.error(
            "%s:handler - %s: %s",
            __name__,
            type(e).__name__,
            e,
            extra={"request_id": request_id},
        )
        return error_response(e)

    logger.info(
        "handler - Request completed",
        extra={
            "request_id": request_id,
            "cache_hit": result.cache_hit,
            "chunk_count": result.chunk_count,
            "processing_time_ms": result.processing_time_ms,
        },
    )
    return success_response(result.answer)
