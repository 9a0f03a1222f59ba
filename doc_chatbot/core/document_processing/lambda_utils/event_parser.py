"""
API Gateway event parsing utilities for Lambda.
"""

import base64
import binascii
import logging
from typing import Any, Dict

from pydantic import ValidationError

from doc_chatbot.core.exceptions import RequestParseError
from doc_chatbot.models import ChatRequest

logger = logging.getLogger(__name__)


def parse_chat_request(event: Dict[str, Any]) -> ChatRequest:
    """
    Parse the chat request from an API Gateway proxy event.

    API Gateway passes the HTTP body as a string under "body":
    {
        "httpMethod": "POST",
        "path": "/chat",
        "body": "{\"question\": \"...\"}",
        "isBase64Encoded": false
    }

    A missing or null body is treated as "{}", giving an empty question.

    Raises:
        RequestParseError: Body is not valid JSON or does not match ChatRequest
    """
    body = event.get("body")
    if body is None:
        body = "{}"

    try:
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        logger.error("parse_chat_request - %s: %s", type(e).__name__, e)
        raise RequestParseError(f"Invalid base64 request body: {e}") from e

    try:
        request = ChatRequest.model_validate_json(body)
    except ValidationError as e:
        logger.error("parse_chat_request - ValidationError: %s", e)
        raise RequestParseError(
            f"Invalid request body: {e.errors()[0]['msg']}",
            details={"error_count": e.error_count()},
        ) from e

    logger.info(
        "parse_chat_request - Parsed request",
        extra={
            "request_id": (event.get("requestContext") or {}).get("requestId"),
            "question_length": len(request.question),
        },
    )
    return request
