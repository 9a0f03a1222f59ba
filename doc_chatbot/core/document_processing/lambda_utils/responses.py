"""
API Gateway proxy response helpers for Lambda.
"""

import json
from typing import Any, Dict

from pydantic import BaseModel

from doc_chatbot.models import ChatResponse, ErrorResponse

JSON_HEADERS = {"Content-Type": "application/json"}


def build_response(status_code: int, body: BaseModel) -> Dict[str, Any]:
    """Wrap a response model in the API Gateway proxy format."""
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(body.model_dump()),
    }


def success_response(answer: str) -> Dict[str, Any]:
    return build_response(200, ChatResponse(answer=answer))


def error_response(error: Exception) -> Dict[str, Any]:
    return build_response(500, ErrorResponse(error=str(error)))
