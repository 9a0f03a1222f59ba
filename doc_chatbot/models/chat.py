"""
HTTP request and response schemas for the chat endpoint.

Validates the API Gateway request body and shapes the JSON response bodies.

Dependencies: pydantic
System role: Data validation and contract definition
"""

from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    """Body of POST /chat."""

    question: str = Field(default="", description="Question asked about the document")

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"example": {"question": "What is this document about?"}},
    )


class ChatResponse(BaseModel):
    """Successful response body."""

    answer: str


class ErrorResponse(BaseModel):
    """Failure response body."""

    error: str
