"""
Error Response Schema

Every handled failure is returned as {"error": "<message>"}.
Used in router `responses=` so the error shape shows up in OpenAPI docs.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    error: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Author not found"],
    )
