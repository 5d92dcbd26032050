"""
Author Pydantic Schemas

The shape of author data returned by the API.
"""

from pydantic import BaseModel, ConfigDict, Field


class AuthorResponse(BaseModel):
    """
    Schema for author responses.

    model_config with from_attributes=True allows creating this schema
    directly from an Author model instance:

        AuthorResponse.model_validate(author)
    """

    id: str = Field(
        ...,
        description="Store-generated identifier (24 hex characters)",
        examples=["65f0c2a4e13b4f0d9c1a2b3c"],
    )

    name: str | None = Field(
        ...,
        description="Author's full name (null if stored without one)",
        examples=["J.R.R. Tolkien", "J.K. Rowling"],
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "65f0c2a4e13b4f0d9c1a2b3c",
                "name": "J.R.R. Tolkien",
            }
        },
    )
