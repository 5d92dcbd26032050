"""
Book Pydantic Schemas

Books are always returned with their author expanded into a full
AuthorResponse. A book whose author reference does not resolve is
returned with "author": null.
"""

from pydantic import BaseModel, ConfigDict, Field

from catalog_api.schemas.author import AuthorResponse


class BookResponse(BaseModel):
    """Schema for book responses, with the author populated."""

    id: str = Field(
        ...,
        description="Store-generated identifier (24 hex characters)",
        examples=["65f0c2a4e13b4f0d9c1a2b3d"],
    )

    title: str | None = Field(
        ...,
        description="Book title (null if stored without one)",
        examples=["The Hobbit"],
    )

    author: AuthorResponse | None = Field(
        default=None,
        description="The book's author, or null if the reference is dangling",
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "65f0c2a4e13b4f0d9c1a2b3d",
                "title": "The Hobbit",
                "author": {
                    "id": "65f0c2a4e13b4f0d9c1a2b3c",
                    "name": "J.R.R. Tolkien",
                },
            }
        },
    )
