"""API schemas for blog post requests and responses."""
from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, Field, field_validator


class AuthorName(BaseModel):
    """Author as accepted on input: both names are required."""
    first_name: str = Field(..., alias="firstName", min_length=1, description="First name cannot be blank")
    last_name: str = Field(..., alias="lastName", min_length=1, description="Last name cannot be blank")

    model_config = {"populate_by_name": True}

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure name fields are not just whitespace."""
        if not v or not v.strip():
            raise ValueError("Field cannot be blank or only whitespace")
        return v


class CreateBlogPostRequest(BaseModel):
    """Request schema for creating a new blog post."""
    author: AuthorName
    title: str = Field(..., min_length=1, description="Post title")
    content: str = Field(..., min_length=1, description="Post body")

    @field_validator("title", "content")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure fields are not just whitespace."""
        if not v or not v.strip():
            raise ValueError("Field cannot be blank or only whitespace")
        return v


class UpdateBlogPostRequest(BaseModel):
    """
    Request schema for a partial update of a blog post.

    Only the fields present in the body are applied. The optional id is
    accepted and ignored; the id in the URL selects the post.
    """
    id: UUID | None = None
    title: str | None = Field(default=None, min_length=1)
    content: str | None = Field(default=None, min_length=1)
    author: AuthorName | None = None

    @field_validator("title", "content", "author", mode="before")
    @classmethod
    def validate_not_null(cls, v):
        """A field that is sent must carry a value; null cannot clear it."""
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @field_validator("title", "content")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure fields are not just whitespace."""
        if not v.strip():
            raise ValueError("Field cannot be blank or only whitespace")
        return v

    def changes(self) -> dict:
        """Fields explicitly sent in the request, keyed by domain field name."""
        return self.model_dump(exclude_unset=True, exclude={"id"})


class BlogPostResponse(BaseModel):
    """
    Response schema for blog post data returned by the API.

    The author is flattened to its display name, "{firstName} {lastName}".
    """
    id: UUID
    title: str
    content: str
    author: str
    created: datetime

    model_config = {"from_attributes": True}
