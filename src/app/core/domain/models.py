"""Domain models used in business logic."""
import uuid
from datetime import datetime, UTC
from typing import Any, ClassVar
from uuid import UUID

from pydantic import BaseModel, Field


class Author(BaseModel):
    """Composite author of a blog post. Both names are always present."""
    first_name: str = Field(..., min_length=1, description="First name cannot be blank")
    last_name: str = Field(..., min_length=1, description="Last name cannot be blank")

    model_config = {"frozen": True}

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class BlogPost(BaseModel):
    """Domain model for BlogPost used in business logic."""

    # Fields a partial update may touch. id and created are fixed at creation.
    UPDATABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"title", "content", "author"})

    id: UUID = Field(default_factory=uuid.uuid4, description="Unique post ID")
    author: Author
    title: str = Field(..., min_length=1, description="Post title")
    content: str = Field(..., min_length=1, description="Post body")
    created: datetime = Field(default_factory=lambda: datetime.now(UTC), description="Creation timestamp")

    model_config = {"from_attributes": True}

    def revised(self, changes: dict[str, Any]) -> "BlogPost":
        """
        Return a copy of this post with the given changes applied.

        Keys outside UPDATABLE_FIELDS are ignored, so the identifier and
        creation timestamp survive any update. An author change may be given
        either as an Author or as a mapping of its fields.

        Args:
            changes: Field name to new value for the fields being updated

        Returns:
            New BlogPost; self is left untouched
        """
        applied = {key: value for key, value in changes.items() if key in self.UPDATABLE_FIELDS}
        return BlogPost.model_validate({**self.model_dump(), **applied})
