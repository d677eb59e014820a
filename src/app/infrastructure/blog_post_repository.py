from uuid import UUID
from typing import Optional
from sqlalchemy import select, func

from src.app.core.domain.models import BlogPost
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database

from src.app.infrastructure.entities.blog_post_entity import BlogPostEntity
from src.app.infrastructure.mappers.blog_post_mapper import BlogPostMapper


class BlogPostRepository(BaseRepository[BlogPostEntity, BlogPost]):
    """Repository for BlogPost read operations. Writes go through the UnitOfWork."""

    def __init__(self, db: Database, mapper: BlogPostMapper):
        super().__init__(db, mapper)

    async def get_all(self) -> list[BlogPost]:
        """Get every stored post, oldest first."""
        return await self.find_all(
            select(BlogPostEntity).order_by(BlogPostEntity.created, BlogPostEntity.id)
        )

    async def get_by_id(self, post_id: UUID) -> Optional[BlogPost]:
        """Get a post by ID."""
        return await self.find_one(
            select(BlogPostEntity).where(BlogPostEntity.id == post_id)
        )

    async def get_first(self) -> Optional[BlogPost]:
        """Get an arbitrary stored post, or None when the collection is empty."""
        return await self.find_one(select(BlogPostEntity).limit(1))

    async def count(self) -> int:
        """Count stored posts."""
        return await self.scalar(select(func.count()).select_from(BlogPostEntity))
