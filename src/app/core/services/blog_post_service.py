from uuid import UUID

from src.app.core.domain.models import Author, BlogPost
from src.app.infrastructure.blog_post_repository import BlogPostRepository
from src.app.logging import get_logger
from src.client.schemas import CreateBlogPostRequest, UpdateBlogPostRequest
from src.shared.database.unit_of_work import UnitOfWork
from src.shared.exceptions import EntityNotFound

logger = get_logger(__name__)


class BlogPostService:
    """Service for handling BlogPost business logic."""

    def __init__(self, repository: BlogPostRepository, unit_of_work: UnitOfWork):
        self.repository = repository
        self.unit_of_work = unit_of_work

    async def list_posts(self) -> list[BlogPost]:
        """List every stored post."""
        return await self.repository.get_all()

    async def get_post(self, post_id: UUID) -> BlogPost:
        """Get a post by ID."""
        post = await self.repository.get_by_id(post_id)
        if not post:
            raise EntityNotFound("BlogPost", post_id)
        return post

    async def create_post(self, request: CreateBlogPostRequest) -> BlogPost:
        """Create a new post. The ID and creation timestamp are assigned here."""
        post = BlogPost(
            author=Author(
                first_name=request.author.first_name,
                last_name=request.author.last_name,
            ),
            title=request.title,
            content=request.content,
        )

        async with self.unit_of_work:
            self.unit_of_work.add(post)

        logger.info("Created blog post %s", post.id)
        return post

    async def update_post(self, post_id: UUID, request: UpdateBlogPostRequest) -> BlogPost:
        """
        Apply the fields present in the request to an existing post.

        Args:
            post_id: ID of the post to update
            request: Partial update; unset fields are left as they are

        Returns:
            The post as stored after the update

        Raises:
            EntityNotFound: If no post has the given ID
        """
        post = await self.get_post(post_id)

        changes = request.changes()
        if not changes:
            logger.info("Empty update for blog post %s, nothing to change", post_id)
            return post

        updated = post.revised(changes)
        async with self.unit_of_work:
            found = await self.unit_of_work.update(updated, previous=post)
        if not found:
            # Deleted between the read and the write
            raise EntityNotFound("BlogPost", post_id)

        logger.info("Updated blog post %s (fields: %s)", post_id, ", ".join(sorted(changes)))
        return updated

    async def delete_post(self, post_id: UUID) -> bool:
        """
        Delete a post by ID.

        Deleting an ID that is not stored is a no-op, so retries are safe.

        Returns:
            True if a post was removed, False if there was nothing to remove
        """
        post = await self.repository.get_by_id(post_id)
        if post is None:
            logger.info("Blog post %s already absent, nothing to delete", post_id)
            return False

        async with self.unit_of_work:
            await self.unit_of_work.delete(post)

        logger.info("Deleted blog post %s", post_id)
        return True
