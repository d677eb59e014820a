"""Mappers for converting between domain models and API schemas."""
from src.app.core.domain.models import BlogPost
from src.client.schemas import BlogPostResponse


def to_blog_post_response(post: BlogPost) -> BlogPostResponse:
    """
    Convert a BlogPost domain model to its outbound representation.

    The composite author is never exposed; callers see "{first} {last}".

    Args:
        post: Domain model

    Returns:
        API response schema
    """
    return BlogPostResponse(
        id=post.id,
        title=post.title,
        content=post.content,
        author=post.author.full_name,
        created=post.created,
    )
