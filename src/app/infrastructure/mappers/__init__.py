"""Infrastructure mappers for converting between domain models and database entities."""
from src.app.infrastructure.mappers.blog_post_mapper import BlogPostMapper

__all__ = [
    "BlogPostMapper",
]
