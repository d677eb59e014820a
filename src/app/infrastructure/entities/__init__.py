"""Database entities for the infrastructure layer."""
from src.app.infrastructure.entities.blog_post_entity import BlogPostEntity

__all__ = [
    "BlogPostEntity",
]
