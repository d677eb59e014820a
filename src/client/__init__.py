"""Python client for the Blog API."""
from src.client.blog_client import BlogClient
from src.client.schemas import (
    AuthorName,
    CreateBlogPostRequest,
    UpdateBlogPostRequest,
    BlogPostResponse,
)

__all__ = [
    "BlogClient",
    "AuthorName",
    "CreateBlogPostRequest",
    "UpdateBlogPostRequest",
    "BlogPostResponse",
]
