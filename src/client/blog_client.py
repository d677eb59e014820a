"""HTTP client for consuming the Blog API."""
from uuid import UUID
from typing import Optional
from httpx import AsyncClient, Response

from src.client.schemas import (
    CreateBlogPostRequest,
    UpdateBlogPostRequest,
    BlogPostResponse,
)


class BlogClient:
    """HTTP client for interacting with the Blog API."""

    def __init__(self, base_url: str, client: Optional[AsyncClient] = None):
        """
        Initialize the Blog client.

        Args:
            base_url: Base URL of the Blog API (e.g., "http://localhost:8080")
            client: Optional httpx.AsyncClient instance. If not provided, a new one will be created.
        """
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self._owns_client:
            self._client = AsyncClient(base_url=self.base_url)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._owns_client and self._client:
            await self._client.aclose()

    @property
    def client(self) -> AsyncClient:
        """Get the underlying httpx client."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async context manager.")
        return self._client

    async def list_posts(self) -> list[BlogPostResponse]:
        """
        List all blog posts.

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response: Response = await self.client.get("/posts")
        response.raise_for_status()
        return [BlogPostResponse(**post) for post in response.json()]

    async def get_post(self, post_id: UUID) -> BlogPostResponse:
        """
        Get a blog post by ID.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.get(f"/posts/{post_id}")
        response.raise_for_status()
        return BlogPostResponse(**response.json())

    async def create_post(self, request: CreateBlogPostRequest) -> BlogPostResponse:
        """
        Create a new blog post.

        Args:
            request: Post creation request

        Returns:
            Created post, with its author flattened to a display name

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response: Response = await self.client.post(
            "/posts",
            json=request.model_dump(mode="json", by_alias=True),
        )
        response.raise_for_status()
        return BlogPostResponse(**response.json())

    async def update_post(self, post_id: UUID, request: UpdateBlogPostRequest) -> None:
        """
        Apply a partial update to a blog post. Only fields set on the request are sent.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.put(
            f"/posts/{post_id}",
            json=request.model_dump(mode="json", by_alias=True, exclude_unset=True),
        )
        response.raise_for_status()

    async def delete_post(self, post_id: UUID) -> None:
        """
        Delete a blog post. Deleting a post that does not exist succeeds.

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response: Response = await self.client.delete(f"/posts/{post_id}")
        response.raise_for_status()
