from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, Response, status
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.core.services.blog_post_service import BlogPostService
from src.client.schemas import CreateBlogPostRequest, UpdateBlogPostRequest, BlogPostResponse
from src.app.api.mappers import to_blog_post_response
from src.shared.exceptions import EntityNotFound
from src.app.logging import get_logger

router = APIRouter(prefix="/posts", tags=["posts"])
logger = get_logger(__name__)


@router.get("", response_model=list[BlogPostResponse])
@inject
async def list_posts(
    service: BlogPostService = Depends(Provide[Container.blog_post_service]),
) -> list[BlogPostResponse]:
    """List all blog posts."""
    posts = await service.list_posts()
    return [to_blog_post_response(post) for post in posts]


@router.get("/{post_id}", response_model=BlogPostResponse)
@inject
async def get_post(
    post_id: UUID,
    service: BlogPostService = Depends(Provide[Container.blog_post_service]),
) -> BlogPostResponse:
    """Get a blog post by ID."""
    try:
        post = await service.get_post(post_id)
    except EntityNotFound as e:
        logger.warning(f"Blog post not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return to_blog_post_response(post)


@router.post("", response_model=BlogPostResponse, status_code=status.HTTP_201_CREATED)
@inject
async def create_post(
    request: CreateBlogPostRequest,
    service: BlogPostService = Depends(Provide[Container.blog_post_service]),
) -> BlogPostResponse:
    """
    Create a blog post.

    Missing or blank fields are rejected with 400 before anything is stored.
    """
    post = await service.create_post(request)
    return to_blog_post_response(post)


@router.put("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def update_post(
    post_id: UUID,
    request: UpdateBlogPostRequest,
    service: BlogPostService = Depends(Provide[Container.blog_post_service]),
) -> Response:
    """
    Partially update a blog post.

    Only title, content and author can change; the post ID in the URL wins
    over any id in the body.

    Raises:
        HTTPException 404: If the post does not exist
    """
    try:
        await service.update_post(post_id, request)
    except EntityNotFound as e:
        logger.warning(f"Failed to update blog post: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_post(
    post_id: UUID,
    service: BlogPostService = Depends(Provide[Container.blog_post_service]),
) -> Response:
    """Delete a blog post. Deleting an unknown ID also answers 204."""
    await service.delete_post(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
