from uuid import uuid4

import pytest
from dependency_injector import providers
from sqlalchemy.exc import OperationalError


class UnavailableRepository:
    """Stands in for a repository whose database cannot be reached."""

    def __init__(self, error: Exception):
        self.error = error

    async def get_all(self):
        raise self.error

    async def get_by_id(self, post_id):
        raise self.error


@pytest.fixture
def broken_storage(test_container):
    error = OperationalError("SELECT * FROM blog_posts", {}, ConnectionRefusedError("connection refused"))
    test_container.blog_post_repository.override(providers.Object(UnavailableRepository(error)))
    yield
    test_container.blog_post_repository.reset_override()


@pytest.mark.asyncio
async def test_storage_fault_on_list_returns_500(http_client, broken_storage):
    response = await http_client.get("/posts")

    assert response.status_code == 500
    detail = response.json()["detail"]
    assert "Error ID" in detail
    assert "connection refused" not in detail


@pytest.mark.asyncio
async def test_storage_fault_on_update_returns_500(http_client, broken_storage):
    response = await http_client.put(f"/posts/{uuid4()}", json={"title": "x"})

    assert response.status_code == 500


@pytest.mark.asyncio
async def test_connection_error_returns_500(http_client, test_container):
    test_container.blog_post_repository.override(
        providers.Object(UnavailableRepository(ConnectionRefusedError("refused")))
    )
    try:
        response = await http_client.delete(f"/posts/{uuid4()}")
    finally:
        test_container.blog_post_repository.reset_override()

    assert response.status_code == 500


@pytest.mark.asyncio
async def test_validation_error_body_lists_offending_fields(http_client):
    response = await http_client.post("/posts", json={"title": "T"})

    assert response.status_code == 400
    locations = [tuple(error["loc"]) for error in response.json()["detail"]]
    assert ("body", "author") in locations
    assert ("body", "content") in locations


@pytest.mark.asyncio
async def test_health(http_client):
    response = await http_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
