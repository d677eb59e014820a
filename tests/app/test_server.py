import pytest
from httpx import AsyncClient

from src.app.server import close_server, run_server


@pytest.mark.asyncio
async def test_run_and_close_server(tmp_path):
    """The listener serves the API for the given database until it is closed."""
    database_url = f"sqlite+aiosqlite:///{tmp_path / 'server.db'}"

    running = await run_server(database_url, host="127.0.0.1", port=0)
    try:
        async with AsyncClient(base_url=f"http://127.0.0.1:{running.port}") as client:
            created = await client.post(
                "/posts",
                json={"author": {"firstName": "Jane", "lastName": "Doe"}, "title": "T", "content": "C"},
            )
            listed = await client.get("/posts")
    finally:
        await close_server(running)

    assert created.status_code == 201
    assert listed.status_code == 200
    assert [post["author"] for post in listed.json()] == ["Jane Doe"]
    assert running.task.done()
