"""
Start and stop the HTTP listener for a given database.

``run_server`` binds the app to a storage target and returns once uvicorn
accepts connections; ``close_server`` shuts it down, which runs the app
lifespan's shutdown and disposes of the database engine.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from dependency_injector import providers
from uvicorn import Config, Server

from src.app.config import Settings, get_settings
from src.app.containers import Container
from src.app.main import create_app

logger = logging.getLogger(__name__)


@dataclass
class RunningServer:
    server: Server
    task: asyncio.Task

    @property
    def port(self) -> int:
        """Port actually bound, useful when the server was started on port 0."""
        return self.server.servers[0].sockets[0].getsockname()[1]


async def run_server(
    database_url: str,
    host: Optional[str] = None,
    port: Optional[int] = None,
) -> RunningServer:
    """
    Start the Blog API against the given database and wait until it is listening.

    Args:
        database_url: SQLAlchemy async URL of the storage target
        host: Interface to bind; defaults to the configured host
        port: Port to bind; defaults to the configured port, 0 picks a free one

    Returns:
        Handle to pass to close_server
    """
    settings = get_settings()
    container = Container()
    container.config.override(
        providers.Singleton(Settings, database_url=database_url)
    )
    app = create_app(container)

    config = Config(
        app=app,
        host=host if host is not None else settings.host,
        port=port if port is not None else settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    task = asyncio.create_task(server.serve())

    while not server.started:
        if task.done():
            # serve() finished before startup completed, surface its error
            task.result()
            raise RuntimeError("Server exited during startup")
        await asyncio.sleep(0.05)

    running = RunningServer(server=server, task=task)
    logger.info("Blog API listening on port %d", running.port)
    return running


async def close_server(running: RunningServer) -> None:
    """Stop a server started with run_server and wait for its shutdown to finish."""
    logger.info("Closing Blog API server")
    running.server.should_exit = True
    await running.task


def main() -> None:
    """Console entry point: serve the configured database until interrupted."""
    settings = get_settings()

    async def serve() -> None:
        running = await run_server(settings.database_url)
        await running.task

    try:
        asyncio.run(serve())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
