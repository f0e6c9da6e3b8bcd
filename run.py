"""Entry point for the Movies API.

Serves the FastAPI application with Uvicorn.  Host, port and the
other settings are read from environment variables (see
``movies_api.app.core.config``).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from movies_api.app.core.config import settings
from movies_api.app.main import app


async def main() -> None:
    """Start the API server and serve until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
