"""Entry point for the Skill Sharing API server.

Serves ``skill_sharing_api.app.main:app`` with Uvicorn.  Host and port
are read from the ``API_HOST`` and ``API_PORT`` environment variables
(defaults ``0.0.0.0`` and ``8000``); see ``core/config.py`` for the
other supported variables.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from skill_sharing_api.app.core.config import settings
from skill_sharing_api.app.main import app


async def main() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
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
