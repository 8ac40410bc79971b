"""Entry point for serving the Ledger API.

Configuration is read from environment variables (see
``ledger_api.app.core.config``).  ``HOST`` and ``PORT`` choose where the
server listens; they default to ``0.0.0.0`` and ``5000``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from ledger_api.app.core.config import settings
from ledger_api.app.main import app


async def main() -> None:
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    asyncio.run(main())
