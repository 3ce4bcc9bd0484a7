"""
Application entry point.

Exposes the ASGI app and runs it under uvicorn when executed directly.

Dependencies: uvicorn, catalog.api.main, catalog.configs
System role: Process entry point

Usage:
    python -m catalog.main
    uvicorn catalog.main:app
"""

import uvicorn

from catalog.api.main import create_app
from catalog.configs import get_settings

app = create_app()


def run() -> None:
    """Run the API under uvicorn using SERVER_* settings."""
    settings = get_settings()
    uvicorn.run(
        "catalog.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
