"""CLI entry point for launching the FastAPI app with uvicorn."""

import logging

import uvicorn

from .dependencies import get_config

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the server."""
    config = get_config()
    logger.info("Server running on port %d", config.server.port)
    uvicorn.run(
        "src.server.app:app",
        host=config.server.host,
        port=config.server.port,
        reload=config.server.reload,
        reload_dirs=["src"] if config.server.reload else None,
    )


if __name__ == "__main__":
    main()
