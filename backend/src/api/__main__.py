"""Entry point for running the API server."""
import logging

import uvicorn

from core.config import get_settings


def main() -> None:
    """Configure logging and serve the application."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run("api.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
