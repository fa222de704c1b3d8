"""Entry point for running the chat gateway."""

import logging
import sys

import uvicorn

from .config import get_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def main():
    """Run the chat gateway."""
    settings = get_settings()
    logging.getLogger("chat_gateway").setLevel(settings.log_level)

    logger.info("Starting chat gateway on %s:%s", settings.app_host, settings.app_port)

    uvicorn.run(
        "chat_gateway.api:create_app",
        factory=True,
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
