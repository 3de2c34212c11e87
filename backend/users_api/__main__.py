"""Run the Users API under uvicorn: python -m users_api"""

import logging

import uvicorn

from users_api.config import get_settings
from users_api.infrastructure.observability import setup_logging

logger = logging.getLogger("users_api")


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Server running on port {settings.port}")
    uvicorn.run(
        "users_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
