"""
Run the web server:

  python -m mayastory

Listens on HOST:PORT from the environment (default 0.0.0.0:3000).
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import sys

import uvicorn

from mayastory.core.config import get_settings

logger = logging.getLogger("mayastory")


def main() -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    logger.info("MayaStory web server starting on port %s", settings.PORT)
    uvicorn.run(
        "mayastory.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )
    logger.info("Shut down gracefully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
