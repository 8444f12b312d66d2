"""
Kana Echo - Webhook Server Entry Point
======================================

Run this to start the LINE webhook server:
    python main.py

Set CHANNEL_SECRET, CHANNEL_TOKEN, COTOHA_CLIENT_ID and COTOHA_CLIENT_SECRET
(or put them in .env), then point the LINE webhook URL at
https://<host>/callback.
"""

import logging
import sys

import uvicorn

from kana_echo.infrastructure.config import get_settings


def main():
    """Validate configuration and start the web server."""
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logger = logging.getLogger(__name__)

    issues = settings.validate()
    for issue in issues:
        logger.warning(issue)

    if any(issue.startswith("ERROR") for issue in issues):
        logger.error("Refusing to start with invalid configuration")
        sys.exit(1)

    logger.info(f"Starting Kana Echo on {settings.host}:{settings.port}")

    uvicorn.run(
        "kana_echo.web.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
