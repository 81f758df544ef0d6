#!/usr/bin/env python3
"""Main entry point for the audio streaming session."""

from __future__ import annotations

import logging
import sys

from audio_streaming.domain.shared.messages import LogTemplates
from audio_streaming.utils.logging import setup_logging


def main() -> int:
    from audio_streaming.config.settings import get_settings

    settings = get_settings()
    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)
    logger.info(LogTemplates.APP_STARTING, settings.environment)

    from audio_streaming.config.container import create_container

    container = create_container(settings)

    try:
        container.initialize()
        logger.info(
            LogTemplates.APP_CATALOG_SUMMARY, len(container.catalog), len(container.listeners)
        )
        recommendations = container.catalog.recommend(settings.catalog.recommendation_limit)
        for position, item in enumerate(recommendations, start=1):
            logger.info(LogTemplates.APP_RECOMMENDATION, position, item)

        container.shutdown()
        logger.info(LogTemplates.APP_STOPPED)
        return 0
    except Exception as e:
        logger.exception(LogTemplates.APP_FATAL_ERROR, e)
        return 1


def cli() -> None:
    """Console script entry point (used by pyproject.toml [project.scripts])."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
