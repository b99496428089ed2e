"""Catalog startup and shutdown."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from infrastructure.config import ROOT_LOGGER_NAME, Settings, get_logger, get_settings, setup_logger
from infrastructure.database import close_db, init_db


async def start_catalog() -> Settings:
    """
    Configure logging from settings and create the schema.

    Returns:
        The settings the catalog was started with
    """
    settings = get_settings()

    logger = setup_logger(
        name=ROOT_LOGGER_NAME,
        level="DEBUG" if settings.debug else settings.log_level,
        log_format=settings.log_format,
    )
    logger.info(
        f"🚀 Starting {settings.app_name} v{settings.app_version}",
        extra={"environment": settings.environment},
    )

    await init_db()
    return settings


async def stop_catalog() -> None:
    """Release database resources."""
    await close_db()
    get_logger().info("Catalog stopped")


@asynccontextmanager
async def catalog_lifespan() -> AsyncIterator[Settings]:
    """Run the catalog between startup and shutdown."""
    settings = await start_catalog()
    try:
        yield settings
    finally:
        await stop_catalog()
