#!/usr/bin/env python3
"""
Main entry point for the shortlink service.

Concurrency: each request runs as its own asyncio task (FastAPI + asyncpg
connection pool). Set WORKERS > 1 for multi-process scaling across CPU cores
(each worker has its own DB pool).

Usage:
    python app.py

Environment variables:
    DATABASE_URL - PostgreSQL connection URL
    DB_CREATE_TABLES - Set to 'true' to create the urls table on startup
    BASE_URL - Base URL for short links
    PORT - Port to listen on
    WORKERS - Number of uvicorn worker processes (default 1)
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from shortlink.database.postgres import PostgresMappingStore
from shortlink.service import ShortlinkService
from shortlink.slug import SlugGenerator
from shortlink.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting shortlink service...")

    store = PostgresMappingStore(
        db_config=config.database_url,
        pool_max_size=config.db_pool_max_size,
        connection_timeout_seconds=config.db_timeout_seconds,
        logger=logger.getChild("database"),
    )

    if config.db_create_tables:
        await store.ensure_schema()

    service = ShortlinkService(
        store=store,
        slug_generator=SlugGenerator(default_length=config.slug_length),
        logger=logger,
        enable_custom_slugs=config.enable_custom_slugs,
        max_slug_attempts=config.max_slug_attempts,
        max_slug_length=config.max_slug_length,
    )

    app.state.service = service

    logger.info("Service started successfully")

    try:
        yield
    finally:
        logger.info("Shutting down shortlink service...")
        await service.close()
        logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("Shortlink Service")
    logger.info(f"Configuration: {config.model_dump(exclude={'database_url'})}")

    app = create_app(service_instance=None, config=config, logger=logger)
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        workers=config.workers,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
