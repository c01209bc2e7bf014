"""
main.py
-------
Entry point for the user service.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Build the FastAPI application around the pool.
    - Serve it with uvicorn until interrupted.
"""

import sys

import uvicorn

from app import create_app
from config import (
    DATABASE_URL,
    PG_POOL_MAX_SIZE,
    PG_POOL_MIN_SIZE,
    PG_POOL_TIMEOUT,
    SERVER_ADDR,
    parse_server_addr,
)
from db.connection import ConnectionPool
from db.init_db import create_tables
from errors import UserServiceError
from utils.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Initialize and run the server. Startup failures are fatal."""

    # ── 1. Configuration ──────────────────────────────────
    try:
        host, port = parse_server_addr(SERVER_ADDR)
    except ValueError as e:
        logger.critical(f"Invalid configuration: {e}")
        sys.exit(1)

    # ── 2. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    try:
        db_pool = ConnectionPool.from_settings(
            DATABASE_URL, PG_POOL_MIN_SIZE, PG_POOL_MAX_SIZE, PG_POOL_TIMEOUT
        )
    except UserServiceError as e:
        logger.critical(f"Could not build the connection pool: {e}")
        sys.exit(1)

    try:
        try:
            create_tables(db_pool)
        except UserServiceError as e:
            logger.critical(f"Could not initialize the schema: {e}")
            sys.exit(1)

        # ── 3. Serve ──────────────────────────────────────────
        app = create_app(db_pool)
        logger.info(f"Server running at http://{SERVER_ADDR}/")
        uvicorn.run(app, host=host, port=port, log_config=None)
    finally:
        # ── 4. Cleanup on shutdown ────────────────────────────
        db_pool.close()


if __name__ == "__main__":
    main()
