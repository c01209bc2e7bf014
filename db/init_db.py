"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

import psycopg2

from db.connection import ConnectionPool
from errors import QueryError
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- 'user' is a reserved word, hence the plural table name
CREATE SCHEMA IF NOT EXISTS testing;

CREATE TABLE IF NOT EXISTS testing.users (
    id          BIGSERIAL PRIMARY KEY,
    email       VARCHAR(200) NOT NULL,
    first_name  VARCHAR(200) NOT NULL,
    last_name   VARCHAR(200) NOT NULL,
    username    VARCHAR(50) UNIQUE NOT NULL
);
"""


def create_tables(db_pool: ConnectionPool) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    with db_pool.connection() as conn:
        try:
            with conn.cursor() as cur:
                cur.execute(SCHEMA_SQL)
        except psycopg2.Error as e:
            logger.error(f"Failed to initialize schema: {e}")
            raise QueryError("schema initialization failed") from e
    logger.info("Database schema initialized successfully.")


if __name__ == "__main__":
    from config import DATABASE_URL, PG_POOL_MAX_SIZE, PG_POOL_MIN_SIZE, PG_POOL_TIMEOUT

    db_pool = ConnectionPool.from_settings(
        DATABASE_URL, PG_POOL_MIN_SIZE, PG_POOL_MAX_SIZE, PG_POOL_TIMEOUT
    )
    try:
        create_tables(db_pool)
    finally:
        db_pool.close()
    print("Database schema created successfully.")
