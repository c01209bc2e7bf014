"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── HTTP server ───────────────────────────────────────────
SERVER_ADDR: str = os.getenv("SERVER_ADDR", "127.0.0.1:8080")

# ── PostgreSQL ────────────────────────────────────────────
PG_HOST: str = os.getenv("PG_HOST", "localhost")
PG_PORT: int = int(os.getenv("PG_PORT", "5432"))
PG_USER: str = os.getenv("PG_USER", "test_user")
PG_PASSWORD: str = os.getenv("PG_PASSWORD", "")
PG_DBNAME: str = os.getenv("PG_DBNAME", "testing_db")

DATABASE_URL: str = (
    f"postgresql://{PG_USER}:{PG_PASSWORD}@{PG_HOST}:{PG_PORT}/{PG_DBNAME}"
)

# ── Connection pool ───────────────────────────────────────
PG_POOL_MIN_SIZE: int = int(os.getenv("PG_POOL_MIN_SIZE", "1"))
PG_POOL_MAX_SIZE: int = int(os.getenv("PG_POOL_MAX_SIZE", "16"))
PG_POOL_TIMEOUT: float = float(os.getenv("PG_POOL_TIMEOUT", "30"))

# ── Logging ───────────────────────────────────────────────
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_log_level(value: str) -> str:
    """Normalize a level name; unknown names fall back to INFO."""
    level = value.strip().upper()
    return level if level in _LOG_LEVELS else "INFO"


LOG_LEVEL: str = parse_log_level(os.getenv("LOG_LEVEL", "INFO"))


def parse_server_addr(addr: str = SERVER_ADDR) -> tuple[str, int]:
    """
    Split a ``host:port`` bind address.

    Raises:
        ValueError: If the port is missing or not a valid TCP port.
    """
    host, sep, port_text = addr.strip().rpartition(":")
    if not sep or not host:
        raise ValueError(f"SERVER_ADDR must look like host:port, got {addr!r}")
    port = int(port_text)
    if not 0 < port < 65536:
        raise ValueError(f"SERVER_ADDR port out of range: {port}")
    return host, port
