"""
db/connection.py
----------------
Hands out one psycopg2 connection per database round trip.

Connection settings live in an explicit DatabaseConfig that is passed to
ConnectionProvider; nothing here keeps module-level connection state.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator

import psycopg2
from psycopg2.extensions import connection as Connection

from config import DATABASE_URL
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DatabaseConfig:
    """
    Connection settings for the Room database.

    Attributes:
        dsn: libpq connection string or ``postgresql://`` URL.
    """
    dsn: str

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        """Build a config from the values loaded by ``config.py``."""
        return cls(dsn=DATABASE_URL)


class ConnectionProvider:
    """Opens a fresh connection for each `with provider.connection()` block."""

    def __init__(
        self,
        config: DatabaseConfig,
        connect: Callable[[str], Connection] = psycopg2.connect,
    ):
        self.config = config
        self._connect = connect

    @contextmanager
    def connection(self) -> Iterator[Connection]:
        """
        Open a connection and close it when the block exits.

        Yields:
            An open DB-API connection.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        try:
            conn = self._connect(self.config.dsn)
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to connect to database: {e}")
            raise
        try:
            yield conn
        finally:
            conn.close()
