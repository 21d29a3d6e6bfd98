"""
db/init_db.py
-------------
Creates the Room table if it does not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import ConnectionProvider, DatabaseConfig
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Room table: one row per room, ids assigned by the database
CREATE TABLE IF NOT EXISTS Room (
    Id              SERIAL PRIMARY KEY,
    Name            VARCHAR(55) NOT NULL,
    MaxOccupancy    INTEGER NOT NULL
);
"""


def create_tables(provider: ConnectionProvider) -> None:
    """
    Execute the schema SQL to create the Room table.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    with provider.connection() as conn:
        try:
            with conn.cursor() as cur:
                cur.execute(SCHEMA_SQL)
            conn.commit()
            logger.info("Database schema initialized successfully.")
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to initialize schema: {e}")
            raise


if __name__ == "__main__":
    create_tables(ConnectionProvider(DatabaseConfig.from_env()))
    logger.info("Room table is ready.")
