import psycopg2
import pytest

from db.init_db import SCHEMA_SQL, create_tables


def test_create_tables_executes_schema_and_commits(provider, cursor, conn):
    create_tables(provider)

    cursor.execute.assert_called_once_with(SCHEMA_SQL)
    conn.commit.assert_called_once()
    conn.close.assert_called_once()


def test_create_tables_is_idempotent_sql():
    assert "CREATE TABLE IF NOT EXISTS Room" in SCHEMA_SQL
    assert "SERIAL PRIMARY KEY" in SCHEMA_SQL


def test_create_tables_failure_rolls_back(provider, cursor, conn):
    cursor.execute.side_effect = psycopg2.ProgrammingError("permission denied")

    with pytest.raises(psycopg2.ProgrammingError):
        create_tables(provider)

    conn.rollback.assert_called_once()
    conn.close.assert_called_once()
