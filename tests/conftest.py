"""Shared fixtures: a MagicMock psycopg2 connection and a RoomRepository wired to it."""

from unittest.mock import MagicMock

import pytest

from db.connection import ConnectionProvider, DatabaseConfig
from repositories.room_repo import RoomRepository


@pytest.fixture
def cursor():
    cur = MagicMock()
    cur.rowcount = 0
    cur.fetchone.return_value = None
    cur.fetchall.return_value = []
    return cur


@pytest.fixture
def conn(cursor):
    connection = MagicMock()
    connection.cursor.return_value.__enter__.return_value = cursor
    return connection


@pytest.fixture
def connect(conn):
    return MagicMock(return_value=conn)


@pytest.fixture
def provider(connect):
    return ConnectionProvider(DatabaseConfig(dsn="postgresql://test@localhost/test"), connect=connect)


@pytest.fixture
def repo(provider):
    return RoomRepository(provider)
