"""
repositories/room_repo.py
--------------------------
Data access layer for rooms.
All SQL queries related to the `Room` table live here.
"""

from typing import Optional

from db.connection import ConnectionProvider
from models.room import Room
from utils.logger import get_logger

logger = get_logger(__name__)

INSERT_SQL = """
    INSERT INTO Room (Name, MaxOccupancy)
    VALUES (%(name)s, %(maxOccupancy)s)
    RETURNING Id
"""
SELECT_BY_ID_SQL = "SELECT Name, MaxOccupancy FROM Room WHERE Id = %(idparam)s"
SELECT_ALL_SQL = "SELECT Id, Name, MaxOccupancy FROM Room"
UPDATE_SQL = (
    "UPDATE Room SET Name = %(name)s, MaxOccupancy = %(maxOccupancy)s WHERE Id = %(id)s"
)
DELETE_SQL = "DELETE FROM Room WHERE Id = %(id)s"


class RoomRepository:
    """Repository for CRUD operations on the Room table."""

    def __init__(self, provider: ConnectionProvider):
        self.provider = provider

    # ── CREATE ────────────────────────────────────────────

    def insert(self, room: Room) -> Room:
        """
        Insert a new room.

        Args:
            room: The Room to persist. Its `id` is ignored.

        Returns:
            The same Room with its `id` populated by the database.
        """
        with self.provider.connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(INSERT_SQL, {
                        "name": room.name,
                        "maxOccupancy": room.max_occupancy,
                    })
                    new_id = cur.fetchone()[0]
                conn.commit()
                room.id = new_id
            except Exception as e:
                conn.rollback()
                logger.error(f"Failed to add room '{room.name}': {e}")
                raise
        logger.info(f"Added room {room}")
        return room

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, room_id: int) -> Optional[Room]:
        """
        Fetch a single room by ID.

        The returned Room carries `room_id` as given; the Id column is not
        selected.

        Returns:
            A Room or None if not found.
        """
        with self.provider.connection() as conn:
            with conn.cursor() as cur:
                cur.execute(SELECT_BY_ID_SQL, {"idparam": room_id})
                row = cur.fetchone()
        if row is None:
            return None
        name, max_occupancy = row
        return Room(id=room_id, name=name, max_occupancy=max_occupancy)

    def get_all(self) -> list[Room]:
        """Get every room, in whatever order the database returns them."""
        with self.provider.connection() as conn:
            with conn.cursor() as cur:
                cur.execute(SELECT_ALL_SQL)
                return [self._row_to_room(r) for r in cur.fetchall()]

    # ── UPDATE ────────────────────────────────────────────

    def update(self, room: Room) -> bool:
        """
        Overwrite the name and max occupancy of an existing room.

        Args:
            room: Room with updated fields (must have id set).

        Returns:
            True if a row was updated, False if no room has that id.
        """
        with self.provider.connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(UPDATE_SQL, {
                        "name": room.name,
                        "maxOccupancy": room.max_occupancy,
                        "id": room.id,
                    })
                    updated = cur.rowcount > 0
                conn.commit()
            except Exception as e:
                conn.rollback()
                logger.error(f"Failed to update room #{room.id}: {e}")
                raise
        return updated

    # ── DELETE ────────────────────────────────────────────

    def delete(self, room_id: int) -> bool:
        """
        Delete a room by ID.

        Rows in other tables that reference the room are not touched; a
        foreign key violation is raised as-is.

        Returns:
            True if a row was deleted, False otherwise.
        """
        with self.provider.connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(DELETE_SQL, {"id": room_id})
                    deleted = cur.rowcount > 0
                conn.commit()
            except Exception as e:
                conn.rollback()
                logger.error(f"Failed to delete room #{room_id}: {e}")
                raise
        if deleted:
            logger.info(f"Deleted room #{room_id}")
        return deleted

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_room(row: tuple) -> Room:
        """Convert an (Id, Name, MaxOccupancy) row to a Room."""
        return Room(
            id=row[0],
            name=row[1],
            max_occupancy=row[2],
        )
