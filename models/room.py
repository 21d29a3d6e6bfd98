"""
models/room.py
--------------
Domain model for rooms.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Room:
    """
    Represents a single room.

    Attributes:
        name: Human-readable label of the room.
        max_occupancy: How many people the room can hold.
        id: Database primary key (None for new records).
    """
    name: str
    max_occupancy: int
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"#{self.id} {self.name} (max {self.max_occupancy})"
