"""
Repository layer for data access operations.
Every repository runs its queries through an injected QueryExecutor.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "PropertyRepository",
    "ReservationRepository",
    "UserRepository"
]
