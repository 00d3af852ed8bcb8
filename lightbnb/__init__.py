"""
LightBnB data access layer.
Users, reservations and property listings over an injected query executor.
"""

from lightbnb.config import Settings, get_settings
from lightbnb.database import EngineQueryExecutor, QueryExecutor, create_engine_from_settings
from lightbnb.repositories import PropertyRepository, ReservationRepository, UserRepository
from lightbnb.schemas import SearchCriteria
from typing import Optional
import logging

__version__ = "1.0.0"


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging at the level named in settings."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "QueryExecutor",
    "EngineQueryExecutor",
    "create_engine_from_settings",
    "PropertyRepository",
    "ReservationRepository",
    "UserRepository",
    "SearchCriteria",
]
