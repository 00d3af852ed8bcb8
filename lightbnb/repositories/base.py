"""
Base repository class with shared query execution helpers.
Failures are logged and re-raised unchanged to the caller.
"""

from lightbnb.config import Settings, get_settings
from lightbnb.database import QueryExecutor
from lightbnb.utils.query_builder import ParameterizedQuery
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


class BaseRepository:
    """
    Base repository holding the query executor and settings.
    """

    def __init__(self, executor: QueryExecutor, settings: Optional[Settings] = None):
        """
        Initialize repository with a query executor.

        Args:
            executor: Capability that runs parameterized queries
            settings: Settings for limits; defaults to the cached settings
        """
        self.executor = executor
        self.settings = settings or get_settings()

    async def fetch_all(self, query: ParameterizedQuery) -> List[Dict[str, Any]]:
        """
        Execute a query and return all rows.

        Args:
            query: Query text and its bound parameters

        Returns:
            List of rows keyed by column name

        Raises:
            Exception: If query execution fails
        """
        logger.debug(f"Query string: {query.query_text} Query params: {list(query.parameters)}")
        try:
            return await self.executor.execute(query.query_text, query.parameters)
        except Exception as e:
            logger.error(f"{self.__class__.__name__} query failed: {e}")
            raise

    async def fetch_one(self, query: ParameterizedQuery) -> Optional[Dict[str, Any]]:
        """
        Execute a query and return its first row.

        Returns:
            First row if any, None otherwise
        """
        rows = await self.fetch_all(query)
        return rows[0] if rows else None

    def resolve_limit(self, limit: Optional[int]) -> Optional[int]:
        """Apply the configured default when no limit is given."""
        if limit is None:
            return self.settings.default_search_limit
        return limit
