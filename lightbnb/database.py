"""
Database engine construction and the query-execution capability.
Repositories receive an executor explicitly instead of reaching for a global pool.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.pool import StaticPool
from sqlalchemy import bindparam, text, Integer
from lightbnb.config import Settings
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple
import logging
import re

logger = logging.getLogger(__name__)

# Positional placeholders as written by the query templates ($1, $2, ...)
PLACEHOLDER_PATTERN = re.compile(r"\$(\d+)")


class Base(DeclarativeBase):
    """
    Base class for all database models.
    LightBnB tables use serial integer primary keys.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    def __repr__(self) -> str:
        """String representation of the model."""
        return f"<{self.__class__.__name__}(id={self.id})>"


class QueryExecutor(Protocol):
    """Anything that can run a positional-parameter query and return its rows."""

    async def execute(self, query_text: str, parameters: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        ...


def to_named_binds(query_text: str, parameters: Sequence[Any]) -> Tuple[str, Dict[str, Any]]:
    """
    Rewrite $N placeholders into SQLAlchemy named binds.

    Args:
        query_text: SQL with $1..$N placeholders
        parameters: Values aligned with the placeholders

    Returns:
        Tuple of (SQL with :pN binds, bind dictionary)
    """
    statement = PLACEHOLDER_PATTERN.sub(lambda match: f":p{match.group(1)}", query_text)
    binds = {f"p{position}": value for position, value in enumerate(parameters, start=1)}
    return statement, binds


class EngineQueryExecutor:
    """
    Executes queries on a connection checked out from the engine pool.
    Each call runs in its own transaction, so one executor can serve concurrent tasks.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def execute(self, query_text: str, parameters: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        """
        Execute a query and return its rows as dictionaries.

        Args:
            query_text: SQL with $1..$N placeholders
            parameters: Values bound to the placeholders in order

        Returns:
            List of rows keyed by column name (empty for statements without rows)
        """
        statement, binds = to_named_binds(query_text, parameters)
        # Typed binds let the dialect adapt values such as Decimal
        clause = text(statement).bindparams(*[bindparam(name, value) for name, value in binds.items()])

        async with self.engine.begin() as conn:
            result = await conn.execute(clause)
            if not result.returns_rows:
                return []
            rows = [dict(row) for row in result.mappings().all()]

        logger.debug(f"Query returned {len(rows)} rows")
        return rows


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    Create an async engine with connection pooling configured from settings.

    SQLite URLs get a single shared connection so in-memory databases survive
    between executor calls.
    """
    if settings.is_sqlite:
        return create_async_engine(
            settings.database_url,
            echo=settings.debug,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_pre_ping=True,
        pool_recycle=settings.pool_recycle,
        pool_timeout=settings.pool_timeout,
        connect_args={
            "server_settings": {
                "application_name": "lightbnb",
            }
        }
    )


async def check_database_connection(engine: AsyncEngine) -> bool:
    """
    Check database connectivity.
    Returns True if connection is successful, False otherwise.
    """
    try:
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            result.scalar()
            logger.info("Database connection successful")
            return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


async def create_tables(engine: AsyncEngine):
    """
    Create all database tables from the ORM metadata.
    """
    # Register every model on the metadata
    import lightbnb.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created successfully")


async def drop_tables(engine: AsyncEngine, settings: Optional[Settings] = None):
    """
    Drop all database tables.
    This should only be used in testing or development.
    """
    if settings is not None and not settings.is_testing and not settings.is_development:
        raise RuntimeError("Cannot drop tables in production environment")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        logger.info("Database tables dropped successfully")
