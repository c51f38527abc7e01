"""
Database connection management
"""

import threading

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from ..config import Settings, get_settings
from ..logging import get_logger
from .client import DataAccessClient

logger = get_logger(__name__)

# Process-wide client, built once on first use
_client: DataAccessClient | None = None
_init_lock = threading.Lock()


def get_async_database_url(database_url: str) -> str:
    """Rewrite a plain PostgreSQL URL to use the asyncpg driver."""
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("postgres://"):
        return database_url.replace("postgres://", "postgresql+asyncpg://", 1)
    return database_url


def should_log_queries(settings: Settings, disable_logs: bool = False) -> bool:
    """SQL logging is on outside production unless explicitly disabled."""
    if disable_logs:
        return False
    return not settings.is_production


def create_client(
    database_url: str,
    *,
    echo: bool = False,
    pool_size: int | None = None,
    max_overflow: int | None = None,
) -> DataAccessClient:
    """Create a data access client with its own engine and session factory."""
    url = get_async_database_url(database_url)

    engine_kwargs = {}
    if not url.startswith("sqlite"):
        if pool_size is not None:
            engine_kwargs["pool_size"] = pool_size
        if max_overflow is not None:
            engine_kwargs["max_overflow"] = max_overflow

    engine = create_async_engine(url, echo=echo, **engine_kwargs)
    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )
    return DataAccessClient(session_factory, engine=engine)


def get_client(settings: Settings | None = None, *, disable_logs: bool = False) -> DataAccessClient:
    """Get the shared data access client, creating it on first use.

    Thread-safe initialization using a lock so that concurrent first
    requests build a single engine.
    """
    global _client

    # Fast path: already initialized, no lock needed
    if _client is not None:
        return _client

    with _init_lock:
        # Double-check after acquiring lock (another thread may have initialized)
        if _client is not None:
            return _client

        settings = settings or get_settings()
        echo = should_log_queries(settings, disable_logs)
        _client = create_client(
            settings.database_url,
            echo=echo,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        logger.info(
            "Data access client initialized",
            dialect=_client.engine.dialect.name if _client.engine else None,
            query_logging=echo,
        )
        return _client


async def reset_client() -> None:
    """Dispose of the shared client so the next access builds a new one."""
    global _client

    with _init_lock:
        client, _client = _client, None

    if client is not None:
        await client.dispose()
        logger.info("Data access client disposed")


async def check_database_connection(client: DataAccessClient) -> tuple[bool, str | None]:
    """
    Test the database connection and return a helpful error message.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    if client.engine is None:
        return False, "Database engine not initialized"

    try:
        async with client.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
            return True, None
    except Exception as e:
        error_str = str(e)
        if "Connection refused" in error_str or "could not connect" in error_str:
            return False, (
                f"Cannot connect to database server: {error_str}\n"
                f"The database server appears to be down or unreachable."
            )
        if "password authentication failed" in error_str:
            return False, (
                f"Database authentication failed: {error_str}\n"
                f"Please check your database credentials."
            )
        return False, f"Database connection error ({type(e).__name__}): {error_str}"
