"""
Database connection and session management.
Handles the async engine, its connection pool, and schema helpers.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import text, Integer
from lightbnb.config import settings
import logging

logger = logging.getLogger(__name__)


def build_engine(database_url: str, **kwargs) -> AsyncEngine:
    """
    Create an async engine for the given URL.
    PostgreSQL engines get the configured pool settings; SQLite keeps the driver defaults.
    
    Args:
        database_url: SQLAlchemy async database URL
        **kwargs: Extra keyword arguments passed to create_async_engine
        
    Returns:
        Configured async engine
    """
    options = {"echo": settings.debug}
    
    if not database_url.startswith("sqlite"):
        options.update(
            pool_size=settings.pool_size,  # Number of connections to maintain in the pool
            max_overflow=settings.max_overflow,  # Additional connections created on demand
            pool_pre_ping=True,  # Validate connections before use
            pool_recycle=settings.pool_recycle,
            pool_timeout=settings.pool_timeout,
        )
        if database_url.startswith("postgresql+asyncpg"):
            options["connect_args"] = {
                "server_settings": {
                    "application_name": "lightbnb",
                }
            }
    
    options.update(kwargs)
    return create_async_engine(database_url, **options)


engine = build_engine(settings.database_url)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """
    Base class for all database models.
    Every table uses an integer surrogate primary key.
    """
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    
    def __repr__(self) -> str:
        """String representation of the model."""
        return f"<{self.__class__.__name__}(id={self.id})>"


async def check_database_connection(target_engine: AsyncEngine = None) -> bool:
    """
    Test database connectivity.
    Returns True if connection is successful, False otherwise.
    """
    target_engine = target_engine or engine
    try:
        async with target_engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            result.scalar()
            logger.info("Database connection successful")
            return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


async def create_tables(target_engine: AsyncEngine = None):
    """
    Create all database tables.
    """
    # Register every model on the metadata before creating
    import lightbnb.models  # noqa: F401
    
    target_engine = target_engine or engine
    async with target_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created successfully")


async def drop_tables(target_engine: AsyncEngine = None):
    """
    Drop all database tables.
    This should only be used in testing or development.
    """
    if settings.is_production:
        raise RuntimeError("Cannot drop tables in production environment")
    
    import lightbnb.models  # noqa: F401
    
    target_engine = target_engine or engine
    async with target_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        logger.info("Database tables dropped successfully")


async def close_db_connection():
    """
    Dispose of the engine's pooled connections.
    This should be called during application shutdown.
    """
    await engine.dispose()
    logger.info("Database connections closed")


async def get_database_info(target_engine: AsyncEngine = None) -> dict:
    """
    Get connection pool status for monitoring.
    """
    target_engine = target_engine or engine
    pool = target_engine.pool
    try:
        return {
            "dialect": target_engine.dialect.name,
            "pool_class": type(pool).__name__,
            "pool_status": pool.status(),
        }
    except Exception as e:
        logger.error(f"Failed to get database info: {e}")
        return {"error": str(e)}
