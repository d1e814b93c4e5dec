import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Set

from sqlalchemy import inspect, text
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import (
    create_async_engine,
    async_sessionmaker,
    AsyncSession,
)
from sqlalchemy.exc import SQLAlchemyError
from src.infrastructure.database.models import Base

logger = logging.getLogger(__name__)


class DatabaseClient:
    def __init__(
        self,
        db_url: str,
        pool_size: int = 5,
        max_overflow: int = 10,
        pool_timeout: int = 30,
        pool_recycle: int = 3600,
        echo: bool = False,
    ):
        self._db_url = db_url

        engine_kwargs = {"echo": echo, "future": True}
        # SQLite picks its own pool class; sizing options are rejected there.
        if not self.is_sqlite:
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_timeout=pool_timeout,
                pool_recycle=pool_recycle,
                pool_pre_ping=True,
            )

        self._engine = create_async_engine(self._db_url, **engine_kwargs)

        self._session_factory = async_sessionmaker(
            bind=self._engine,
            expire_on_commit=False,
            class_=AsyncSession,
        )
        self._is_initialized = False

    @property
    def is_sqlite(self) -> bool:
        return self._db_url.startswith("sqlite")

    async def init(self, create_schema: bool = True) -> Set[str]:
        """
        Verify connectivity and optionally create the missing tables.

        Call once at server startup. Returns the names of the tables created
        by this call, so callers can seed data only on first creation.
        """
        if self._is_initialized:
            return set()

        logger.info("🔌 Initializing database connection...")
        created: Set[str] = set()

        async with self._engine.begin() as conn:
            await conn.execute(text("SELECT 1"))

            if create_schema:
                logger.info("🧱 Creating / updating database schema...")
                created = await conn.run_sync(self._create_schema)
                if created:
                    logger.info(f"🧱 Created tables: {', '.join(sorted(created))}")

        self._is_initialized = True
        logger.info("✅ Database client initialized successfully")
        return created

    @staticmethod
    def _create_schema(conn: Connection) -> Set[str]:
        inspector = inspect(conn)
        missing = {
            name for name in Base.metadata.tables
            if not inspector.has_table(name)
        }
        Base.metadata.create_all(conn)
        return missing

    async def close(self) -> None:
        """
        Dispose the engine and release pooled connections.
        """
        if self._is_initialized:
            await self._engine.dispose()
            self._is_initialized = False
            logger.info("🔌 Database client closed")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Async context manager yielding a fresh session.
        """
        async with self._session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logger.error(f"❌ Error in DB session, rollback applied: {e}")
                raise

    async def health_check(self) -> bool:
        """
        Run SELECT 1 to verify connectivity.
        """
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"❌ Database health check failed: {e}")
            return False
