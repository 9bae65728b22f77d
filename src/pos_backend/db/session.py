import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import AsyncAdaptedQueuePool

from pos_backend import models  # noqa: F401  регистрируем таблицы в Base.metadata
from pos_backend.db.base import Base

logger = logging.getLogger(__name__)

# asyncpg отдаёт отказ в соединении как OSError, SQLAlchemy его не оборачивает
STORE_ERRORS = (SQLAlchemyError, OSError)


class Database:
    """
    Пул соединений с БД.
    Один экземпляр на приложение, передаётся компонентам явно (app.state.db).
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        # Фабрика сессий
        self._session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Берёт одно соединение из пула на время блока.
        Соединение возвращается в пул при любом исходе.
        """
        async with self._session_factory() as session:
            yield session

    async def fetch_all(self, stmt) -> list:
        """
        Выполняет запрос на чтение и возвращает строки как mapping'и.
        """
        async with self.engine.connect() as conn:
            result = await conn.execute(stmt)
            return list(result.mappings().all())

    async def create_schema(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_database(
    url: str,
    pool_size: int = 10,
    pool_timeout: float = 30,
    echo: bool = False,
) -> Database:
    """
    Создаёт движок с ограниченным пулом: не больше pool_size соединений,
    остальные запросы ждут свободное соединение до pool_timeout секунд.
    """
    engine = create_async_engine(
        url,
        echo=echo,
        poolclass=AsyncAdaptedQueuePool,
        pool_size=pool_size,
        max_overflow=0,
        pool_timeout=pool_timeout,
        pool_pre_ping=True,
    )

    # SQLite по умолчанию не проверяет внешние ключи
    if make_url(url).get_backend_name() == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    logger.info("Database pool created: backend=%s pool_size=%s", engine.dialect.name, pool_size)
    return Database(engine)
