from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


class Base(DeclarativeBase):
    pass


# Lazy engine initialization so importing the app never opens a connection
_sql_engine = None
_async_session_factory = None


def get_sql_engine():
    global _sql_engine
    if _sql_engine is None:
        _sql_engine = create_async_engine(settings.database_url, echo=settings.debug)
    return _sql_engine


def get_session_factory():
    global _async_session_factory
    if _async_session_factory is None:
        _async_session_factory = async_sessionmaker(
            get_sql_engine(), class_=AsyncSession, expire_on_commit=False
        )
    return _async_session_factory


async def create_tables() -> None:
    async with get_sql_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncSession:  # type: ignore[misc]
    async with get_session_factory()() as session:
        yield session
