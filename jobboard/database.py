from pathlib import Path

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from jobboard.config import Settings


class Base(DeclarativeBase):
    pass


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def _register_sqlite_functions(dbapi_connection, connection_record) -> None:
    # SQLite's built-in lower() only folds ASCII; ilike compiles to lower(x) LIKE lower(y)
    dbapi_connection.create_function("lower", 1, _unicode_lower)


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    Build the async engine for the configured store.

    For SQLite, ``lower()`` is replaced with a Unicode-aware version on
    every new connection so case-insensitive search matches non-ASCII
    text, and the parent directory of a database file is created so a
    fresh checkout can start without manual setup.
    """
    url = make_url(settings.async_database_url)
    is_sqlite = url.get_backend_name() == "sqlite"
    if is_sqlite and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_async_engine(url, echo=settings.database_echo)
    if is_sqlite:
        event.listen(engine.sync_engine, "connect", _register_sqlite_functions)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db(engine: AsyncEngine) -> None:
    # Register all tables on Base.metadata
    import jobboard.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
