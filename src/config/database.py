import contextlib
from collections.abc import AsyncIterator, Callable

from alembic import command, config
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.config.settings import settings

SessionManager = Callable[..., contextlib.AbstractAsyncContextManager[AsyncSession]]


def create_engine(url: str) -> AsyncEngine:
    url = str(url)
    use_echo = settings.LOG_DB
    connect_args = {}
    if "sqlite" in url:
        connect_args = {"timeout": 15}
    return create_async_engine(
        url,
        echo=use_echo,
        future=True,  # use the sqlalchemy 2.0 classes
        connect_args=connect_args,
    )


def make_session_manager(session_maker: async_sessionmaker[AsyncSession]) -> SessionManager:
    """Build a unit-of-work context manager bound to ``session_maker``.

    The session commits when the block exits cleanly and rolls back on any
    exception. Passing ``session_overwrite`` reuses an outer session and leaves
    transaction control to its owner.
    """

    @contextlib.asynccontextmanager
    async def session_manager(
        auto_commit=True, session_overwrite: AsyncSession | None = None
    ) -> AsyncIterator[AsyncSession]:
        if session_overwrite:
            yield session_overwrite
        else:
            async with session_maker() as session:
                try:
                    yield session
                except Exception as e:
                    await session.rollback()
                    raise e
                else:
                    if auto_commit:
                        await session.commit()

    return session_manager


engine = create_engine(settings.database_url)

async_session_maker = async_sessionmaker(engine, expire_on_commit=False)

async_session_manager = make_session_manager(async_session_maker)


def run_upgrade(connection, cfg):
    cfg.attributes["connection"] = connection
    command.upgrade(cfg, "head")


async def upgrade_database(alembic_ini: str = "alembic.ini") -> None:
    async with engine.begin() as conn:
        await conn.run_sync(run_upgrade, config.Config(alembic_ini))
