"""
SQL-backed Key-Value Store

Implements the KeyValueStore interface on top of the redirects table.
Each operation opens its own session and commits before returning, so a
successful put or delete is durable once awaited.

Store errors are not caught here: they propagate to the request and
the ASGI runtime renders its default 500.
"""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from redirector.db.interface import KeyValueStore
from redirector.db.models import RedirectEntry
from redirector.db.session import async_session_maker


class SQLKeyValueStore(KeyValueStore):
    """
    Key-value store persisted in a SQL table.

    Args:
        session_maker: Factory producing async sessions bound to the store database
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self.session_maker = session_maker

    async def get(self, key: str) -> Optional[str]:
        async with self.session_maker() as session:
            entry = await session.get(RedirectEntry, key)
            return entry.value if entry else None

    async def put(self, key: str, value: str) -> None:
        async with self.session_maker() as session:
            # merge() turns into an UPDATE when the key already exists
            await session.merge(RedirectEntry(key=key, value=value))
            await session.commit()

    async def delete(self, key: str) -> None:
        async with self.session_maker() as session:
            statement = delete(RedirectEntry).where(RedirectEntry.key == key)
            await session.execute(statement)
            await session.commit()

    async def list_keys(self) -> list[str]:
        async with self.session_maker() as session:
            result = await session.execute(select(RedirectEntry.key))
            return list(result.scalars().all())


def get_store() -> KeyValueStore:
    """
    Dependency function for FastAPI to get the key-value store.

    Override this dependency to plug in a different backend:
        app.dependency_overrides[get_store] = lambda: MyStore()
    """
    return SQLKeyValueStore(async_session_maker)
