"""
Database and Store Abstraction Interfaces

This module defines two abstraction layers:
- DatabaseAdapter: switch between database backends (SQLite, PostgreSQL)
  without changing the rest of the codebase
- KeyValueStore: the get/put/delete/list contract the redirect service
  consumes; the service never talks to the database directly

Any durable key-value backend can be plugged in by implementing
KeyValueStore and overriding the get_store dependency.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.pool import Pool


class DatabaseAdapter(ABC):
    """
    Abstract base class for database adapters.

    This interface defines the contract that all database implementations
    must follow. By using this abstraction, we can switch between SQLite,
    PostgreSQL, or any other database without modifying the rest of the codebase.
    """

    @abstractmethod
    def create_engine(self, database_url: str, **kwargs) -> AsyncEngine:
        """
        Create and configure the async database engine.

        Args:
            database_url: Connection string for the database
            **kwargs: Additional engine configuration options

        Returns:
            Configured AsyncEngine instance
        """
        pass

    @abstractmethod
    def get_pool_class(self) -> Optional[type[Pool]]:
        """
        Get the connection pool class for this database type.

        Returns:
            Pool class (e.g., NullPool for SQLite) or None to use default
        """
        pass

    @abstractmethod
    def get_connect_args(self) -> dict[str, Any]:
        """Get connection arguments specific to this database type."""
        pass

    @abstractmethod
    def get_engine_kwargs(self) -> dict[str, Any]:
        """Get additional engine configuration specific to this database type."""
        pass


class KeyValueStore(ABC):
    """
    Durable string-to-string store holding redirect mappings.

    Implementations own their consistency semantics. Callers must not
    assume a write is visible to an immediately following read.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Fetch the value stored under a key.

        Returns:
            The stored value, or None when the key is absent
        """
        pass

    @abstractmethod
    async def put(self, key: str, value: str) -> None:
        """Store a value, overwriting any existing value for the key."""
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove a key. Deleting an absent key is not an error."""
        pass

    @abstractmethod
    async def list_keys(self) -> list[str]:
        """Return all stored keys, in whatever order the backend yields them."""
        pass
