"""
Database module with abstraction layer.

This module provides:
- DatabaseAdapter interface: Abstract base class for database implementations
- KeyValueStore interface: The store contract consumed by the services
- SQLKeyValueStore: Store implementation over the redirects table
- Session management: Engine and session factory

To add a new store backend:
1. Create a new class inheriting from KeyValueStore
2. Implement get, put, delete and list_keys
3. Return it from get_store() (or override the dependency)
"""

from redirector.db.interface import DatabaseAdapter, KeyValueStore
from redirector.db.kv_store import SQLKeyValueStore, get_store
from redirector.db.session import async_session_maker, engine

__all__ = [
    "DatabaseAdapter",
    "KeyValueStore",
    "SQLKeyValueStore",
    "get_store",
    "async_session_maker",
    "engine",
]
