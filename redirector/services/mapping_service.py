"""
Mapping Management Service

Business logic behind the management path: create, delete and list
redirect mappings. Input is validated before it reaches this layer.
"""

import asyncio
import logging
from typing import Optional
from urllib.parse import urlsplit

from pydantic import BaseModel

from redirector.core.validators import RedirectMapping
from redirector.db.interface import KeyValueStore

logger = logging.getLogger(__name__)


class MappingListing(BaseModel):
    """One row of the admin table. target_url is None if the key vanished."""
    short_path: str
    target_url: Optional[str] = None

    @property
    def is_web_link(self) -> bool:
        """Only http(s) targets are rendered as clickable links."""
        if not self.target_url:
            return False
        return urlsplit(self.target_url).scheme.lower() in ("http", "https")


class MappingService:
    """
    Service for managing redirect mappings.

    Args:
        store: Key-value store holding short path -> target URL mappings
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def create_mapping(self, mapping: RedirectMapping) -> None:
        """Store a mapping, overwriting any previous target for the path."""
        await self.store.put(mapping.short_path, mapping.target_url)
        logger.info(f"Redirect created: {mapping.short_path} -> {mapping.target_url}")

    async def delete_mapping(self, short_path: str) -> None:
        """Remove a mapping. Missing paths are not an error."""
        await self.store.delete(short_path)
        logger.info(f"Redirect deleted: {short_path}")

    async def list_mappings(self) -> list[MappingListing]:
        """
        List every mapping with its current target.

        Keys are listed first, then each target is fetched separately and
        concurrently. This is not atomic: a key deleted in between comes
        back with target_url None instead of being dropped.
        """
        keys = await self.store.list_keys()
        targets = await asyncio.gather(*(self.store.get(key) for key in keys))
        return [
            MappingListing(short_path=key, target_url=target)
            for key, target in zip(keys, targets)
        ]
