"""
Redirect Service

This service handles URL redirection logic:
- Looking up the stored target for a request path
- Forwarding the request's query parameters onto the target

Design Decisions:
- Separate service for redirect operations
- No caching: every lookup reads the store
- Request parameters replace same-named target parameters instead of
  being appended
"""

import logging
from typing import Iterable, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from redirector.db.interface import KeyValueStore

logger = logging.getLogger(__name__)


def merge_query_params(target_url: str, params: Iterable[tuple[str, str]]) -> str:
    """
    Copy query parameters onto a target URL.

    A parameter already present on the target is replaced in place by the
    incoming value (all duplicates collapse into one). Unknown parameters
    are appended. When the incoming sequence repeats a name, the last
    value wins.

    Args:
        target_url: Absolute URL to extend
        params: (name, value) pairs from the incoming request

    Returns:
        The target URL with merged query string; unchanged when params is empty

    Example:
        merge_query_params("https://example.com/p?a=1&b=2", [("a", "9")])
        -> "https://example.com/p?a=9&b=2"
    """
    params = list(params)
    if not params:
        return target_url

    parts = urlsplit(target_url)
    merged = parse_qsl(parts.query, keep_blank_values=True)

    for name, value in params:
        replaced = False
        kept = []
        for existing_name, existing_value in merged:
            if existing_name != name:
                kept.append((existing_name, existing_value))
            elif not replaced:
                kept.append((name, value))
                replaced = True
        if not replaced:
            kept.append((name, value))
        merged = kept

    return urlunsplit(parts._replace(query=urlencode(merged)))


class RedirectService:
    """
    Service for resolving short paths to redirect locations.

    Args:
        store: Key-value store holding short path -> target URL mappings
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def get_redirect_url(
        self,
        short_path: str,
        query_params: Iterable[tuple[str, str]] = ()
    ) -> Optional[str]:
        """
        Get the final redirect location for a request path.

        Args:
            short_path: Request path, used verbatim as the store key
            query_params: Query parameters of the incoming request

        Returns:
            Location to redirect to, or None when no mapping exists
        """
        target_url = await self.store.get(short_path)
        if not target_url:
            logger.debug(f"No redirect registered for {short_path}")
            return None
        return merge_query_params(target_url, query_params)
