"""
Input Validators

This module turns raw request input (form fields, query parameters) into
typed values at the HTTP boundary. Each parser returns either the parsed
value or a ValidationFailure member, never raises.

Rules:
- Short paths must start with "/" and must not shadow a reserved path
- Target URLs must be absolute (scheme required; web schemes need a host)
"""

import re
from enum import Enum
from typing import Mapping, Optional, Union
from urllib.parse import urlsplit

from pydantic import BaseModel, Field

# RFC 3986 section 3.1
SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")

# Schemes whose URLs are meaningless without an authority component
HOST_REQUIRED_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})


class ValidationFailure(Enum):
    """Enumerated validation errors, each carrying its response body."""
    MISSING_KEY = "Missing key"
    MISSING_FIELDS = "Missing required fields"
    INVALID_SHORT_PATH = "Short path must start with /"
    RESERVED_SHORT_PATH = "Short path is reserved"
    INVALID_TARGET_URL = "Invalid target URL"

    @property
    def message(self) -> str:
        return self.value


class RedirectMapping(BaseModel):
    """A validated short path to target URL association."""
    short_path: str = Field(..., description="Request path that triggers the redirect")
    target_url: str = Field(..., description="Absolute URL to redirect to")


def is_valid_target_url(url: str) -> bool:
    """
    Check that a string parses as a well-formed absolute URL.

    Args:
        url: The candidate target URL

    Returns:
        True if the URL has a scheme (and a host for web schemes)
    """
    if not url or any(char.isspace() or ord(char) < 0x20 for char in url):
        return False

    try:
        result = urlsplit(url)
        # Accessing port validates it; raises ValueError when out of range
        result.port
    except ValueError:
        return False

    if not result.scheme or not SCHEME_PATTERN.match(result.scheme):
        return False

    if result.scheme.lower() in HOST_REQUIRED_SCHEMES and not result.hostname:
        return False

    # Opaque URLs such as "mailto:" still need something after the scheme
    return bool(result.netloc or result.path)


def parse_mapping_form(
    form: Mapping[str, object],
    reserved_paths: frozenset[str] = frozenset(),
) -> Union[RedirectMapping, ValidationFailure]:
    """
    Extract a redirect mapping from submitted form data.

    Args:
        form: Form fields as submitted (shortPath, targetUrl)
        reserved_paths: Paths that cannot be used as short paths

    Returns:
        RedirectMapping on success, ValidationFailure otherwise
    """
    short_path = form.get("shortPath")
    target_url = form.get("targetUrl")

    # File uploads are not valid field values
    if not isinstance(short_path, str) or not isinstance(target_url, str):
        return ValidationFailure.MISSING_FIELDS
    if not short_path or not target_url:
        return ValidationFailure.MISSING_FIELDS

    if not short_path.startswith("/"):
        return ValidationFailure.INVALID_SHORT_PATH
    if short_path in reserved_paths:
        return ValidationFailure.RESERVED_SHORT_PATH

    # Surrounding whitespace is dropped, as browsers do when parsing URLs
    target_url = target_url.strip()
    if not is_valid_target_url(target_url):
        return ValidationFailure.INVALID_TARGET_URL

    return RedirectMapping(short_path=short_path, target_url=target_url)


def parse_delete_key(query: Mapping[str, str]) -> Union[str, ValidationFailure]:
    """Extract the key to delete from query parameters."""
    key: Optional[str] = query.get("key")
    if not key:
        return ValidationFailure.MISSING_KEY
    return key
