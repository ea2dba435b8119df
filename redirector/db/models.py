"""
Database Models for the Redirect Service

This module defines the SQLModel schema backing the key-value store:
- RedirectEntry: One row per short path, holding its target URL

Design Decisions:
- The table is a flat key-value mapping; no relationships
- key is the primary key, so writes to an existing key overwrite it
- value is Text since target URLs have no practical length bound
"""

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import String, Text


class RedirectEntry(SQLModel, table=True):
    """
    Key-value table storing redirect mappings.

    Fields:
    - key: Short path (always starts with "/")
    - value: Target URL the short path redirects to
    """
    __tablename__ = "redirects"

    key: str = Field(
        sa_column=Column(String(512), primary_key=True, nullable=False),
        max_length=512
    )
    value: str = Field(sa_column=Column(Text, nullable=False))
