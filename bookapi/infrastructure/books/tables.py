"""SQLAlchemy table definitions for the books bounded context."""

from sqlalchemy import Column, Integer, String, Table

from bookapi.core.db import metadata

books_table = Table(
    "books",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(255), nullable=False),
    Column("author", String(255), nullable=False),
    Column("year", Integer, nullable=False),
)
