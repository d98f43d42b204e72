"""Table definition mirroring ``migrations/20240503212727_todo.sql``.

The SQL script is what establishes the schema on PostgreSQL. This mirror
exists so the same table can be created with ``metadata.create_all()`` on
backends the script does not target (in-memory SQLite in unit tests).

| Column      | Type    | Notes                               |
|-------------|---------|-------------------------------------|
| id          | INTEGER | identity primary key                |
| description | TEXT    | not null                            |
| done        | BOOLEAN | not null, server default false      |
"""

from __future__ import annotations

from sqlalchemy import Boolean, Column, Identity, Integer, MetaData, Table, Text, false

__all__ = ["metadata", "todos"]

metadata = MetaData()

todos = Table(
    "todos",
    metadata,
    # Postgres: INTEGER IDENTITY; SQLite: rowid-backed INTEGER PRIMARY KEY
    Column("id", Integer, Identity(always=True), primary_key=True),
    Column("description", Text, nullable=False),
    Column("done", Boolean, nullable=False, server_default=false()),
)
