"""Database engine factory and helpers.

This module centralizes creation of async SQLAlchemy Engines:

- **URL normalization**: sync driver URLs (``postgresql+psycopg2://``, bare
  ``sqlite://``) are rewritten to async drivers so the URLs that
  testcontainers hands out can be used as-is.
- **SQLite**: enables ``foreign_keys`` on every new connection.

Use this module whenever you need an Engine so that all connections are
consistently configured.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import event
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import create_async_engine

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

SQLITE_NAMES = {"sqlite", "sqlite+pysqlite", "sqlite+aiosqlite"}

#: Drivers that already speak asyncio (psycopg 3 does both).
ASYNC_DRIVERS = {"psycopg", "asyncpg", "aiosqlite"}

#: Async driver to use per backend when the URL names a sync one.
DEFAULT_ASYNC_DRIVERS = {
    "postgresql": "psycopg",
    "sqlite": "aiosqlite",
}


def is_sqlite(url: str | URL) -> bool:
    """Return True if the given SQLAlchemy URL or string corresponds to SQLite.

    Args:
        url: A database URL string or SQLAlchemy :class:`URL`.

    Returns:
        bool: True if the backend is SQLite, otherwise False.
    """
    u = make_url(url)
    return u.get_backend_name() in SQLITE_NAMES


def to_async_url(url: str | URL) -> URL:
    """Rewrite a database URL so it names an asyncio-capable driver.

    URLs that explicitly name an async driver, and backends with no known
    async driver, are returned unchanged. A URL without a driver
    (``postgresql://``) is always rewritten, whatever SQLAlchemy would
    pick by default.

    Args:
        url: Database connection URL (str or :class:`URL`).

    Returns:
        URL: The normalized URL.
    """
    u = make_url(url)
    _, _, named_driver = u.drivername.partition("+")
    if named_driver in ASYNC_DRIVERS:
        return u
    driver = DEFAULT_ASYNC_DRIVERS.get(u.get_backend_name())
    if driver is None:
        return u
    return u.set(drivername=f"{u.get_backend_name()}+{driver}")


def make_engine(url: str | URL, *, echo: bool = False) -> AsyncEngine:
    """Create an async SQLAlchemy Engine for the given URL.

    Args:
        url: Database connection URL (str or :class:`URL`).
        echo: If True, log SQL statements.

    Returns:
        AsyncEngine: Configured async SQLAlchemy Engine.
    """

    engine = create_async_engine(to_async_url(url), echo=echo)

    if is_sqlite(url):

        @event.listens_for(engine.sync_engine, "connect")
        def _sqlite_pragmas(dbapi_conn, conn_record):  # type: ignore #pylint: disable=W0613
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON;")
            cur.close()

    return engine
