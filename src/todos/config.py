"""Configuration utilities for todos.

Settings are read from the environment; nothing is cached.
"""

import os

DB_URL_ENV = "TODOS_DB_URL"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """Raised when the TODOS_DB_URL environment variable is not set."""


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `TODOS_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `TODOS_DB_URL` is not set.
    """
    if not (url := os.environ.get(DB_URL_ENV)):
        raise DatabaseUrlNotSetError
    return url
