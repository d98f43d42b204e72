"""Data access for to-do items.

Both operations take an already-connected `AsyncConnection` and issue a
single parameterized statement against the ``todos`` table. Opening,
committing and closing the connection is the caller's business.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Integer, Text, text

from todos.domain import OperationFailedError, Todo

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncConnection

logger = logging.getLogger(__name__)

INSERT_TODO = text(
    "INSERT INTO todos (description) VALUES (:description) RETURNING id"
)

SELECT_TODO = text("SELECT id, description, done FROM todos WHERE id = :id").columns(
    id=Integer, description=Text, done=Boolean
)


async def add_todo(connection: AsyncConnection, description: str) -> int:
    """Insert a to-do item and return its generated id.

    Args:
        connection: A live connection to the store.
        description: Text of the item. Not validated here.

    Returns:
        int: The identifier assigned by the store.

    Raises:
        OperationFailedError: If the insert returned no row.
    """
    result = await connection.execute(INSERT_TODO, {"description": description})
    row = result.first()
    if row is None:
        raise OperationFailedError("insert into todos returned no id")
    logger.debug("Inserted todo %s", row.id)
    return row.id


async def get_todo(connection: AsyncConnection, todo_id: int) -> Todo:
    """Fetch a to-do item by id.

    Args:
        connection: A live connection to the store.
        todo_id: Identifier returned by `add_todo`.

    Returns:
        Todo: The stored item with all three fields.

    Raises:
        OperationFailedError: If no row matches `todo_id`.
    """
    result = await connection.execute(SELECT_TODO, {"id": todo_id})
    row = result.mappings().first()
    if row is None:
        raise OperationFailedError(f"no todo with id {todo_id}")
    return Todo(**row)
