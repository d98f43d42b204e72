"""Domain types for todos."""

from .errors import OperationFailedError, TodoError
from .todo import Todo

__all__ = ["OperationFailedError", "Todo", "TodoError"]
