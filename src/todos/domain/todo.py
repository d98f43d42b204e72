"""The to-do item value type."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Todo:
    """A persisted to-do item.

    Attributes:
        id: Identifier assigned by the store on creation.
        description: Free text supplied by the caller.
        done: Completion flag; the store defaults it to False.
    """

    id: int
    description: str
    done: bool
