"""Domain-layer error definitions.

The taxonomy is flat on purpose: the data-access operations raise
`OperationFailedError` when the store hands back no row, and every other
failure is the driver's own exception, propagated unchanged.
"""


class TodoError(Exception):
    """Base class for todos errors."""


class OperationFailedError(TodoError):
    """Raised when a data-access operation gets no row back from the store."""
