"""
Domain errors raised by the service layer.

Routes translate these into HTTP responses: NotFoundError -> 404,
ConflictError -> 409.
"""


class ZooError(Exception):
    """Base class for recoverable domain errors."""


class NotFoundError(ZooError):
    """A referenced animal or habitat does not exist."""


class ConflictError(ZooError):
    """The request conflicts with current state (duplicate, incompatible or occupied)."""
