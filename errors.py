"""
errors.py
---------
Error taxonomy shared by every layer.

Lower layers (db, repositories, models) raise these; only the HTTP layer
translates them into status codes (see ``app.py``).
"""


class UserServiceError(Exception):
    """Base class for all errors raised by the service."""


class NotFound(UserServiceError):
    """A lookup (or an INSERT ... RETURNING) produced zero rows."""


class PoolError(UserServiceError):
    """A connection could not be obtained from the pool."""


class QueryError(UserServiceError):
    """A statement failed to execute."""


class MappingError(UserServiceError):
    """A database row could not be converted into a record."""


class DecodeError(UserServiceError):
    """Request input (body or path) could not be decoded."""
