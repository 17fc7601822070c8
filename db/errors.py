"""
db/errors.py
------------
The single error kind raised by the data access layer.
"""


class PersistenceError(Exception):
    """
    Raised when a database operation fails.

    Wraps any connectivity, statement or driver failure. The original
    exception is chained as ``__cause__``; callers are not expected to
    tell a constraint violation from a lost connection.
    """
