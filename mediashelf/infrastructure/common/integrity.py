"""Classifying ``IntegrityError`` from the database driver."""

from sqlalchemy.exc import IntegrityError


def is_unique_violation(error: IntegrityError, constraint: str, *columns: str) -> bool:
    """
    Whether ``error`` was raised by the named unique constraint.

    PostgreSQL reports the constraint name. SQLite only lists the columns, so
    pass them qualified with the table name, in constraint order.
    """
    message = str(error.orig)
    if constraint in message:
        return True
    return bool(columns) and f"UNIQUE constraint failed: {', '.join(columns)}" in message
