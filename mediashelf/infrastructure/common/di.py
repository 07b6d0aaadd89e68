"""Bridges between FastAPI's request scope and the application container."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from dependency_injector.providers import Provider
from sqlalchemy.orm import Session

from mediashelf.core import container
from mediashelf.database import DatabaseSession

T = TypeVar("T")


@contextmanager
def bound_session(db: Session) -> Iterator[None]:
    """Point every repository the container builds at ``db`` for the block."""
    container.db.override(db)
    try:
        yield
    finally:
        container.db.reset_override()


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """Wrap a container provider as a FastAPI dependency bound to the request session."""

    def dependency(db: DatabaseSession) -> T:
        with bound_session(db):
            return provider()

    return dependency
