"""SQLAlchemy engine, declarative base and the request-scoped session dependency."""

from collections.abc import Iterator
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from mediashelf.config import Settings, get_settings


class Base(DeclarativeBase):
    pass


class _DatabaseState:
    engine: Engine | None = None
    session_factory: sessionmaker[Session] | None = None


_state = _DatabaseState()


def _engine_options(database_url: str) -> dict[str, Any]:
    if database_url.startswith("sqlite"):
        # One shared in-memory connection across threads.
        return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
    return {"pool_size": 20, "max_overflow": 30, "pool_pre_ping": True, "pool_recycle": 3600}


def initialize_database(settings: Settings) -> None:
    """Build the engine and session factory. Called from the app lifespan."""
    _state.engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))
    _state.session_factory = sessionmaker(bind=_state.engine, autoflush=False)


def dispose_engine() -> None:
    if _state.engine is not None:
        _state.engine.dispose()
    _state.engine = None
    _state.session_factory = None


def get_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> sessionmaker[Session]:
    if _state.session_factory is None:
        initialize_database(settings)
    assert _state.session_factory is not None
    return _state.session_factory


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Iterator[Session]:
    """One session per request, closed when the response is sent."""
    with session_factory() as db:
        yield db


DatabaseSession = Annotated[Session, Depends(get_db)]
