import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy.engine import Engine, make_url
from sqlmodel import SQLModel, Session, create_engine

logger = logging.getLogger(__name__)


class Database:
    """Owns the engine; opened by the app at startup, disposed at shutdown."""

    def __init__(self, url: str, echo: bool = False, engine: Optional[Engine] = None):
        self.url = url
        self.engine = engine or _build_engine(url, echo)

    def init_db(self) -> None:
        from . import models  # noqa: F401
        SQLModel.metadata.create_all(self.engine)
        logger.info("Database tables ensured (%s)", self.engine.url.render_as_string())

    @contextmanager
    def session(self) -> Iterator[Session]:
        with Session(self.engine) as session:
            yield session

    def dispose(self) -> None:
        self.engine.dispose()


def _build_engine(url: str, echo: bool) -> Engine:
    parsed = make_url(url)
    connect_args = {}
    if parsed.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
        if parsed.database and parsed.database != ":memory:":
            Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, echo=echo, pool_pre_ping=True, connect_args=connect_args)


def get_session(request: Request) -> Iterator[Session]:
    db: Database = request.app.state.db
    with db.session() as session:
        yield session
