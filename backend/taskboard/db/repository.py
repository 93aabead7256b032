import logging
from typing import Generic, List, Optional, Tuple, Type, TypeVar

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, func, select

from ..core.errors import NotFoundError, StorageError
from .models import Event, Task, utcnow

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)


class Repository(Generic[ModelT]):
    """
    Persistence for one soft-deletable table.

    Rows with a non-null ``deleted_at`` are invisible to every read and write
    here. No validation happens at this level.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def _op(self, name: str) -> str:
        return f"{type(self).__name__}.{name}"

    def _fail(self, name: str, exc: SQLAlchemyError) -> StorageError:
        self.session.rollback()
        op = self._op(name)
        logger.exception("[%s]: storage failure", op)
        return StorageError(op, self.entity_name, reason=type(exc).__name__)

    def _active(self):
        return self.model.deleted_at.is_(None)

    def list(self, page: int, limit: int) -> Tuple[List[ModelT], int]:
        offset = (page - 1) * limit
        try:
            total = self.session.exec(
                select(func.count()).select_from(self.model).where(self._active())
            ).one()
            items = self.session.exec(
                select(self.model)
                .where(self._active())
                .order_by(self.model.id)
                .offset(offset)
                .limit(limit)
            ).all()
        except SQLAlchemyError as exc:
            raise self._fail("list", exc) from exc
        return list(items), int(total)

    def get_by_id(self, entity_id: int) -> Optional[ModelT]:
        try:
            return self.session.exec(
                select(self.model).where(self.model.id == entity_id, self._active())
            ).first()
        except SQLAlchemyError as exc:
            raise self._fail("get_by_id", exc) from exc

    def create(self, entity: ModelT) -> ModelT:
        now = utcnow()
        entity.created_at = now
        entity.updated_at = now
        try:
            self.session.add(entity)
            self.session.commit()
            self.session.refresh(entity)
        except SQLAlchemyError as exc:
            raise self._fail("create", exc) from exc
        return entity

    def update(self, entity: ModelT) -> ModelT:
        entity.updated_at = utcnow()
        try:
            self.session.add(entity)
            self.session.commit()
            self.session.refresh(entity)
        except SQLAlchemyError as exc:
            raise self._fail("update", exc) from exc
        return entity

    def delete(self, entity_id: int) -> None:
        stmt = (
            update(self.model)
            .where(self.model.id == entity_id, self._active())
            .values(deleted_at=utcnow())
        )
        try:
            result = self.session.exec(stmt)
            self.session.commit()
        except SQLAlchemyError as exc:
            raise self._fail("delete", exc) from exc
        if result.rowcount == 0:
            raise NotFoundError(self.entity_name, entity_id)


class TaskRepository(Repository[Task]):
    model = Task


class EventRepository(Repository[Event]):
    model = Event
