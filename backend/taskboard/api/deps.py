from dataclasses import dataclass

from fastapi import Depends, Query
from sqlmodel import Session

from ..core.config import settings
from ..db.repository import EventRepository, TaskRepository
from ..db.session import get_session
from ..services.events import EventService
from ..services.tasks import TaskService


# largest value a BIGINT id or OFFSET can hold
MAX_ID = 2**63 - 1


@dataclass
class PaginationParams:
    page: int
    limit: int


def pagination_params(
    page: int = Query(1, ge=1, le=MAX_ID // settings.MAX_PAGE_LIMIT),
    limit: int = Query(settings.DEFAULT_PAGE_LIMIT, ge=1, le=settings.MAX_PAGE_LIMIT),
) -> PaginationParams:
    return PaginationParams(page=page, limit=limit)


def get_task_service(session: Session = Depends(get_session)) -> TaskService:
    return TaskService(TaskRepository(session))


def get_event_service(session: Session = Depends(get_session)) -> EventService:
    return EventService(EventRepository(session))
