import logging
from abc import ABC, abstractmethod
from typing import Generic, Type, TypeVar

from pydantic import BaseModel
from sqlmodel import SQLModel

from ..core.errors import NotFoundError
from ..db.repository import Repository
from ..schemas.common import Page, Pagination

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)
RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


def total_pages(total: int, limit: int) -> int:
    """Ceiling division; no rows means zero pages, not one."""
    return (total + limit - 1) // limit


class CrudService(ABC, Generic[ModelT, RequestT, ResponseT]):
    """
    Business rules shared by every resource.

    Subclasses name the response schema and say how a request becomes an
    entity. Updates replace every mutable field; there is no partial patch.
    """

    response_schema: Type[ResponseT]

    def __init__(self, repository: Repository[ModelT]):
        self.repository = repository

    @property
    def entity_name(self) -> str:
        return self.repository.entity_name

    # hooks ---------------------------------------------------------------

    def validate(self, request: RequestT) -> None:
        """Raise ``ValidationError`` when ``request`` breaks a business rule."""

    @abstractmethod
    def build(self, request: RequestT) -> ModelT:
        """A fresh entity; id and timestamps are left to the repository."""

    @abstractmethod
    def apply(self, entity: ModelT, request: RequestT) -> None:
        """Overwrite every mutable field of ``entity`` from ``request``."""

    def to_response(self, entity: ModelT) -> ResponseT:
        return self.response_schema.model_validate(entity)

    # operations ----------------------------------------------------------

    def get_list(self, page: int, limit: int) -> Page[ResponseT]:
        items, total = self.repository.list(page, limit)
        return Page(
            items=[self.to_response(e) for e in items],
            pagination=Pagination(
                page=page,
                limit=limit,
                total=total,
                total_pages=total_pages(total, limit),
            ),
        )

    def get_by_id(self, entity_id: int) -> ResponseT:
        entity = self.repository.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.entity_name, entity_id)
        return self.to_response(entity)

    def create(self, request: RequestT) -> ResponseT:
        self.validate(request)
        entity = self.repository.create(self.build(request))
        logger.info("Created %s id=%s", self.entity_name, entity.id)
        return self.to_response(entity)

    def update(self, entity_id: int, request: RequestT) -> ResponseT:
        self.validate(request)
        entity = self.repository.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.entity_name, entity_id)
        self.apply(entity, request)
        entity = self.repository.update(entity)
        logger.info("Updated %s id=%s", self.entity_name, entity_id)
        return self.to_response(entity)

    def delete(self, entity_id: int) -> None:
        self.repository.delete(entity_id)
        logger.info("Deleted %s id=%s", self.entity_name, entity_id)
