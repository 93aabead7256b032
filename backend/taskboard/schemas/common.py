from datetime import datetime
from typing import Annotated, Generic, List, Optional, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

from ..db.models import as_utc

T = TypeVar("T")

SUCCESS = "success"
ERROR = "error"

UTCDatetime = Annotated[datetime, AfterValidator(as_utc)]
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class TransferModel(BaseModel):
    """camelCase on the wire, snake_case in Python; either is accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int


class Page(BaseModel, Generic[T]):
    items: List[T]
    pagination: Pagination


class Envelope(BaseModel, Generic[T]):
    status: str = SUCCESS
    message: str
    data: Optional[T] = None


class PaginatedEnvelope(BaseModel, Generic[T]):
    status: str = SUCCESS
    message: str
    data: List[T]
    pagination: Pagination
