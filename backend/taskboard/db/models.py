from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Aware UTC; naive values are taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _timestamp(**kwargs):
    # SQLite hands these back naive; schemas re-attach UTC on the way out
    return Field(sa_type=DateTime(timezone=True), **kwargs)


class Task(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(nullable=False)
    description: Optional[str] = None
    status: bool = Field(default=False, nullable=False)
    created_at: Optional[datetime] = _timestamp(default=None, nullable=False)
    updated_at: Optional[datetime] = _timestamp(default=None, nullable=False)
    deleted_at: Optional[datetime] = _timestamp(default=None, index=True)


class Event(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(nullable=False)
    description: Optional[str] = None
    complete: bool = Field(default=False, nullable=False)
    location: str = Field(nullable=False)
    start_time: datetime = _timestamp(nullable=False)
    end_time: datetime = _timestamp(nullable=False)
    created_at: Optional[datetime] = _timestamp(default=None, nullable=False)
    updated_at: Optional[datetime] = _timestamp(default=None, nullable=False)
    deleted_at: Optional[datetime] = _timestamp(default=None, index=True)
