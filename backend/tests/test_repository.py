from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import text
from sqlmodel import SQLModel

from taskboard.core.errors import NotFoundError, StorageError
from taskboard.db.models import Event, Task, as_utc, utcnow
from taskboard.db.repository import EventRepository, TaskRepository


def add_tasks(repo, n):
    return [repo.create(Task(title=f"task {i}")) for i in range(1, n + 1)]


def test_create_assigns_id_and_timestamps(session):
    repo = TaskRepository(session)
    first, second = add_tasks(repo, 2)

    assert first.id == 1
    assert second.id == 2
    assert first.created_at is not None
    assert first.created_at == first.updated_at
    assert first.deleted_at is None


def test_list_windows_and_counts(session):
    repo = TaskRepository(session)
    add_tasks(repo, 5)

    items, total = repo.list(page=2, limit=2)

    assert total == 5
    assert [t.id for t in items] == [3, 4]


def test_list_past_last_page_is_empty(session):
    repo = TaskRepository(session)
    add_tasks(repo, 3)

    items, total = repo.list(page=4, limit=2)

    assert items == []
    assert total == 3


def test_get_by_id_missing_returns_none(session):
    assert TaskRepository(session).get_by_id(42) is None


def test_update_refreshes_updated_at_only(session):
    repo = TaskRepository(session)
    (task,) = add_tasks(repo, 1)
    created = task.created_at

    task.title = "renamed"
    task.status = True
    repo.update(task)

    stored = repo.get_by_id(task.id)
    assert stored.title == "renamed"
    assert stored.status is True
    assert stored.created_at == created
    assert as_utc(stored.updated_at) >= as_utc(created)


def test_delete_is_soft(session):
    repo = TaskRepository(session)
    add_tasks(repo, 3)

    repo.delete(2)

    assert repo.get_by_id(2) is None
    items, total = repo.list(page=1, limit=10)
    assert total == 2
    assert [t.id for t in items] == [1, 3]
    row = session.connection().execute(text("SELECT deleted_at FROM task WHERE id = 2")).one()
    assert row[0] is not None


def test_delete_twice_raises_not_found(session):
    repo = TaskRepository(session)
    add_tasks(repo, 1)
    repo.delete(1)

    with pytest.raises(NotFoundError):
        repo.delete(1)


def test_delete_unknown_raises_not_found(session):
    with pytest.raises(NotFoundError):
        TaskRepository(session).delete(99)


def test_event_round_trip(session):
    repo = EventRepository(session)
    start = datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)
    event = repo.create(
        Event(title="Standup", location="Room 4", start_time=start, end_time=start + timedelta(minutes=15))
    )

    stored = repo.get_by_id(event.id)
    assert stored.complete is False
    assert as_utc(stored.start_time) == start
    assert as_utc(stored.end_time) == start + timedelta(minutes=15)


def test_storage_failure_is_wrapped(db, session):
    SQLModel.metadata.drop_all(db.engine)

    with pytest.raises(StorageError) as excinfo:
        TaskRepository(session).list(page=1, limit=10)

    assert excinfo.value.operation == "TaskRepository.list"
    assert excinfo.value.entity == "Task"


@pytest.mark.parametrize("model", [Task, Event])
def test_timestamp_columns_are_timezone_aware(model):
    for name in ("created_at", "updated_at", "deleted_at"):
        assert model.__table__.c[name].type.timezone is True


def test_create_and_update_with_aware_timestamps(session):
    repo = TaskRepository(session)
    before = utcnow()

    task = repo.create(Task(title="Buy milk"))
    task.title = "Buy oat milk"
    repo.update(task)

    stored = repo.get_by_id(task.id)
    assert stored.title == "Buy oat milk"
    assert as_utc(stored.created_at) >= before.replace(microsecond=0)
    assert as_utc(stored.updated_at) >= as_utc(stored.created_at)
