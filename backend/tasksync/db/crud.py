import uuid
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, TypeVar
from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select
from .models import Task
from ..schemas.tasks import TaskIn, TaskSyncIn, TaskUpdate
from ..services.dates import to_timestamp, utcnow

T = TypeVar("T")

# Anything raised while normalizing input or talking to the store.
STORE_ERRORS = (SQLAlchemyError, ValueError, TypeError, OverflowError)


@dataclass
class StoreResult(Generic[T]):
    """Outcome of one store call: either a value (possibly None) or the error."""

    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


def _run(session: Session, action: Callable[[], T]) -> StoreResult[T]:
    try:
        return StoreResult(value=action())
    except STORE_ERRORS as e:
        session.rollback()
        return StoreResult(error=e)


def _parse_id(task_id: Any) -> Optional[uuid.UUID]:
    if isinstance(task_id, uuid.UUID):
        return task_id
    try:
        return uuid.UUID(str(task_id))
    except ValueError:
        return None


def create_task(session: Session, uid: str, body: TaskIn) -> StoreResult[Task]:
    def action() -> Task:
        task = Task(
            uid=uid,
            title=body.title,
            description=body.description,
            hex_color=body.hex_color,
            due_at=to_timestamp(body.due_at),
        )
        session.add(task)
        session.commit()
        return task

    return _run(session, action)


def list_tasks(session: Session, uid: str) -> StoreResult[List[Task]]:
    return _run(session, lambda: list(session.exec(select(Task).where(Task.uid == uid)).all()))


def update_task(session: Session, uid: str, task_id: Any, body: TaskUpdate) -> StoreResult[Task]:
    """Full replace of the mutable fields; value is None when nothing matched."""
    tid = _parse_id(task_id)
    if tid is None:
        return StoreResult()

    def action() -> Optional[Task]:
        stmt = (
            update(Task)
            .where(Task.id == tid, Task.uid == uid)
            .values(
                title=body.title,
                description=body.description,
                hex_color=body.hex_color,
                due_at=to_timestamp(body.due_at),
                updated_at=utcnow(),
            )
            .returning(Task)
        )
        task = session.exec(stmt).scalars().first()
        session.commit()
        return task

    return _run(session, action)


def delete_task(session: Session, uid: str, task_id: Any) -> StoreResult[uuid.UUID]:
    """Value is the deleted id, or None when nothing matched."""
    tid = _parse_id(task_id)
    if tid is None:
        return StoreResult()

    def action() -> Optional[uuid.UUID]:
        stmt = delete(Task).where(Task.id == tid, Task.uid == uid).returning(Task.id)
        deleted_id = session.exec(stmt).scalars().first()
        session.commit()
        return deleted_id

    return _run(session, action)


def sync_tasks(session: Session, uid: str, items: List[TaskSyncIn]) -> StoreResult[List[Task]]:
    """
    Insert a client-originated batch in one transaction. Client timestamps
    are kept as given; a bad element fails the whole batch.
    """
    def action() -> List[Task]:
        tasks = []
        for it in items:
            t = Task(
                uid=uid,
                title=it.title,
                description=it.description,
                hex_color=it.hex_color,
                due_at=to_timestamp(it.due_at),
                created_at=to_timestamp(it.created_at),
                updated_at=to_timestamp(it.updated_at),
            )
            if it.id is not None:
                t.id = uuid.UUID(str(it.id))
            tasks.append(t)
        session.add_all(tasks)
        session.commit()
        return tasks

    return _run(session, action)
