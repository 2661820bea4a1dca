import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from ..deps import get_current_uid
from ...db.session import get_session
from ...db import crud
from ...schemas.tasks import TaskDeleted, TaskIn, TaskOut, TaskSyncIn, TaskUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])

NOT_FOUND = "Task not found or user not authorized."
CREATE_FAILED = "Failed to create task."
FETCH_FAILED = "Failed to fetch tasks."
SYNC_FAILED = "Failed to sync tasks."
UPDATE_FAILED = "Failed to update task."
DELETE_FAILED = "Failed to delete task."


def _fail(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


@router.post("/", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create(body: TaskIn, uid: str = Depends(get_current_uid), session: Session = Depends(get_session)):
    result = crud.create_task(session, uid, body)
    if result.failed:
        logger.error("Error creating task: %s", result.error)
        raise _fail(CREATE_FAILED)
    return result.value


@router.get("/", response_model=List[TaskOut])
def list_all(uid: str = Depends(get_current_uid), session: Session = Depends(get_session)):
    result = crud.list_tasks(session, uid)
    if result.failed:
        logger.error("Error fetching tasks: %s", result.error)
        raise _fail(FETCH_FAILED)
    return result.value


@router.post("/sync", response_model=List[TaskOut], status_code=status.HTTP_201_CREATED)
def sync(body: List[TaskSyncIn], uid: str = Depends(get_current_uid), session: Session = Depends(get_session)):
    result = crud.sync_tasks(session, uid, body)
    if result.failed:
        logger.error("Error syncing tasks: %s", result.error)
        raise _fail(SYNC_FAILED)
    return result.value


@router.put("/{task_id}", response_model=TaskOut)
def update(
    task_id: str,
    body: TaskUpdate,
    uid: str = Depends(get_current_uid),
    session: Session = Depends(get_session),
):
    result = crud.update_task(session, uid, task_id, body)
    if result.failed:
        logger.error("Error updating task: %s", result.error)
        raise _fail(UPDATE_FAILED)
    if result.value is None:
        logger.info("Update matched no task %s for user %s", task_id, uid)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return result.value


@router.delete("/{task_id}", response_model=TaskDeleted)
def delete(task_id: str, uid: str = Depends(get_current_uid), session: Session = Depends(get_session)):
    result = crud.delete_task(session, uid, task_id)
    if result.failed:
        logger.error("Error deleting task: %s", result.error)
        raise _fail(DELETE_FAILED)
    if result.value is None:
        logger.info("Delete matched no task %s for user %s", task_id, uid)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return TaskDeleted(success=True, id=result.value)


# A body that does not fit the schema is an internal failure of the route it hit.
FAILURES = {
    create: CREATE_FAILED,
    list_all: FETCH_FAILED,
    sync: SYNC_FAILED,
    update: UPDATE_FAILED,
    delete: DELETE_FAILED,
}
