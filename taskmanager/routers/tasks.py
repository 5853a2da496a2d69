import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from taskmanager.schemas.task import TaskCreate, TaskUpdate, TaskOut
from taskmanager.schemas.results import InsertResult, UpdateResult, DeleteResult
from taskmanager.models.task import Task
from taskmanager.database import get_db, store_errors
from taskmanager.dependencies import require_matching_email, parse_task_id
from taskmanager.errors import Forbidden, NotFound

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _check_owner(task: Task, user: str, action: str):
    if task.user_email != user:
        raise Forbidden(f"Not allowed to {action} this task")


@router.post("", response_model=InsertResult)
def create_task(task: TaskCreate, db: Session = Depends(get_db), user: str = Depends(require_matching_email)):
    new = Task(user_email=user, **task.model_dump())
    with store_errors(db, "add task"):
        db.add(new)
        db.commit()
        db.refresh(new)
    logger.info("Task %s added for %s", new.id, user)
    return InsertResult(inserted_id=new.id)


@router.get("", response_model=list[TaskOut])
def list_tasks(db: Session = Depends(get_db), user: str = Depends(require_matching_email)):
    with store_errors(db, "list tasks"):
        return db.query(Task).filter(Task.user_email == user).order_by(Task.id).all()


@router.get("/{task_id}", response_model=TaskOut)
def get_task(task_id: str, db: Session = Depends(get_db), user: str = Depends(require_matching_email)):
    tid = parse_task_id(task_id)
    with store_errors(db, "fetch task"):
        task = db.query(Task).filter(Task.id == tid).first()
    if not task:
        raise NotFound("Task not found")
    _check_owner(task, user, "read")
    return task


@router.put("/{task_id}", response_model=UpdateResult)
def update_task(task_id: str, fields: TaskUpdate, db: Session = Depends(get_db), user: str = Depends(require_matching_email)):
    """Upsert: write only the supplied fields, creating the task if ``task_id`` is unknown.

    A created task holds exactly the supplied fields plus its owner.
    """
    tid = parse_task_id(task_id)
    values = fields.model_dump(exclude_unset=True)
    with store_errors(db, "update task"):
        task = db.query(Task).filter(Task.id == tid).first()
        if not task:
            db.add(Task(id=tid, user_email=user, **values))
            db.commit()
            logger.info("Task %s upserted for %s", tid, user)
            return UpdateResult(matched_count=0, modified_count=0, upserted_id=tid)

        _check_owner(task, user, "update")
        changed = {k: v for k, v in values.items() if getattr(task, k) != v}
        for k, v in changed.items():
            setattr(task, k, v)
        if changed:
            db.commit()
    logger.info("Task %s updated for %s (%d fields changed)", tid, user, len(changed))
    return UpdateResult(matched_count=1, modified_count=1 if changed else 0)


@router.delete("/{task_id}", response_model=DeleteResult)
def delete_task(task_id: str, db: Session = Depends(get_db), user: str = Depends(require_matching_email)):
    tid = parse_task_id(task_id)
    with store_errors(db, "delete task"):
        task = db.query(Task).filter(Task.id == tid).first()
        if not task:
            return DeleteResult(deleted_count=0)
        _check_owner(task, user, "delete")
        db.delete(task)
        db.commit()
    logger.info("Task %s deleted for %s", tid, user)
    return DeleteResult(deleted_count=1)
