"""Task repository implementation backed by SQLAlchemy.

Adapter between the Task domain entity and the ``tasks`` table. Services
only see the ``ITaskRepository`` contract.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from showcase.db.base import TaskModel
from showcase.domain.interfaces import ITaskRepository
from showcase.domain.task import Task

logger = logging.getLogger(__name__)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite drops tzinfo on the way back; stored values are always UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class TaskRepository(ITaskRepository):
    """Repository for Task persistence operations."""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def create(self, task: Task) -> Task:
        db_task = TaskModel(
            title=task.title,
            description=task.description,
            completed=task.completed,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )
        try:
            self.db.add(db_task)
            self.db.commit()
            self.db.refresh(db_task)
        except Exception:
            self.db.rollback()
            logger.error(
                "Error creating task",
                extra={"context": {"title": task.title}},
                exc_info=True,
            )
            raise
        task.id = db_task.id
        return task

    def get_by_id(self, task_id: int) -> Optional[Task]:
        db_task = self.db.query(TaskModel).filter_by(id=task_id).first()
        return self._to_domain(db_task) if db_task else None

    def get_all(self) -> List[Task]:
        db_tasks = (
            self.db.query(TaskModel)
            .order_by(TaskModel.created_at.desc(), TaskModel.id.desc())
            .all()
        )
        return [self._to_domain(t) for t in db_tasks]

    def update(self, task: Task) -> Task:
        db_task = self.db.query(TaskModel).filter_by(id=task.id).first()
        if not db_task:
            raise ValueError(f"Task with ID {task.id} not found")

        db_task.title = task.title
        db_task.description = task.description
        db_task.completed = task.completed
        db_task.updated_at = task.updated_at
        try:
            self.db.commit()
            self.db.refresh(db_task)
        except Exception:
            self.db.rollback()
            logger.error(
                "Error updating task",
                extra={"context": {"task_id": task.id}},
                exc_info=True,
            )
            raise
        return self._to_domain(db_task)

    def delete(self, task_id: int) -> bool:
        db_task = self.db.query(TaskModel).filter_by(id=task_id).first()
        if not db_task:
            return False
        try:
            self.db.delete(db_task)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return True

    def _to_domain(self, db_task: TaskModel) -> Task:
        return Task(
            id=db_task.id,
            title=db_task.title,
            description=db_task.description or "",
            completed=bool(db_task.completed),
            created_at=as_utc(db_task.created_at),
            updated_at=as_utc(db_task.updated_at),
        )
