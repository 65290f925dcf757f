"""
Task use cases.

The service orchestrates the Task entity and the repository contract; it
has no knowledge of HTTP or SQL.
"""

import logging
from typing import List

from showcase.core.exceptions import TaskNotFoundError
from showcase.domain.interfaces import ITaskRepository
from showcase.domain.task import Task
from showcase.schemas.dtos import CreateTaskInput, UpdateTaskInput

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, repository: ITaskRepository):
        self.repository = repository

    def create_task(self, data: CreateTaskInput) -> Task:
        task = Task.new(data.title, data.description)
        created = self.repository.create(task)
        logger.info("Task created", extra={"context": {"task_id": created.id}})
        return created

    def get_task(self, task_id: int) -> Task:
        task = self.repository.get_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def get_all_tasks(self) -> List[Task]:
        return self.repository.get_all()

    def update_task(self, data: UpdateTaskInput) -> Task:
        task = self.get_task(data.id)
        task.update(data.title, data.description, data.completed)
        return self.repository.update(task)

    def delete_task(self, task_id: int) -> None:
        if not self.repository.delete(task_id):
            raise TaskNotFoundError(task_id)
        logger.info("Task deleted", extra={"context": {"task_id": task_id}})

    def complete_task(self, task_id: int) -> Task:
        task = self.get_task(task_id)
        task.mark_as_completed()
        return self.repository.update(task)

    def reopen_task(self, task_id: int) -> Task:
        task = self.get_task(task_id)
        task.mark_as_incomplete()
        return self.repository.update(task)
