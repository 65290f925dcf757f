"""
Unit tests for TaskService with a mocked repository.

The service is exercised through the ITaskRepository contract only:
- create / get / list
- full updates and completion toggles
- not-found handling
"""

import pytest

from showcase.core.exceptions import EmptyTitleError, TaskNotFoundError
from showcase.domain.task import Task
from showcase.schemas.dtos import CreateTaskInput, UpdateTaskInput
from showcase.services.task_service import TaskService
from tests.factories.repository_factories import TaskRepositoryFactory


@pytest.fixture
def mock_repo():
    """Create a mock task repository implementing the interface."""
    return TaskRepositoryFactory.create_mock_full()


@pytest.fixture
def service(mock_repo) -> TaskService:
    return TaskService(mock_repo)


def stored_task(task_id=1, **kwargs) -> Task:
    task = Task.new(kwargs.pop("title", "Stored"), kwargs.pop("description", ""))
    task.id = task_id
    return task


class TestTaskServiceCreate:
    def test_create_task_persists_new_entity(self, service, mock_repo):
        created = service.create_task(CreateTaskInput(title="Buy milk", description=""))

        mock_repo.create.assert_called_once()
        passed = mock_repo.create.call_args[0][0]
        assert isinstance(passed, Task)
        assert passed.completed is False
        assert created.title == "Buy milk"

    def test_invalid_title_never_reaches_repository(self, service, mock_repo):
        with pytest.raises(EmptyTitleError):
            service.create_task(CreateTaskInput(title=""))
        mock_repo.create.assert_not_called()


class TestTaskServiceQueries:
    def test_get_task(self, service, mock_repo):
        mock_repo.get_by_id.return_value = stored_task(7)
        assert service.get_task(7).id == 7
        mock_repo.get_by_id.assert_called_once_with(7)

    def test_get_missing_task(self, service, mock_repo):
        with pytest.raises(TaskNotFoundError, match="task not found"):
            service.get_task(99)

    def test_get_all_tasks(self, service, mock_repo):
        mock_repo.get_all.return_value = [stored_task(2), stored_task(1)]
        assert [t.id for t in service.get_all_tasks()] == [2, 1]


class TestTaskServiceUpdates:
    def test_update_task(self, service, mock_repo):
        mock_repo.get_by_id.return_value = stored_task(3, title="Old")

        updated = service.update_task(
            UpdateTaskInput(id=3, title="New", description="desc", completed=True)
        )

        assert updated.title == "New"
        assert updated.completed is True
        mock_repo.update.assert_called_once()

    def test_update_missing_task(self, service, mock_repo):
        with pytest.raises(TaskNotFoundError):
            service.update_task(UpdateTaskInput(id=3, title="New"))
        mock_repo.update.assert_not_called()

    def test_complete_and_reopen(self, service, mock_repo):
        task = stored_task(4)
        mock_repo.get_by_id.return_value = task

        assert service.complete_task(4).completed is True
        assert service.reopen_task(4).completed is False
        assert mock_repo.update.call_count == 2

    def test_delete_task(self, service, mock_repo):
        mock_repo.delete.return_value = True
        service.delete_task(5)
        mock_repo.delete.assert_called_once_with(5)

    def test_delete_missing_task(self, service, mock_repo):
        mock_repo.delete.return_value = False
        with pytest.raises(TaskNotFoundError):
            service.delete_task(5)
