"""
Task controller for handling HTTP requests.

This controller:
- Handles HTTP concerns only (parsing, status codes, JSON)
- Builds repository -> service per request and delegates to the use case
"""

from flask import Blueprint, jsonify

from showcase.core.api_utils import (
    error_response,
    exception_response,
    json_body,
    parse_int_id,
)
from showcase.core.limiter_config import limiter
from showcase.db.session import SessionLocal
from showcase.repositories.task_repo import TaskRepository
from showcase.schemas.dtos import CreateTaskInput, TaskResponse, UpdateTaskInput
from showcase.services.task_service import TaskService

task_bp = Blueprint("tasks", __name__, url_prefix="/tasks")


def _task_json(task):
    return TaskResponse.from_domain(task).to_dict()


@task_bp.route("", methods=["POST"])
@limiter.limit("30 per minute")
def create_task():
    """Create a task from ``{"title": ..., "description": ...}``."""
    data = json_body()
    if data is None:
        return error_response("invalid request body", 400)

    db = SessionLocal()
    try:
        service = TaskService(TaskRepository(db))
        task = service.create_task(CreateTaskInput.from_json(data))
        return jsonify(_task_json(task)), 201
    except Exception as e:
        return exception_response(e)
    finally:
        db.close()


@task_bp.route("", methods=["GET"])
@limiter.limit("100 per minute")
def list_tasks():
    """List all tasks, newest first."""
    db = SessionLocal()
    try:
        service = TaskService(TaskRepository(db))
        tasks = service.get_all_tasks()
        return jsonify([_task_json(t) for t in tasks]), 200
    except Exception as e:
        return exception_response(e, "failed to retrieve tasks")
    finally:
        db.close()


@task_bp.route("/<task_id>", methods=["GET"])
@limiter.limit("100 per minute")
def get_task(task_id):
    parsed_id = parse_int_id(task_id)
    if parsed_id is None:
        return error_response("invalid task id", 400)

    db = SessionLocal()
    try:
        service = TaskService(TaskRepository(db))
        return jsonify(_task_json(service.get_task(parsed_id))), 200
    except Exception as e:
        return exception_response(e)
    finally:
        db.close()


@task_bp.route("/<task_id>", methods=["PUT"])
@limiter.limit("30 per minute")
def update_task(task_id):
    """Replace title, description and completed of a task."""
    parsed_id = parse_int_id(task_id)
    if parsed_id is None:
        return error_response("invalid task id", 400)
    data = json_body()
    if data is None:
        return error_response("invalid request body", 400)

    db = SessionLocal()
    try:
        service = TaskService(TaskRepository(db))
        task = service.update_task(UpdateTaskInput.from_json(parsed_id, data))
        return jsonify(_task_json(task)), 200
    except Exception as e:
        return exception_response(e)
    finally:
        db.close()


@task_bp.route("/<task_id>", methods=["DELETE"])
@limiter.limit("30 per minute")
def delete_task(task_id):
    parsed_id = parse_int_id(task_id)
    if parsed_id is None:
        return error_response("invalid task id", 400)

    db = SessionLocal()
    try:
        service = TaskService(TaskRepository(db))
        service.delete_task(parsed_id)
        return "", 204
    except Exception as e:
        return exception_response(e, "failed to delete task")
    finally:
        db.close()


def _toggle(task_id, completed: bool):
    parsed_id = parse_int_id(task_id)
    if parsed_id is None:
        return error_response("invalid task id", 400)

    db = SessionLocal()
    try:
        service = TaskService(TaskRepository(db))
        if completed:
            task = service.complete_task(parsed_id)
        else:
            task = service.reopen_task(parsed_id)
        return jsonify(_task_json(task)), 200
    except Exception as e:
        return exception_response(e)
    finally:
        db.close()


@task_bp.route("/<task_id>/complete", methods=["POST"])
@limiter.limit("30 per minute")
def complete_task(task_id):
    return _toggle(task_id, True)


@task_bp.route("/<task_id>/reopen", methods=["POST"])
@limiter.limit("30 per minute")
def reopen_task(task_id):
    return _toggle(task_id, False)
