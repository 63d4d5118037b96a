"""Tasks API

Thin HTTP boundary over ``TaskStore``: reads path/query/body, calls exactly one
store operation and turns its outcome into a response. Failure kinds map to
status codes in ``errors.status_for``.
"""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request
from flask.typing import ResponseReturnValue

from .api_types import TaskListEnvelope
from .errors import Ok, Outcome, failure_response
from .models import Task
from .pagination import map_envelope, parse_page_params
from .task_store import TaskStore

bp = Blueprint("tasks_api", __name__, url_prefix="/tasks")


def _store() -> TaskStore:
    return current_app.extensions["task_store"]


def _title_from_body() -> object:
    # Missing or malformed JSON behaves like an empty object
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None
    return data.get("title")


def _respond(outcome: Outcome[Task], status: int = 200) -> ResponseReturnValue:
    if isinstance(outcome, Ok):
        resp = jsonify(outcome.value.to_dict())
        resp.status_code = status
        return resp
    return failure_response(outcome)


@bp.get("/", strict_slashes=False)
def list_tasks() -> ResponseReturnValue:
    page_req = parse_page_params(request.args)
    envelope = _store().list_tasks(page_req["page"], page_req["limit"])
    payload: TaskListEnvelope = map_envelope(envelope, Task.to_dict)  # type: ignore[assignment]
    return jsonify(payload)


@bp.post("/", strict_slashes=False)
def create_task() -> ResponseReturnValue:
    outcome = _store().create_task(_title_from_body())
    resp = _respond(outcome, status=201)
    if isinstance(outcome, Ok):
        resp.headers["Location"] = outcome.value.meta.location  # type: ignore[union-attr]
    return resp


@bp.get("/<task_id>")
def get_task(task_id: str) -> ResponseReturnValue:
    return _respond(_store().get_task(task_id))


@bp.put("/<task_id>")
def update_task(task_id: str) -> ResponseReturnValue:
    # Only the title is read; any other submitted field is ignored
    return _respond(_store().update_task(task_id, _title_from_body()))


@bp.patch("/<task_id>/completed")
def toggle_completed(task_id: str) -> ResponseReturnValue:
    return _respond(_store().toggle_completed(task_id))


@bp.delete("/<task_id>")
def delete_task(task_id: str) -> ResponseReturnValue:
    outcome = _store().delete_task(task_id)
    if isinstance(outcome, Ok):
        return "", 204
    return failure_response(outcome)
