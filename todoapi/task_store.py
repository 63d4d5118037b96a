"""In-memory task store.

Owns the ordered task collection and every rule about it: title validation,
metadata stamping, page slicing and id uniqueness. Operations never raise for
expected failures; they return an outcome (see ``errors``) that the HTTP layer
translates.

All operations take the store lock and run to completion. Records are
immutable, so readers only ever observe whole tasks.
"""
from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Callable
from dataclasses import replace
from datetime import UTC, datetime
from typing import TypeGuard

from .errors import NotFoundError, Ok, Outcome, ValidationError
from .models import Task, TaskMeta
from .pagination import PageEnvelope, normalize_page_request, paginate_sequence

log = logging.getLogger(__name__)

MIN_TITLE_LENGTH = 4
_MAX_ID_ATTEMPTS = 16

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def utc_now() -> datetime:
    return datetime.now(UTC)


def uuid4_str() -> str:
    return str(uuid.uuid4())


def is_valid_title(title: object) -> TypeGuard[str]:
    return isinstance(title, str) and len(title) >= MIN_TITLE_LENGTH


class TaskStore:
    def __init__(
        self,
        *,
        base_url: str = "http://localhost:3000",
        clock: Clock = utc_now,
        id_factory: IdFactory = uuid4_str,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._clock = clock
        self._id_factory = id_factory
        self._tasks: list[Task] = []
        # every id ever handed out, deleted ones included
        self._issued_ids: set[str] = set()
        self._lock = threading.RLock()

    # ---- helpers -----------------------------------------------------------

    def location_for(self, task_id: str) -> str:
        return f"{self._base_url}/tasks/{task_id}"

    def _new_id(self) -> str:
        for _ in range(_MAX_ID_ATTEMPTS):
            task_id = self._id_factory()
            if task_id not in self._issued_ids:
                self._issued_ids.add(task_id)
                return task_id
        raise RuntimeError("id factory keeps returning already issued ids")

    def _index_of(self, task_id: str) -> int:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return -1

    def _stamp(self, previous: datetime) -> datetime:
        # lastModified never moves backwards, even if the clock does
        now = self._clock()
        return now if now > previous else previous

    # ---- operations --------------------------------------------------------

    def create_task(self, title: object) -> Outcome[Task]:
        if not is_valid_title(title):
            return ValidationError()
        with self._lock:
            task_id = self._new_id()
            now = self._clock()
            task = Task(
                id=task_id,
                title=title,
                completed=False,
                meta=TaskMeta(created=now, last_modified=now, location=self.location_for(task_id)),
            )
            self._tasks.append(task)
        log.debug("task created id=%s", task_id)
        return Ok(task)

    def list_tasks(self, page: object = None, limit: object = None) -> PageEnvelope[Task]:
        page_req = normalize_page_request(page, limit)
        with self._lock:
            snapshot = tuple(self._tasks)
        return paginate_sequence(snapshot, page_req)

    def get_task(self, task_id: str) -> Outcome[Task]:
        with self._lock:
            idx = self._index_of(task_id)
            if idx == -1:
                return NotFoundError()
            return Ok(self._tasks[idx])

    def update_task(self, task_id: str, title: object) -> Outcome[Task]:
        """Replace the title; id, completed and creation metadata carry over."""
        with self._lock:
            idx = self._index_of(task_id)
            if idx == -1:
                return NotFoundError()
            if not is_valid_title(title):
                return ValidationError()
            existing = self._tasks[idx]
            updated = Task(
                id=existing.id,
                title=title,
                completed=existing.completed,
                meta=replace(existing.meta, last_modified=self._stamp(existing.meta.last_modified)),
            )
            self._tasks[idx] = updated
        log.debug("task updated id=%s", task_id)
        return Ok(updated)

    def toggle_completed(self, task_id: str) -> Outcome[Task]:
        with self._lock:
            idx = self._index_of(task_id)
            if idx == -1:
                return NotFoundError()
            existing = self._tasks[idx]
            toggled = replace(
                existing,
                completed=not existing.completed,
                meta=replace(existing.meta, last_modified=self._stamp(existing.meta.last_modified)),
            )
            self._tasks[idx] = toggled
        log.debug("task toggled id=%s completed=%s", task_id, toggled.completed)
        return Ok(toggled)

    def delete_task(self, task_id: str) -> Outcome[None]:
        with self._lock:
            idx = self._index_of(task_id)
            if idx == -1:
                return NotFoundError()
            del self._tasks[idx]
        log.debug("task deleted id=%s", task_id)
        return Ok(None)

    # ---- maintenance -------------------------------------------------------

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def clear(self) -> None:
        """Drop every task. Issued ids stay reserved."""
        with self._lock:
            self._tasks.clear()


__all__ = ["MIN_TITLE_LENGTH", "TaskStore", "is_valid_title", "utc_now", "uuid4_str"]
