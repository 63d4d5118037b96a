"""Task record types.

Records are frozen: the store replaces a record on every mutation instead of
editing it in place, so a record handed to a caller never changes under it.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from .api_types import TaskId, TaskMetaRecord, TaskRecord

RESOURCE_TYPE = "Task"


def isoformat_utc(dt: datetime) -> str:
    """Render ``dt`` as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    dt = dt.astimezone(UTC)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


@dataclass(frozen=True, slots=True)
class TaskMeta:
    created: datetime
    last_modified: datetime
    location: str
    resource_type: str = RESOURCE_TYPE

    def to_dict(self) -> TaskMetaRecord:
        return {
            "resourceType": self.resource_type,  # type: ignore[typeddict-item]
            "created": isoformat_utc(self.created),
            "lastModified": isoformat_utc(self.last_modified),
            "location": self.location,
        }


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    completed: bool
    meta: TaskMeta

    def to_dict(self) -> TaskRecord:
        return {
            "id": TaskId(self.id),
            "title": self.title,
            "completed": self.completed,
            "meta": self.meta.to_dict(),
        }


__all__ = ["RESOURCE_TYPE", "Task", "TaskMeta", "isoformat_utc"]
