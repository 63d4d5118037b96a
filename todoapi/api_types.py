"""Central API response/request type contracts.

Design principles:
 - JSON keys mirror the wire format exactly (camelCase where the API uses it).
 - No Any: explicit TypedDicts & NewType wrappers for identifiers.

Runtime behavior of endpoints SHOULD NOT depend on these definitions; they
exist for static analysis.
"""

from __future__ import annotations

from typing import Literal, NewType, TypedDict

TaskId = NewType("TaskId", str)

ResourceType = Literal["Task"]


class TaskMetaRecord(TypedDict):
    resourceType: ResourceType
    created: str
    lastModified: str
    location: str


class TaskRecord(TypedDict):
    id: TaskId
    title: str
    completed: bool
    meta: TaskMetaRecord


class TaskListEnvelope(TypedDict):
    page: int
    limit: int
    total: int
    totalPages: int
    data: list[TaskRecord]


class ErrorBody(TypedDict):
    message: str
    statusCode: int


class HealthResponse(TypedDict):
    status: Literal["ok"]
    uptime: float
    timestamp: str


class WelcomeResponse(TypedDict):
    message: str
    version: str
    docs: str


__all__ = [
    "TaskId",
    "ResourceType",
    "TaskMetaRecord",
    "TaskRecord",
    "TaskListEnvelope",
    "ErrorBody",
    "HealthResponse",
    "WelcomeResponse",
]
