"""Mapping of task box payloads.

The task box endpoints return plain `{"tasks": [...]}` and `{"task": {...}}`
envelopes rather than JSON:API documents, so they are validated as whole
pydantic models.
"""

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from skylight_hub.domain.tasks import Task
from skylight_hub.errors import DecodeError
from skylight_hub.jsonapi.attributes import attr_datetime


class TaskPayload(BaseModel):
    """A task as serialized by the backend."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, coerce_numbers_to_str=True
    )

    id: str
    title: str
    description: str | None = None
    priority: str | None = None
    created_by: str | None = None
    created_by_name: str | None = None
    created_at: str | None = None
    status: str | None = None


class TaskListEnvelope(BaseModel):
    tasks: list[TaskPayload]


class TaskEnvelope(BaseModel):
    task: TaskPayload


def task_from_payload(payload: TaskPayload) -> Task:
    return Task(
        id=payload.id,
        title=payload.title,
        description=payload.description,
        priority=payload.priority,
        created_by=payload.created_by,
        created_by_name=payload.created_by_name,
        created_at=attr_datetime({"createdAt": payload.created_at}, "createdAt"),
        status=payload.status,
    )


def parse_tasks(document: object) -> list[Task]:
    """Read a task list response."""
    try:
        envelope = TaskListEnvelope.model_validate(document)
    except ValidationError as exc:
        raise DecodeError(f"Malformed task list response: {exc}") from exc
    return [task_from_payload(payload) for payload in envelope.tasks]


def parse_task(document: object) -> Task:
    """Read a single task response."""
    try:
        envelope = TaskEnvelope.model_validate(document)
    except ValidationError as exc:
        raise DecodeError(f"Malformed task response: {exc}") from exc
    return task_from_payload(envelope.task)
