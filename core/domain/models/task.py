from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TaskStatus(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


@dataclass(slots=True)
class TaskFields:
    """Campos editables de una tarea, ya validados."""

    title: str
    description: str
    status: TaskStatus


@dataclass(slots=True)
class Task:
    id: str | None
    title: str
    description: str
    status: TaskStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None
