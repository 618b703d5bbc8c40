import dataclasses
from datetime import datetime, timezone

from bson import ObjectId

from core.domain.exceptions import TaskStoreValidationError
from core.domain.models.task import Task, TaskFields, TaskStatus
from core.domain.ports.task_repository import TaskRepository


class InMemoryTaskRepository(TaskRepository):
    def __init__(self) -> None:
        self._data: dict[str, Task] = {}

    def __len__(self) -> int:
        return len(self._data)

    def is_valid_id(self, task_id: str) -> bool:
        return ObjectId.is_valid(task_id)

    def insert(self, task: Task) -> Task:
        self._check(task.title, task.description, task.status)
        now = datetime.now(timezone.utc)
        stored = dataclasses.replace(
            task, id=str(ObjectId()), created_at=now, updated_at=now
        )
        self._data[stored.id] = stored
        return dataclasses.replace(stored)

    def find_all(self) -> list[Task]:
        return [dataclasses.replace(task) for task in self._data.values()]

    def find_by_id(self, task_id: str) -> Task | None:
        task = self._data.get(task_id)
        return dataclasses.replace(task) if task else None

    def replace(self, task_id: str, fields: TaskFields) -> Task | None:
        self._check(fields.title, fields.description, fields.status)
        task = self._data.get(task_id)
        if task is None:
            return None
        updated = dataclasses.replace(
            task,
            title=fields.title,
            description=fields.description,
            status=fields.status,
            updated_at=datetime.now(timezone.utc),
        )
        self._data[task_id] = updated
        return dataclasses.replace(updated)

    def delete_by_id(self, task_id: str) -> Task | None:
        return self._data.pop(task_id, None)

    @staticmethod
    def _check(title: str, description: str, status: object) -> None:
        if not title or not description:
            raise TaskStoreValidationError("Path `title` is required.")
        if not isinstance(status, TaskStatus):
            raise TaskStoreValidationError(f"{status} is incorrect status type")
