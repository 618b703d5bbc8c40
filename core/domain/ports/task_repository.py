from abc import ABC, abstractmethod

from core.domain.models.task import Task, TaskFields


class TaskRepository(ABC):
    @abstractmethod
    def is_valid_id(self, task_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def insert(self, task: Task) -> Task:
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, task_id: str) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def replace(self, task_id: str, fields: TaskFields) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, task_id: str) -> Task | None:
        raise NotImplementedError
