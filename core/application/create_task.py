from dataclasses import dataclass

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from core.domain.validation import validate_task_fields


@dataclass(slots=True)
class CreateTaskCommand:
    title: str | None = None
    description: str | None = None
    status: str | None = None


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreateTaskCommand) -> Task:
        fields = validate_task_fields(cmd.title, cmd.description, cmd.status)
        task = Task(
            id=None,
            title=fields.title,
            description=fields.description,
            status=fields.status,
        )
        return self._repository.insert(task)
