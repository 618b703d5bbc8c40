from dataclasses import dataclass

from core.domain.exceptions import InvalidTaskIdError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from core.domain.validation import validate_task_fields


@dataclass(slots=True)
class UpdateTaskCommand:
    title: str | None = None
    description: str | None = None
    status: str | None = None


class UpdateTaskUseCase:
    """
    Reemplazo completo: los tres campos editables son obligatorios.

    Devuelve la tarea actualizada o None si el id no existe.
    """

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: str, cmd: UpdateTaskCommand) -> Task | None:
        fields = validate_task_fields(cmd.title, cmd.description, cmd.status)

        if not self._repository.is_valid_id(task_id):
            raise InvalidTaskIdError(task_id)

        return self._repository.replace(task_id, fields)
