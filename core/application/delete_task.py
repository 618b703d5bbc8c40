from core.domain.exceptions import InvalidTaskIdError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


class DeleteTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: str) -> Task | None:
        if not self._repository.is_valid_id(task_id):
            raise InvalidTaskIdError(task_id)
        return self._repository.delete_by_id(task_id)
