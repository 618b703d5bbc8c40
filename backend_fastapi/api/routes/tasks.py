import logging
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, status

from backend_fastapi.api.deps import (
    create_task_use_case,
    delete_task_use_case,
    get_task_use_case,
    list_tasks_use_case,
    update_task_use_case,
)
from backend_fastapi.api.errors import INTERNAL_ERROR_MESSAGE
from backend_fastapi.api.schemas import Message, TaskEnvelope, TaskIn, TaskOut
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.exceptions import TaskValidationError
from core.domain.models.task import Task

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])

NOT_FOUND_MESSAGE = "Todo not found"

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": Message},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": Message},
}
_NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": Message}}


def _body(payload: TaskIn | None) -> dict[str, str | None]:
    # Sin cuerpo equivale a un objeto vacío: falla la validación de campos.
    return (payload or TaskIn()).model_dump()


def _to_out(task: Task | None) -> TaskOut | None:
    return TaskOut.from_domain(task) if task is not None else None


def _internal_error(action: str, error: Exception) -> NoReturn:
    logger.error(f"Error while {action}: {error}")
    raise HTTPException(status_code=500, detail=INTERNAL_ERROR_MESSAGE)


@router.post(
    "",
    response_model=TaskEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
    summary="Create a task",
)
def create_task(
    payload: TaskIn | None = None,
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> TaskEnvelope:
    """
    Crea una nueva tarea.

    - **title**: Título (obligatorio).
    - **description**: Descripción (obligatoria).
    - **status**: `pending`, `in-progress` o `completed`.
    """
    try:
        todo = TaskOut.from_domain(
            use_case.execute(CreateTaskCommand(**_body(payload)))
        )
    except TaskValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        _internal_error("adding todo", e)

    return TaskEnvelope(message="Todo saved successfully", todo=todo)


@router.get(
    "",
    response_model=list[TaskOut],
    responses={**_NOT_FOUND_RESPONSE, 500: {"model": Message}},
    summary="List all tasks",
)
def list_tasks(
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> list[TaskOut]:
    """
    Obtiene todas las tareas. Responde 404 si no hay ninguna.
    """
    try:
        todos = [TaskOut.from_domain(task) for task in use_case.execute()]
    except Exception as e:
        _internal_error("fetching todos", e)

    if not todos:
        raise HTTPException(status_code=404, detail="No todos found")
    return todos


@router.get(
    "/{task_id}",
    response_model=TaskOut,
    responses={**_ERROR_RESPONSES, **_NOT_FOUND_RESPONSE},
    summary="Get a task by id",
)
def get_task(
    task_id: str,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> TaskOut:
    try:
        todo = _to_out(use_case.execute(task_id))
    except TaskValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        _internal_error("fetching todo by id", e)

    if todo is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return todo


@router.put(
    "/{task_id}",
    response_model=TaskEnvelope,
    responses={**_ERROR_RESPONSES, **_NOT_FOUND_RESPONSE},
    summary="Replace an existing task",
)
def update_task(
    task_id: str,
    payload: TaskIn | None = None,
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> TaskEnvelope:
    """
    Reemplaza los datos de una tarea existente.

    - **task_id**: ObjectId de la tarea.
    - **title**, **description**, **status**: todos obligatorios.
    """
    try:
        todo = _to_out(use_case.execute(task_id, UpdateTaskCommand(**_body(payload))))
    except TaskValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        _internal_error("updating todo", e)

    if todo is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return TaskEnvelope(message="Todo updated successfully", todo=todo)


@router.delete(
    "/{task_id}",
    response_model=TaskEnvelope,
    responses={**_ERROR_RESPONSES, **_NOT_FOUND_RESPONSE},
    summary="Delete a task",
)
def delete_task(
    task_id: str,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> TaskEnvelope:
    """
    Elimina una tarea y devuelve el registro eliminado.
    """
    try:
        todo = _to_out(use_case.execute(task_id))
    except TaskValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        _internal_error("deleting todo", e)

    if todo is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return TaskEnvelope(message="Todo deleted successfully", todo=todo)
