from core.domain.exceptions import InvalidTaskStatusError, MissingTaskFieldsError
from core.domain.models.task import TaskFields, TaskStatus


def validate_task_fields(
    title: str | None, description: str | None, status: str | None
) -> TaskFields:
    """
    Valida los campos editables compartidos por crear y editar.

    Argumentos:
        title (str | None): Título recibido.
        description (str | None): Descripción recibida.
        status (str | None): Estado recibido.

    Retorna:
        TaskFields: Campos listos para enviar al store.

    Lanza:
        MissingTaskFieldsError: Si falta alguno o está vacío.
        InvalidTaskStatusError: Si el estado no pertenece al enum.
    """
    if not title or not description or not status:
        raise MissingTaskFieldsError()

    try:
        task_status = TaskStatus(status)
    except ValueError:
        raise InvalidTaskStatusError(status) from None

    return TaskFields(title=title, description=description, status=task_status)
