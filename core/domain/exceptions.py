"""
Excepciones del dominio de tareas.

Las de validación (`TaskValidationError`) se detectan antes de tocar el store
y se traducen a 400. `TaskStoreValidationError` la lanza el propio store.
"""

MISSING_FIELDS_MESSAGE = "Missing required fields: title, description, and status."
INVALID_ID_MESSAGE = "Invalid ID format"


class TaskValidationError(ValueError):
    pass


class MissingTaskFieldsError(TaskValidationError):
    def __init__(self, message: str = MISSING_FIELDS_MESSAGE) -> None:
        super().__init__(message)


class InvalidTaskStatusError(TaskValidationError):
    def __init__(self, value: object) -> None:
        super().__init__(f"{value} is incorrect status type")
        self.value = value


class InvalidTaskIdError(TaskValidationError):
    def __init__(self, task_id: str) -> None:
        super().__init__(INVALID_ID_MESSAGE)
        self.task_id = task_id


class TaskStoreValidationError(Exception):
    """El store rechazó el documento (campo requerido vacío o estado fuera del enum)."""
