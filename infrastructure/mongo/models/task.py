from datetime import datetime
from typing import Any

from bson import ObjectId
from pydantic import BaseModel, Field, ValidationError, field_validator

from core.domain.exceptions import TaskStoreValidationError
from core.domain.models.task import Task, TaskStatus


class TaskMongo(BaseModel):
    """
    Modelo de Tarea para MongoDB.
    Representa cómo se almacena la tarea en la colección `todos`.
    """

    id: str | None = Field(default=None, alias="_id")
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    status: TaskStatus
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    model_config = {"populate_by_name": True, "use_enum_values": True}

    @field_validator("id", mode="before")
    @classmethod
    def _object_id_as_str(cls, value: Any) -> Any:
        if isinstance(value, ObjectId):
            return str(value)
        return value

    @classmethod
    def for_write(cls, **data: Any) -> "TaskMongo":
        """
        Valida un documento antes de escribirlo.

        Lanza:
            TaskStoreValidationError: Si falta un campo o el estado no es válido.
        """
        try:
            return cls(**data)
        except ValidationError as e:
            raise TaskStoreValidationError(_describe(e)) from e

    def to_domain(self) -> Task:
        """
        Convierte el modelo de MongoDB al modelo de dominio.

        Retorna:
            Task: La entidad de dominio.
        """
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            status=TaskStatus(self.status),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    @classmethod
    def from_domain(cls, task: Task) -> "TaskMongo":
        """
        Crea una instancia validada de TaskMongo a partir de una entidad de dominio.

        Argumentos:
            task (Task): La entidad de dominio.

        Retorna:
            TaskMongo: El modelo de MongoDB.
        """
        return cls.for_write(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


def _describe(error: ValidationError) -> str:
    messages = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"])
        if field == "status" and detail["type"] == "enum":
            messages.append(f"{detail['input']} is incorrect status type")
        else:
            messages.append(f"Path `{field}` is required.")
    return "; ".join(messages)
