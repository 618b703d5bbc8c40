from datetime import datetime

from pydantic import BaseModel, Field

from core.domain.models.task import Task


class TaskIn(BaseModel):
    """Cuerpo de POST y PUT. La presencia de cada campo se valida en el dominio."""

    title: str | None = None
    description: str | None = None
    status: str | None = None


class TaskOut(BaseModel):
    id: str = Field(alias="_id")
    title: str
    description: str
    status: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_domain(cls, task: Task) -> "TaskOut":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status.value,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class TaskEnvelope(BaseModel):
    message: str
    todo: TaskOut


class Message(BaseModel):
    message: str
