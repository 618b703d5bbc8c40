import dataclasses
from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from core.domain.models.task import Task, TaskFields
from core.domain.ports.task_repository import TaskRepository
from infrastructure.mongo.models.task import TaskMongo

COLLECTION_NAME = "todos"


def _now() -> datetime:
    # BSON guarda milisegundos
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class MongoTaskRepository(TaskRepository):
    """
    Implementación de TaskRepository usando MongoDB (Synchronous).

    La base de datos se recibe ya conectada; el repositorio no abre conexiones.
    """

    def __init__(self, database: Database[Any]) -> None:
        self.collection: Collection[Any] = database[COLLECTION_NAME]

    def is_valid_id(self, task_id: str) -> bool:
        return ObjectId.is_valid(task_id)

    def insert(self, task: Task) -> Task:
        """
        Inserta una tarea nueva con `createdAt` y `updatedAt` iguales.

        Argumentos:
            task (Task): La tarea a guardar (sin id).

        Retorna:
            Task: La tarea con el id generado por MongoDB.
        """
        now = _now()
        task_mongo = TaskMongo.from_domain(
            dataclasses.replace(task, id=None, created_at=now, updated_at=now)
        )
        doc = task_mongo.model_dump(by_alias=True, exclude={"id"})

        result = self.collection.insert_one(doc)
        task_mongo.id = str(result.inserted_id)
        return task_mongo.to_domain()

    def find_all(self) -> list[Task]:
        """
        Lista todas las tareas en el orden natural de la colección.

        Retorna:
            list[Task]: Lista de todas las tareas.
        """
        docs = self.collection.find()
        return [TaskMongo(**doc).to_domain() for doc in docs]

    def find_by_id(self, task_id: str) -> Task | None:
        """
        Obtiene una tarea por su ID.

        Retorna:
            Task | None: La tarea encontrada o None si no existe.
        """
        doc = self.collection.find_one({"_id": ObjectId(task_id)})
        if not doc:
            return None

        return TaskMongo(**doc).to_domain()

    def replace(self, task_id: str, fields: TaskFields) -> Task | None:
        """
        Reemplaza los campos editables y refresca `updatedAt`.

        Retorna:
            Task | None: La tarea tras la actualización o None si no existe.
        """
        task_mongo = TaskMongo.for_write(
            title=fields.title,
            description=fields.description,
            status=fields.status,
            updated_at=_now(),
        )
        changes = task_mongo.model_dump(
            by_alias=True, include={"title", "description", "status", "updated_at"}
        )

        doc = self.collection.find_one_and_update(
            {"_id": ObjectId(task_id)},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        if not doc:
            return None

        return TaskMongo(**doc).to_domain()

    def delete_by_id(self, task_id: str) -> Task | None:
        """
        Elimina una tarea por su ID.

        Retorna:
            Task | None: La tarea eliminada o None si no existía.
        """
        doc = self.collection.find_one_and_delete({"_id": ObjectId(task_id)})
        if not doc:
            return None

        return TaskMongo(**doc).to_domain()
