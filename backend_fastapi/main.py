import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.errors import register_exception_handlers
from backend_fastapi.api.routes.tasks import router as tasks_router
from core.domain.ports.task_repository import TaskRepository
from infrastructure.container import build_task_repository
from infrastructure.logging_config import setup_logging
from infrastructure.mongo.session.client import connect, get_db

# Load environment variables from .env file
load_dotenv()
setup_logging(os.getenv("LOG_LEVEL", "info"))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Sin repositorio inyectado: conectar a MongoDB antes de aceptar peticiones.
    # Si el ping falla, la excepción aborta el arranque.
    client = None
    if getattr(app.state, "task_repository", None) is None:
        client = connect()
        app.state.task_repository = build_task_repository(get_db(client))
    try:
        yield
    finally:
        if client is not None:
            client.close()
            app.state.task_repository = None


def create_app(repository: TaskRepository | None = None) -> FastAPI:
    app = FastAPI(title="Tasks API", lifespan=lifespan)
    if repository is not None:
        app.state.task_repository = repository

    # Configure CORS from environment variables
    cors_origins = os.getenv("CORS_ORIGINS", "*")
    if cors_origins == "*":
        origins = ["*"]
    else:
        origins = [origin.strip() for origin in cors_origins.split(",")]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true",
        allow_methods=os.getenv("CORS_ALLOW_METHODS", "*").split(","),
        allow_headers=os.getenv("CORS_ALLOW_HEADERS", "*").split(","),
    )

    register_exception_handlers(app)
    app.include_router(tasks_router)
    return app


app = create_app()
