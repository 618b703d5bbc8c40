import logging
import os
from typing import Any

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


def connect(uri: str | None = None, timeout_ms: int | None = None) -> MongoClient[Any]:
    """
    Crea el cliente de MongoDB y verifica la conexión con un ping.

    Se llama una sola vez al arrancar la aplicación; el cliente resultante se
    comparte entre todas las peticiones.

    Argumentos:
        uri (str | None): URI de conexión. Por defecto `MONGO_URI`.
        timeout_ms (int | None): Timeout de selección de servidor.

    Retorna:
        MongoClient: Cliente conectado.

    Lanza:
        PyMongoError: Si el servidor no responde al ping.
    """
    mongo_uri = uri or os.getenv("MONGO_URI", "mongodb://localhost:27017")
    if timeout_ms is None:
        timeout_ms = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

    client: MongoClient[Any] = MongoClient(
        mongo_uri, serverSelectionTimeoutMS=timeout_ms, tz_aware=True
    )
    try:
        client.admin.command("ping")
    except PyMongoError as e:
        logger.error(f"Database connection failed: {e}")
        client.close()
        raise

    logger.info("Database connection established")
    return client


def get_db(client: MongoClient[Any], name: str | None = None) -> Database[Any]:
    """
    Obtiene la base de datos de MongoDB.

    Retorna:
        Database: La instancia de la base de datos de MongoDB.
    """
    db_name = name or os.getenv("MONGO_DB_NAME", "todos")
    return client[db_name]
