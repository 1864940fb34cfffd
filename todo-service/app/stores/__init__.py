import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient

from app.stores.base import Record, TodoStore
from app.stores.memory import MemoryTodoStore
from app.stores.mongo import MongoTodoStore

logger = logging.getLogger(__name__)

__all__ = ["MemoryTodoStore", "MongoTodoStore", "Record", "TodoStore", "select_store"]


async def select_store(
    mongo_uri: Optional[str],
    db_name: str = "todo",
    collection_name: str = "todos",
    timeout_ms: int = 5000,
) -> TodoStore:
    """Pick the backend once at startup; there is no reconnection later."""
    if not mongo_uri:
        logger.info("No MONGO_URI provided, using in-memory store")
        return MemoryTodoStore()

    client = None
    try:
        client = AsyncIOMotorClient(mongo_uri, serverSelectionTimeoutMS=timeout_ms, tz_aware=True)
        await client.admin.command("ping")
    except Exception as exc:
        logger.error("Failed to connect to MongoDB, falling back to in-memory store: %s", exc)
        if client is not None:
            client.close()
        return MemoryTodoStore()

    logger.info("Connected to MongoDB (database=%s, collection=%s)", db_name, collection_name)
    return MongoTodoStore(client[db_name][collection_name], client=client)
