import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import List, Optional

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from app.errors import StoreError
from app.stores.base import Record, TodoStore

logger = logging.getLogger(__name__)


def to_object_id(todo_id: str) -> Optional[ObjectId]:
    todo_id = str(todo_id)
    if not ObjectId.is_valid(todo_id):
        return None
    return ObjectId(todo_id)


def serialize(document: Record) -> Record:
    record = dict(document)
    record["id"] = str(record.pop("_id"))
    return record


@contextmanager
def store_errors(operation: str):
    try:
        yield
    except PyMongoError as exc:
        raise StoreError(f"MongoDB {operation} failed: {exc}") from exc


class MongoTodoStore(TodoStore):
    """Todos kept in a MongoDB collection through motor.

    Inserts stamp ``createdAt``/``updatedAt`` and updates refresh ``updatedAt``.
    Ids that are not valid ObjectIds are treated as absent.
    """

    def __init__(self, collection, client=None):
        self.collection = collection
        self.client = client

    async def find_all(self) -> List[Record]:
        with store_errors("find"):
            documents = await self.collection.find().to_list(length=None)
        return [serialize(document) for document in documents]

    async def insert(self, record: Record) -> Record:
        now = datetime.now(timezone.utc)
        document = {**record, "createdAt": now, "updatedAt": now}
        with store_errors("insert"):
            result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return serialize(document)

    async def find_by_id(self, todo_id: str) -> Optional[Record]:
        object_id = to_object_id(todo_id)
        if object_id is None:
            return None
        with store_errors("find_one"):
            document = await self.collection.find_one({"_id": object_id})
        return serialize(document) if document else None

    async def delete_by_id(self, todo_id: str) -> bool:
        object_id = to_object_id(todo_id)
        if object_id is None:
            return False
        with store_errors("delete"):
            result = await self.collection.delete_one({"_id": object_id})
        return result.deleted_count > 0

    async def update_by_id(self, todo_id: str, fields: Record) -> Optional[Record]:
        object_id = to_object_id(todo_id)
        if object_id is None:
            return None
        changes = {**fields, "updatedAt": datetime.now(timezone.utc)}
        with store_errors("update"):
            document = await self.collection.find_one_and_update(
                {"_id": object_id},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        return serialize(document) if document else None

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
            logger.info("MongoDB connection closed")
