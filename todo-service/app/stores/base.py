from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

Record = Dict[str, Any]


class TodoStore(ABC):
    """Storage backend shared by the in-memory and MongoDB implementations.

    Records are plain dicts carrying a string ``id`` plus the todo fields.
    Ids are always compared in string form.
    """

    @abstractmethod
    async def find_all(self) -> List[Record]:
        ...

    @abstractmethod
    async def insert(self, record: Record) -> Record:
        """Store a new record and return it with its assigned id."""

    @abstractmethod
    async def find_by_id(self, todo_id: str) -> Optional[Record]:
        ...

    @abstractmethod
    async def delete_by_id(self, todo_id: str) -> bool:
        ...

    @abstractmethod
    async def update_by_id(self, todo_id: str, fields: Record) -> Optional[Record]:
        """Apply ``fields`` and return the updated record, or None if absent."""

    def close(self) -> None:
        pass
