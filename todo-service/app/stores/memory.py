import time
from typing import List, Optional

from app.stores.base import Record, TodoStore


class MemoryTodoStore(TodoStore):
    """Process-local store, lost on restart.

    None of the coroutines await anything, so concurrent requests cannot
    interleave inside an operation.
    """

    def __init__(self):
        self._todos: List[Record] = []
        self._last_id = 0

    def _next_id(self) -> str:
        # Millisecond timestamp, bumped so ids stay strictly increasing.
        now = time.time_ns() // 1_000_000
        self._last_id = max(now, self._last_id + 1)
        return str(self._last_id)

    async def find_all(self) -> List[Record]:
        return [dict(todo) for todo in self._todos]

    async def insert(self, record: Record) -> Record:
        todo = dict(record)
        todo["id"] = self._next_id()
        self._todos.append(todo)
        return dict(todo)

    async def find_by_id(self, todo_id: str) -> Optional[Record]:
        for todo in self._todos:
            if todo["id"] == str(todo_id):
                return dict(todo)
        return None

    async def delete_by_id(self, todo_id: str) -> bool:
        before = len(self._todos)
        self._todos = [todo for todo in self._todos if todo["id"] != str(todo_id)]
        return len(self._todos) != before

    async def update_by_id(self, todo_id: str, fields: Record) -> Optional[Record]:
        for index, todo in enumerate(self._todos):
            if todo["id"] == str(todo_id):
                updated = {**todo, **fields, "id": todo["id"]}
                self._todos[index] = updated
                return dict(updated)
        return None
