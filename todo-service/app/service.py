import logging
import math
from typing import Any, Dict, List, Optional, get_args

from app.errors import NotFoundError, ValidationError
from app.models import Priority
from app.stores import Record, TodoStore

logger = logging.getLogger(__name__)

PRIORITIES = get_args(Priority)
DEFAULT_PRIORITY = "medium"
UPDATABLE_FIELDS = ("task", "completed", "priority")


def truthy(value: Any) -> bool:
    """JavaScript-style truthiness: empty containers are still true."""
    if isinstance(value, float) and math.isnan(value):
        return False
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


def to_text(value: Any) -> Optional[str]:
    """Render a JSON scalar the way JavaScript's String() would.

    Returns None for null, arrays and objects.
    """
    if value is None or isinstance(value, (list, dict)):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def clean_task(value: Any) -> Optional[str]:
    text = to_text(value)
    return text.strip() if text else None


def normalize_priority(value: Any) -> Optional[str]:
    text = to_text(value)
    priority = text.lower() if text is not None else None
    return priority if priority in PRIORITIES else None


class TodoService:
    def __init__(self, store: TodoStore):
        self.store = store

    async def list_todos(self) -> List[Record]:
        return await self.store.find_all()

    async def create_todo(self, task: Any, priority: Any = None) -> Record:
        task = clean_task(task) if truthy(task) else None
        if not task:
            raise ValidationError("task is required")

        # Unknown priorities fall back to the default on create.
        record = {
            "task": task,
            "completed": False,
            "priority": normalize_priority(priority) or DEFAULT_PRIORITY,
        }
        created = await self.store.insert(record)

        # Read back the stored form so backend-applied fields are returned.
        stored = await self.store.find_by_id(created["id"])
        if stored is None:
            logger.warning("Todo %s vanished before it could be read back", created["id"])
            return created
        return stored

    async def delete_todo(self, todo_id: str) -> None:
        if not todo_id or not str(todo_id).strip():
            raise ValidationError("id required")
        if not await self.store.delete_by_id(todo_id):
            raise NotFoundError()

    async def update_todo(self, todo_id: str, fields: Dict[str, Any]) -> Record:
        if not any(name in fields for name in UPDATABLE_FIELDS):
            raise ValidationError("nothing to update")

        update = {}
        if "task" in fields:
            task = clean_task(fields["task"])
            if not task:
                raise ValidationError("task cannot be empty")
            update["task"] = task
        if "completed" in fields:
            update["completed"] = truthy(fields["completed"])
        if "priority" in fields:
            # Unknown priorities are dropped on update, not defaulted.
            priority = normalize_priority(fields["priority"])
            if priority is not None:
                update["priority"] = priority

        if update:
            updated = await self.store.update_by_id(todo_id, update)
        else:
            updated = await self.store.find_by_id(todo_id)
        if updated is None:
            raise NotFoundError()
        return updated
