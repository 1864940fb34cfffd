from pydantic import BaseModel
from typing import Any, Optional


class TodoUpdate(BaseModel):
    task: Optional[Any] = None
    completed: Optional[Any] = None
    priority: Optional[Any] = None
