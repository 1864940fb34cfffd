from typing import Any, Optional
from pydantic import BaseModel


class TodoCreate(BaseModel):
    task: Optional[Any] = None
    priority: Optional[Any] = None
