from datetime import datetime
from pydantic import BaseModel
from typing import Optional, Literal
Priority = Literal["low", "medium", "high"]
class TodoResponse(BaseModel):
    id: str
    task: str
    completed: bool = False
    priority: Priority = "medium"
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None
