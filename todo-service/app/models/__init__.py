from app.models.TodoCreate import TodoCreate
from app.models.TodoResponse import Priority, TodoResponse
from app.models.TodoUpdate import TodoUpdate

__all__ = ["Priority", "TodoCreate", "TodoResponse", "TodoUpdate"]
