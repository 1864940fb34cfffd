class TodoError(Exception):
    """Base for errors that map onto an HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def detail(self) -> str:
        return self.message


class ValidationError(TodoError):
    status_code = 400


class NotFoundError(TodoError):
    status_code = 404

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class StoreError(TodoError):
    """The storage backend failed. The cause is logged, never sent to clients."""

    status_code = 500

    @property
    def detail(self) -> str:
        return "Internal Server Error"
