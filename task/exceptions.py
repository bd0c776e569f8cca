class TaskServiceError(Exception):
    """Base class for errors raised by the task service."""


class InvalidTaskIdError(TaskServiceError, ValueError):
    def __init__(self, task_id):
        self.task_id = task_id
        super().__init__(f"Invalid task id: {task_id!r}")


class TaskAuthorizationError(TaskServiceError):
    """The caller's role or ownership does not allow the operation."""
    default_message = 'Not authorized to access this task'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class TaskAccessDenied(TaskAuthorizationError):
    default_message = 'Not authorized to access this task'


class TaskUpdateDenied(TaskAuthorizationError):
    default_message = 'Not authorized to update this task'


class TaskDeleteDenied(TaskAuthorizationError):
    default_message = 'Not authorized to delete this task'
