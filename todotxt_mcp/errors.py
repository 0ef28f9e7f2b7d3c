"""Error types raised by the task engine."""


class TaskNotFoundError(LookupError):
    """Raised when a 1-based task id does not address a task in the list."""

    def __init__(self, task_id: int, count: int) -> None:
        super().__init__(f"Task {task_id} not found ({count} task(s) in list)")
        self.task_id = task_id
        self.count = count
