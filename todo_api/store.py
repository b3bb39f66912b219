import threading
from datetime import datetime, timezone

from todo_api.models.project import Project
from todo_api.models.todo import Todo


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ResourceStore:
    """
    In-memory home of projects and todos.
    - Each collection has its own counter; ids are never reused, even after delete.
    - Callers hold `lock` around any read-modify-write.
    """

    def __init__(self) -> None:
        self.projects: dict[str, Project] = {}
        self.todos: dict[str, Todo] = {}
        self._project_counter = 1
        self._todo_counter = 1
        self.lock = threading.RLock()

    def next_project_id(self) -> str:
        with self.lock:
            project_id = str(self._project_counter)
            self._project_counter += 1
            return project_id

    def next_todo_id(self) -> str:
        with self.lock:
            todo_id = str(self._todo_counter)
            self._todo_counter += 1
            return todo_id


store = ResourceStore()


def get_store() -> ResourceStore:
    return store
