from typing import Any, Optional

from todo_api.models.todo import Todo
from todo_api.schemas.todo import TodoCreate
from todo_api.store import ResourceStore, utc_timestamp


class TodoRepository:
    async def create(self, store: ResourceStore, project_id: str, todo_in: TodoCreate) -> Todo:
        with store.lock:
            todo = Todo(
                id=store.next_todo_id(),
                project_id=project_id,
                created_at=utc_timestamp(),
                **todo_in.model_dump(),
            )
            store.todos[todo.id] = todo
        return todo

    async def list(self, store: ResourceStore, project_id: Optional[str] = None) -> list[Todo]:
        with store.lock:
            todos = list(store.todos.values())
        if project_id is None:
            return todos
        return [t for t in todos if t.project_id == project_id]

    async def get(self, store: ResourceStore, todo_id: str) -> Optional[Todo]:
        return store.todos.get(todo_id)

    async def update(self, store: ResourceStore, todo_id: str, changes: dict[str, Any]) -> Optional[Todo]:
        # id, project_id and created_at are fixed at creation
        changes = {k: v for k, v in changes.items() if k in ("title", "completed", "due_date")}
        with store.lock:
            current = store.todos.get(todo_id)
            if current is None:
                return None
            updated = current.model_copy(update=changes)
            store.todos[todo_id] = updated
        return updated

    async def delete(self, store: ResourceStore, todo_id: str) -> bool:
        with store.lock:
            return store.todos.pop(todo_id, None) is not None
