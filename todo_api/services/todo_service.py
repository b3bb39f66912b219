import logging
from typing import Optional

from todo_api.errors import NotFound, ValidationError
from todo_api.repositories.project_repo import ProjectRepository
from todo_api.repositories.todo_repo import TodoRepository
from todo_api.schemas.todo import TodoCreate, TodoUpdate
from todo_api.store import ResourceStore

logger = logging.getLogger(__name__)


class TodoService:
    def __init__(self):
        self.repo = TodoRepository()
        self.projects = ProjectRepository()

    async def _require_project(self, store: ResourceStore, project_id: str):
        if not await self.projects.exists(store, project_id):
            raise NotFound()

    async def create_todo(self, store: ResourceStore, project_id: str, body: Optional[dict]):
        await self._require_project(store, project_id)
        todo_in = TodoCreate.model_validate(body or {})
        if not todo_in.title:
            raise ValidationError("Missing todo title")
        todo = await self.repo.create(store, project_id, todo_in)
        logger.info("Created todo %s in project %s", todo.id, project_id)
        return todo

    async def list_project_todos(self, store: ResourceStore, project_id: str):
        await self._require_project(store, project_id)
        return await self.repo.list(store, project_id=project_id)

    async def list_todos(self, store: ResourceStore):
        return await self.repo.list(store)

    async def get_todo(self, store: ResourceStore, todo_id: str):
        todo = await self.repo.get(store, todo_id)
        if todo is None:
            raise NotFound()
        return todo

    async def update_todo(self, store: ResourceStore, todo_id: str, body: Optional[dict]):
        changes = TodoUpdate.model_validate(body or {}).changes()
        todo = await self.repo.update(store, todo_id, changes)
        if todo is None:
            raise NotFound()
        return todo

    async def delete_todo(self, store: ResourceStore, todo_id: str):
        if not await self.repo.delete(store, todo_id):
            raise NotFound()
        logger.info("Deleted todo %s", todo_id)
