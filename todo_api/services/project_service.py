import logging
from typing import Optional

from todo_api.errors import NotFound, ValidationError
from todo_api.repositories.project_repo import ProjectRepository
from todo_api.schemas.project import ProjectIn
from todo_api.store import ResourceStore

logger = logging.getLogger(__name__)


def _project_name(body: Optional[dict]) -> str:
    project_in = ProjectIn.model_validate(body or {})
    if not project_in.name:
        raise ValidationError("Missing project name")
    return project_in.name


class ProjectService:
    def __init__(self):
        self.repo = ProjectRepository()

    async def create_project(self, store: ResourceStore, body: Optional[dict]):
        project = await self.repo.create(store, _project_name(body))
        logger.info("Created project %s", project.id)
        return project

    async def list_projects(self, store: ResourceStore):
        return await self.repo.list(store)

    async def get_project(self, store: ResourceStore, project_id: str):
        project = await self.repo.get(store, project_id)
        if project is None:
            raise NotFound()
        return project

    async def update_project(self, store: ResourceStore, project_id: str, body: Optional[dict]):
        if not await self.repo.exists(store, project_id):
            raise NotFound()
        project = await self.repo.update(store, project_id, _project_name(body))
        if project is None:
            raise NotFound()
        return project

    async def delete_project(self, store: ResourceStore, project_id: str):
        if not await self.repo.delete(store, project_id):
            raise NotFound()
        # todos of the project are left in place
        logger.info("Deleted project %s", project_id)
