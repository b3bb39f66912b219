from typing import Optional

from todo_api.models.project import Project
from todo_api.store import ResourceStore, utc_timestamp


class ProjectRepository:
    async def create(self, store: ResourceStore, name: str) -> Project:
        with store.lock:
            project = Project(id=store.next_project_id(), name=name, created_at=utc_timestamp())
            store.projects[project.id] = project
        return project

    async def list(self, store: ResourceStore) -> list[Project]:
        with store.lock:
            return list(store.projects.values())

    async def get(self, store: ResourceStore, project_id: str) -> Optional[Project]:
        return store.projects.get(project_id)

    async def exists(self, store: ResourceStore, project_id: str) -> bool:
        return project_id in store.projects

    async def update(self, store: ResourceStore, project_id: str, name: str) -> Optional[Project]:
        with store.lock:
            current = store.projects.get(project_id)
            if current is None:
                return None
            updated = current.model_copy(update={"name": name})
            store.projects[project_id] = updated
        return updated

    async def delete(self, store: ResourceStore, project_id: str) -> bool:
        with store.lock:
            return store.projects.pop(project_id, None) is not None
