from typing import Optional

from fastapi import APIRouter, Depends

from todo_api.dependencies import read_json_body
from todo_api.models.project import Project
from todo_api.services.project_service import ProjectService
from todo_api.store import ResourceStore, get_store

router = APIRouter()
service = ProjectService()


@router.get("", response_model=list[Project])
async def list_projects(store: ResourceStore = Depends(get_store)):
    return await service.list_projects(store)


@router.post("", response_model=Project, status_code=201)
async def create_project(
    body: Optional[dict] = Depends(read_json_body),
    store: ResourceStore = Depends(get_store),
):
    return await service.create_project(store, body)


@router.get("/{project_id}", response_model=Project)
async def get_project(project_id: str, store: ResourceStore = Depends(get_store)):
    return await service.get_project(store, project_id)


@router.put("/{project_id}", response_model=Project)
async def update_project(
    project_id: str,
    body: Optional[dict] = Depends(read_json_body),
    store: ResourceStore = Depends(get_store),
):
    return await service.update_project(store, project_id, body)


@router.delete("/{project_id}", status_code=204)
async def delete_project(project_id: str, store: ResourceStore = Depends(get_store)):
    await service.delete_project(store, project_id)
