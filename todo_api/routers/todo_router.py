from typing import Optional

from fastapi import APIRouter, Depends

from todo_api.dependencies import read_json_body
from todo_api.models.todo import Todo
from todo_api.services.todo_service import TodoService
from todo_api.store import ResourceStore, get_store

# mounted under /projects
project_todos_router = APIRouter()
# mounted under /todos
router = APIRouter()
service = TodoService()


@project_todos_router.get("/{project_id}/todos", response_model=list[Todo])
async def list_project_todos(project_id: str, store: ResourceStore = Depends(get_store)):
    return await service.list_project_todos(store, project_id)


@project_todos_router.post("/{project_id}/todos", response_model=Todo, status_code=201)
async def create_todo(
    project_id: str,
    body: Optional[dict] = Depends(read_json_body),
    store: ResourceStore = Depends(get_store),
):
    return await service.create_todo(store, project_id, body)


@router.get("", response_model=list[Todo])
async def list_todos(store: ResourceStore = Depends(get_store)):
    return await service.list_todos(store)


@router.get("/{todo_id}", response_model=Todo)
async def get_todo(todo_id: str, store: ResourceStore = Depends(get_store)):
    return await service.get_todo(store, todo_id)


@router.put("/{todo_id}", response_model=Todo)
async def update_todo(
    todo_id: str,
    body: Optional[dict] = Depends(read_json_body),
    store: ResourceStore = Depends(get_store),
):
    return await service.update_todo(store, todo_id, body)


@router.delete("/{todo_id}", status_code=204)
async def delete_todo(todo_id: str, store: ResourceStore = Depends(get_store)):
    await service.delete_todo(store, todo_id)
