from typing import Optional

from fastapi import APIRouter, Depends, Header

from todo_api.dependencies import auth_service
from todo_api.schemas.auth import LoginResponse
from todo_api.tokens import TokenRegistry, get_token_registry

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(
    authorization: Optional[str] = Header(None),
    registry: TokenRegistry = Depends(get_token_registry),
):
    return await auth_service.login(registry, authorization)
