from typing import Optional

from fastapi import Depends, Header, Request

from todo_api.services.auth_service import AuthService
from todo_api.tokens import TokenRegistry, get_token_registry

auth_service = AuthService()


async def require_bearer_token(
    authorization: Optional[str] = Header(None),
    registry: TokenRegistry = Depends(get_token_registry),
) -> None:
    await auth_service.authorize(registry, authorization)


async def read_json_body(request: Request) -> Optional[dict]:
    """JSON object body of the request, or None when it is missing, malformed or not an object."""
    try:
        body = await request.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None
