import base64
import binascii
import hmac
import logging
from typing import Optional

import jwt
from fastapi.security.utils import get_authorization_scheme_param

from todo_api import config
from todo_api.errors import InvalidCredentials, InvalidOrExpiredToken, MissingCredentials
from todo_api.schemas.auth import LoginResponse
from todo_api.tokens import TokenRegistry

logger = logging.getLogger(__name__)


def parse_basic_credentials(authorization: Optional[str]) -> tuple[str, str]:
    """Split a `Basic base64(user:password)` header into (user, password)."""
    scheme, param = get_authorization_scheme_param(authorization)
    encoded = param.strip()
    if scheme.lower() != "basic" or not encoded:
        raise MissingCredentials()
    try:
        decoded = base64.b64decode(encoded, validate=True).decode("utf-8")
    except (ValueError, UnicodeDecodeError, binascii.Error):
        raise MissingCredentials() from None
    username, sep, password = decoded.partition(":")
    if not sep:
        raise MissingCredentials()
    return username, password


def parse_bearer_token(authorization: Optional[str]) -> str:
    scheme, param = get_authorization_scheme_param(authorization)
    token = param.strip()
    if scheme.lower() != "bearer" or not token:
        raise MissingCredentials()
    return token


class AuthService:
    def __init__(
        self,
        username: str = config.API_USERNAME,
        password: str = config.API_PASSWORD,
        secret: str = config.JWT_SECRET,
        algorithm: str = config.JWT_ALGORITHM,
        role: str = config.TOKEN_ROLE,
        ttl_seconds: int = config.TOKEN_TTL_SECONDS,
    ):
        self.username = username
        self.password = password
        self.secret = secret
        self.algorithm = algorithm
        self.role = role
        self.ttl_seconds = ttl_seconds

    def _matches(self, username: str, password: str) -> bool:
        user_ok = hmac.compare_digest(username.encode(), self.username.encode())
        password_ok = hmac.compare_digest(password.encode(), self.password.encode())
        return user_ok and password_ok

    def issue_token(self, registry: TokenRegistry, subject: str) -> LoginResponse:
        now_ms = registry.now_ms()
        issued_at = now_ms // 1000
        payload = {
            "sub": subject,
            "role": self.role,
            "iat": issued_at,
            "exp": issued_at + self.ttl_seconds,
        }
        token = jwt.encode(payload, self.secret, algorithm=self.algorithm)
        exp_ms = now_ms + self.ttl_seconds * 1000
        registry.record(token, exp_ms)
        return LoginResponse(token=token, exp_ms=exp_ms)

    async def login(self, registry: TokenRegistry, authorization: Optional[str]) -> LoginResponse:
        username, password = parse_basic_credentials(authorization)
        if not self._matches(username, password):
            logger.warning("Rejected login for user %r", username)
            raise InvalidCredentials()
        response = self.issue_token(registry, username)
        logger.info("Issued token for user %r", username)
        return response

    async def authorize(self, registry: TokenRegistry, authorization: Optional[str]) -> None:
        token = parse_bearer_token(authorization)
        if not registry.is_valid(token):
            logger.warning("Rejected unknown or expired bearer token")
            raise InvalidOrExpiredToken()
