"""Department panel authentication with JWT bearer tokens."""

import secrets
import string
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status
from jose import JWTError, jwt
from passlib.context import CryptContext

from wayfinder.auth.admin import bearer_token
from wayfinder.config import Settings, get_settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

_ID_ALPHABET = string.ascii_uppercase + string.digits
_PASSWORD_ALPHABET = string.ascii_letters + string.digits + "_-"


class DepartmentTokenError(Exception):
    """Token is malformed, expired or signed with another secret."""


@dataclass(frozen=True)
class DepartmentToken:
    """Claims carried by a department token."""

    department_id: str
    department_slug: str


def generate_department_id() -> str:
    return "DEPT-" + "".join(secrets.choice(_ID_ALPHABET) for _ in range(8))


def generate_password(length: int = 12) -> str:
    """Random one-time department password, shown to the head admin once."""
    return "".join(secrets.choice(_PASSWORD_ALPHABET) for _ in range(length))


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False


def create_department_token(settings: Settings, department_id: str, department_slug: str) -> str:
    expire = datetime.now(UTC) + timedelta(hours=settings.jwt_expire_hours)
    claims = {"departmentId": department_id, "departmentSlug": department_slug, "exp": expire}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_department_token(settings: Settings, token: str) -> DepartmentToken:
    """Verify a token and return its claims.

    Raises:
        DepartmentTokenError: If the token cannot be verified.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise DepartmentTokenError(str(e)) from e

    department_id = payload.get("departmentId")
    department_slug = payload.get("departmentSlug")
    if not department_id or not department_slug:
        raise DepartmentTokenError("Token is missing department claims")
    return DepartmentToken(department_id=department_id, department_slug=department_slug)


async def require_department(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> DepartmentToken:
    """FastAPI dependency returning the authenticated department."""
    token = bearer_token(authorization)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized: Department authentication required",
        )
    try:
        return decode_department_token(settings, token)
    except DepartmentTokenError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: Invalid or expired token",
        )


async def require_department_access(
    department_id: UUID,
    auth: DepartmentToken = Depends(require_department),
) -> DepartmentToken:
    """Allow a department to reach only its own ``/{department_id}`` routes."""
    if auth.department_id != str(department_id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: Cannot access other department's data",
        )
    return auth
