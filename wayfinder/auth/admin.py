"""Admin panel authentication.

The admin token is the configured admin password itself, sent as a bearer
token. There is no expiry or rotation.
"""

import secrets

from fastapi import Depends, Header, HTTPException, status

from wayfinder.config import Settings, get_settings


def bearer_token(authorization: str | None) -> str | None:
    """Return the token from an ``Authorization: Bearer`` header, if any."""
    if not authorization or not authorization.startswith("Bearer "):
        return None
    return authorization[len("Bearer ") :]


def check_admin_password(settings: Settings, password: str) -> bool:
    return secrets.compare_digest(password.encode(), settings.admin_password.encode())


async def require_admin(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    """FastAPI dependency guarding admin routes."""
    token = bearer_token(authorization)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized: Admin authentication required",
        )
    if not check_admin_password(settings, token):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: Invalid admin credentials",
        )
