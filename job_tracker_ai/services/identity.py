"""Identity provider: resolve the authenticated user from the incoming request."""

from typing import Optional

from fastapi import Request
from pydantic import BaseModel

from job_tracker_ai.config import AUTH_HEADER
from job_tracker_ai.errors import AuthenticationError


class UserHandle(BaseModel):
    """Opaque authenticated-user handle."""

    external_id: str


def current_user(request: Request) -> Optional[UserHandle]:
    """User named by the auth header, or None when the request is anonymous."""
    external_id = (request.headers.get(AUTH_HEADER) or "").strip()
    if not external_id:
        return None
    return UserHandle(external_id=external_id)


def require_user(request: Request) -> UserHandle:
    """FastAPI dependency; anonymous requests raise AuthenticationError (401)."""
    user = current_user(request)
    if user is None:
        raise AuthenticationError("Unauthorized")
    return user
