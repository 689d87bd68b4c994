"""Request dependencies shared by the routes."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

bearer = HTTPBearer(auto_error=False)


async def get_bearer_token(
    cred: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> str | None:
    """Token from an ``Authorization: Bearer`` header, or None.

    The token is not checked here; use cases resolve it and raise
    ``UnauthorizedError`` where a session is required.
    """
    if cred is None:
        return None
    return cred.credentials
