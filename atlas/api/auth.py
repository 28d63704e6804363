# atlas/api/auth.py
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional

from atlas.services.auth_service import AuthService
from atlas.services.visibility import Viewer

# Guests may browse public worlds, so a missing header is not an error here
security = HTTPBearer(auto_error=False)


def get_auth_service() -> AuthService:
    return AuthService()


async def get_viewer(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> Viewer:
    """
    Dependency resolving the viewer for the current request.
    No token means an anonymous viewer; a bad token is rejected.
    """
    if credentials is None:
        return Viewer.anonymous()
    return auth_service.get_viewer(credentials.credentials)


async def get_current_user(viewer: Viewer = Depends(get_viewer)) -> Viewer:
    """
    Dependency requiring a signed-in viewer.
    """
    if not viewer.is_authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"}
        )
    return viewer
