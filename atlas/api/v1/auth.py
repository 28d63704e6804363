# atlas/api/v1/auth.py
from fastapi import APIRouter, Depends, status

from atlas import schemas
from atlas.api.auth import get_auth_service, get_current_user
from atlas.services.auth_service import AuthService
from atlas.services.visibility import Viewer

router = APIRouter()


@router.post("/register", response_model=schemas.TokenResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    request: schemas.SignUpRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Register a new user with Supabase Auth
    
    Returns a token response including access_token and refresh_token
    """
    return auth_service.sign_up(email=request.email, password=request.password)


@router.post("/login", response_model=schemas.TokenResponse)
async def login_user(
    request: schemas.SignInRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Sign in an existing user
    
    Returns a token response including access_token and refresh_token
    """
    return auth_service.sign_in(email=request.email, password=request.password)


@router.post("/refresh", response_model=schemas.TokenResponse)
async def refresh_token(
    request: schemas.RefreshTokenRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Refresh an authentication token
    """
    return auth_service.refresh_token(request.refresh_token)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout_user(
    current_user: Viewer = Depends(get_current_user),
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Sign out and invalidate the session
    """
    auth_service.sign_out()
    return None
