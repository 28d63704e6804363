# atlas/services/auth_service.py
from typing import Optional, Dict, Any
from fastapi import HTTPException, status
import jwt
import logging

from atlas.database import get_supabase
from atlas.config import get_settings
from atlas.services.visibility import Viewer

logger = logging.getLogger(__name__)


def _token_payload(auth_response, email: Optional[str] = None) -> Dict[str, Any]:
    session = auth_response.session
    if session is None:
        # Sign-up with email confirmation enabled returns no session yet
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No session issued; confirm the account email before signing in"
        )
    return {
        "access_token": session.access_token,
        "refresh_token": session.refresh_token,
        "user_id": auth_response.user.id,
        "email": email or auth_response.user.email
    }


class AuthService:
    """Service for handling authentication using Supabase.

    Users live entirely in the auth platform; locally a user is just the
    `sub` claim of a verified access token.
    """

    def __init__(self):
        self.settings = get_settings()

    def sign_up(self, email: str, password: str) -> Dict[str, Any]:
        """
        Register a new user with Supabase Auth.
        """
        try:
            auth_response = get_supabase().auth.sign_up({
                "email": email,
                "password": password
            })
        except Exception as e:
            logger.warning(f"Sign-up failed for {email}: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Registration failed: {str(e)}"
            )
        return _token_payload(auth_response, email)

    def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        """
        Sign in a user with Supabase Auth.
        """
        try:
            auth_response = get_supabase().auth.sign_in_with_password({
                "email": email,
                "password": password
            })
        except Exception as e:
            logger.warning(f"Sign-in failed for {email}: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=f"Authentication failed: {str(e)}"
            )
        return _token_payload(auth_response, email)

    def refresh_token(self, refresh_token: str) -> Dict[str, Any]:
        """
        Refresh an authentication token using Supabase Auth.
        """
        try:
            auth_response = get_supabase().auth.refresh_session(refresh_token)
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=f"Token refresh failed: {str(e)}"
            )
        return _token_payload(auth_response)

    def sign_out(self) -> bool:
        """
        Sign out the current session.
        """
        try:
            get_supabase().auth.sign_out()
            return True
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Sign out failed: {str(e)}"
            )

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify a JWT token using the Supabase JWT secret and return its payload.
        """
        try:
            payload = jwt.decode(
                token,
                self.settings.SUPABASE_JWT_SECRET,
                algorithms=["HS256"],
                audience="authenticated"
            )
        except jwt.PyJWTError:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid token",
                headers={"WWW-Authenticate": "Bearer"}
            )

        if not payload.get("sub"):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid token: missing subject",
                headers={"WWW-Authenticate": "Bearer"}
            )

        return payload

    def get_viewer(self, token: str) -> Viewer:
        """Build the viewer identity carried by an access token."""
        payload = self.verify_token(token)
        return Viewer(user_id=payload["sub"], email=payload.get("email"))
