#!/usr/bin/env python
# Authentication service handling login and token management
import time
from typing import Dict, Any

from atlas_client.api.base_service import BaseService, APIError
from atlas_client.api.world_service import WorldService
from atlas_client.utils.config import config
from atlas_client.ui.console import show_error

# Saved sessions older than this are not reused
AUTO_LOGIN_MAX_AGE = 7 * 24 * 60 * 60


class AuthService(BaseService):
    """
    Service for authentication-related API operations.
    
    Every change of identity re-opens the current world so the gate runs
    again for the new viewer.
    """
    
    def _reopen_world(self):
        WorldService(state=self.state, session=self.session, api_url=self.api_url).reopen()

    def _remember(self, response: Dict[str, Any]):
        self.state.set_auth(response)
        config.save_auth({
            "access_token": self.state.access_token,
            "refresh_token": self.state.refresh_token,
            "user_id": self.state.viewer.user_id,
            "email": self.state.viewer.email,
            "timestamp": time.time()
        })
        self._reopen_world()
    
    def login(self, email: str, password: str) -> bool:
        """Log in with email and password"""
        try:
            response = self.post("/auth/login", {"email": email, "password": password})
        except APIError as e:
            show_error(f"Login failed: {e.detail}")
            return False
        
        self._remember(response)
        return True
    
    def logout(self) -> bool:
        """Log out current user and clear tokens"""
        if not self.state.is_authenticated():
            return True  # Already logged out
        
        try:
            self.post("/auth/logout", {})
        except APIError as e:
            # Still clear local auth even if API call fails
            show_error(f"Logout failed: {e.detail}")
        
        self.state.clear_auth()
        config.clear_auth()
        self._reopen_world()
        return True
    
    def refresh_token(self) -> bool:
        """Refresh the access token using the refresh token"""
        if not self.state.refresh_token:
            return False
        
        try:
            response = self.post("/auth/refresh", {"refresh_token": self.state.refresh_token})
        except APIError as e:
            show_error(f"Token refresh failed: {e.detail}")
            return False
        
        self._remember(response)
        return True
    
    def try_auto_login(self) -> bool:
        """Try to login using saved credentials"""
        auth_data = config.load_auth()
        
        if not auth_data or "refresh_token" not in auth_data:
            return False
        
        if time.time() - auth_data.get("timestamp", 0) > AUTO_LOGIN_MAX_AGE:
            return False
        
        self.state.refresh_token = auth_data.get("refresh_token")
        return self.refresh_token()
