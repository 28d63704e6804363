#!/usr/bin/env python
# Base service for API communication
import requests
from typing import Dict, Any, Optional

from atlas_client.utils.config import config
from atlas_client.campaign.state import AtlasState, atlas_state


class APIError(Exception):
    """Exception raised for API errors"""
    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"API Error ({status_code}): {detail}")


class BaseService:
    """Base class for API services"""
    
    def __init__(self, state: Optional[AtlasState] = None, session=None, api_url: Optional[str] = None):
        self.state = state or atlas_state
        self.session = session or requests.Session()
        self.api_url = api_url or config.api_url
    
    def _get_headers(self) -> Dict[str, str]:
        """Get common headers for API requests"""
        headers = {
            "Content-Type": "application/json"
        }
        
        if self.state.access_token:
            headers["Authorization"] = f"Bearer {self.state.access_token}"
            
        return headers
    
    def _handle_response(self, response) -> Any:
        """Process API response and handle errors"""
        if 200 <= response.status_code < 300:
            if response.status_code == 204:  # No content
                return {}
                
            try:
                return response.json()
            except ValueError:
                return {"message": response.text}
        else:
            try:
                detail = response.json().get("detail", "Unknown error")
            except (ValueError, AttributeError):
                detail = response.text or "Unknown error"
                
            raise APIError(response.status_code, str(detail))
    
    def request(self, method: str, endpoint: str, data: Optional[Dict[str, Any]] = None,
                params: Optional[Dict[str, Any]] = None) -> Any:
        """Make a request to the API"""
        url = f"{self.api_url}{endpoint}"
        
        try:
            response = self.session.request(
                method, url, headers=self._get_headers(), json=data, params=params
            )
        except Exception as e:
            raise APIError(503, f"Request failed: {str(e)}")
        
        return self._handle_response(response)
    
    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Make GET request to API"""
        return self.request("GET", endpoint, params=params)
    
    def post(self, endpoint: str, data: Dict[str, Any]) -> Any:
        """Make POST request to API"""
        return self.request("POST", endpoint, data=data)
    
    def put(self, endpoint: str, data: Dict[str, Any]) -> Any:
        """Make PUT request to API"""
        return self.request("PUT", endpoint, data=data)
    
    def patch(self, endpoint: str, data: Dict[str, Any]) -> Any:
        """Make PATCH request to API"""
        return self.request("PATCH", endpoint, data=data)
    
    def delete(self, endpoint: str) -> Any:
        """Make DELETE request to API"""
        return self.request("DELETE", endpoint)
