#!/usr/bin/env python
# Configuration for the Campaign Atlas client
import os
import json
from typing import Dict, Any, Optional


class Config:
    """
    Client settings and the saved session, kept as two JSON files in the
    config directory (ATLAS_CONFIG_DIR, or ~/.atlas).
    """

    DEFAULT_API_URL = "http://localhost:8000/api/v1"
    DEFAULT_APP_URL = "http://localhost:5173"

    def __init__(self, config_dir: Optional[str] = None):
        self.api_url = self.DEFAULT_API_URL
        self.app_url = self.DEFAULT_APP_URL

        self.config_dir = config_dir or os.environ.get("ATLAS_CONFIG_DIR") or os.path.expanduser("~/.atlas")
        self.config_file = os.path.join(self.config_dir, "config.json")
        self.auth_file = os.path.join(self.config_dir, "auth.json")
        os.makedirs(self.config_dir, exist_ok=True)

        self.load_config()

    def _read(self, path: str) -> Dict[str, Any]:
        if not os.path.exists(path):
            return {}
        try:
            with open(path, 'r') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            print(f"Error reading {path}: {e}")
            return {}

    def _write(self, path: str, data: Dict[str, Any]):
        try:
            with open(path, 'w') as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            print(f"Error writing {path}: {e}")

    def load_config(self):
        data = self._read(self.config_file)
        self.api_url = data.get('api_url', self.DEFAULT_API_URL)
        self.app_url = data.get('app_url', self.DEFAULT_APP_URL)

    def save_config(self):
        self._write(self.config_file, {'api_url': self.api_url, 'app_url': self.app_url})

    def load_auth(self) -> Dict[str, Any]:
        """Saved session for auto-login, or {}"""
        return self._read(self.auth_file)

    def save_auth(self, auth_data: Dict[str, Any]):
        self._write(self.auth_file, auth_data)

    def clear_auth(self):
        if os.path.exists(self.auth_file):
            os.remove(self.auth_file)

    def apply_args(self, args):
        """Command line URLs win over the saved ones and are remembered"""
        if args.api_url:
            self.api_url = args.api_url
        if args.app_url:
            self.app_url = args.app_url
        self.save_config()


# Global config instance
config = Config()
