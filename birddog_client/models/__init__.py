"""Data models for credentials and client settings."""

from .auth_models import Credentials
from .settings_models import ClientSettings

__all__ = ["Credentials", "ClientSettings"]
