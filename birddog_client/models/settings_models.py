"""Connection settings shared by every API wrapper."""

from __future__ import annotations

import ssl

from pydantic import BaseModel

from ..utils.http_client import DEFAULT_API_VERSION, DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT


class ClientSettings(BaseModel):
    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    timeout: int = DEFAULT_TIMEOUT
    min_tls_version: ssl.TLSVersion = ssl.TLSVersion.TLSv1_2
    user_agent: str = DEFAULT_USER_AGENT
