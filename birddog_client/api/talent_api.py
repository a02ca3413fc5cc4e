"""API client for talent-module users."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..utils.http_client import HttpClient, extract_field

TALENT_USERS_PATH = "TalentUsers"
TALENT_USER_PATH = "TalentUser"


class TalentAPI:
    """Fetches every talent user, or a single one by user name."""

    def __init__(self, http_client: HttpClient) -> None:
        self._client = http_client

    def list_talent_users(self, access_token: str, user_name: Optional[str] = None) -> Any:
        if user_name is None:
            path, params = TALENT_USERS_PATH, None
        else:
            path, params = TALENT_USER_PATH, [("userName", user_name)]

        try:
            data = self._client.get_json(path, access_token, params)
        except Exception as exc:
            logging.error("Failed to fetch talent users from %s: %s", path, exc)
            raise
        return extract_field(data, "TalentUsers")
