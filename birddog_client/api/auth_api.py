"""Access-token acquisition for the BirdDog HR API."""

from __future__ import annotations

import logging

from ..models import Credentials
from ..utils.http_client import AuthenticationError, HttpClient, extract_field

ACCESS_TOKEN_PATH = "accesstoken"


class AuthAPI:
    """Exchanges an API key and login for a bearer access token."""

    def __init__(self, http_client: HttpClient) -> None:
        self._client = http_client

    def acquire_access_token(self, credentials: Credentials) -> str:
        """POST the credentials and return the ``token`` field verbatim.

        The token is not cached or refreshed; callers hold on to it and pass
        it to every subsequent call.
        """

        try:
            data = self._client.post_json(ACCESS_TOKEN_PATH, credentials.to_token_request())
        except AuthenticationError:
            raise
        except Exception as exc:
            logging.error("Access token request failed: %s", exc)
            raise

        token = extract_field(data, "token")
        logging.info("Acquired BirdDog access token for %s", credentials.user_name)
        return token
