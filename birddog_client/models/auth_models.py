"""Models related to authentication and the access-token request."""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, SecretStr


class Credentials(BaseModel):
    """API key plus the BirdDog login used to obtain an access token."""

    api_key: str
    user_name: str
    password: SecretStr

    def to_token_request(self) -> Dict[str, str]:
        """Body of the accesstoken call; the only place the password is revealed."""

        return {
            "apiKey": self.api_key,
            "userName": self.user_name,
            "password": self.password.get_secret_value(),
        }
