"""Pytest configuration - a recording session so no test touches the network."""

import json
from typing import Any

import pytest
import requests

from birddog_client import BirdDogClient, Credentials, HttpClient


def make_response(payload: Any = None, status: int = 200, text: str | None = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    body = text if text is not None else json.dumps(payload)
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    return response


class RecordingSession:
    """Stands in for requests.Session: records each call and replays queued responses."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.responses: list[Any] = []
        self.closed = False

    def queue(self, payload: Any = None, status: int = 200, text: str | None = None) -> None:
        self.responses.append(make_response(payload, status, text))

    def queue_error(self, exc: Exception) -> None:
        self.responses.append(exc)

    def request(self, method, url, headers=None, json=None, timeout=None):
        self.calls.append({"method": method, "url": url, "headers": headers or {}, "json": json, "timeout": timeout})
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        result.url = url
        return result

    def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def session() -> RecordingSession:
    return RecordingSession()


@pytest.fixture
def http_client(session) -> HttpClient:
    return HttpClient(session=session)


@pytest.fixture
def client(http_client) -> BirdDogClient:
    return BirdDogClient(http_client)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(api_key="key-123", user_name="admin@example.com", password="s3cret!")
