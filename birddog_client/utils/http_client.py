"""Shared HTTP helpers for BirdDog HR API endpoints."""

from __future__ import annotations

import logging
import ssl
from typing import Any, Dict, Optional, Sequence, Tuple
from urllib.parse import urlencode

import requests
from requests.adapters import HTTPAdapter

DEFAULT_BASE_URL = "https://api.birddoghr.com"
DEFAULT_API_VERSION = "v2"
DEFAULT_TIMEOUT = 30
DEFAULT_USER_AGENT = "birddog-client/0.1.0"
TOKEN_SCHEME = "BDToken"

# Characters sent literally in query strings: indexed names like userName[0],
# e-mail addresses and MM/dd/yyyy dates.
QUERY_SAFE_CHARS = "@[]/"

API_HEADERS_TEMPLATE: Dict[str, str] = {
    "accept": "application/json",
    "content-type": "application/json",
}

QueryPairs = Sequence[Tuple[str, Any]]


class BirdDogError(Exception):
    """Base class for every error raised by the BirdDog client."""


class TransportError(BirdDogError):
    """Raised when the request never produced an HTTP response (network, TLS, timeout)."""


class HttpError(BirdDogError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str = "", url: str = "") -> None:
        super().__init__(status_code, body, url)
        self.status_code = status_code
        self.body = body
        self.url = url

    def __str__(self) -> str:
        return f"BirdDog API returned HTTP {self.status_code} for {self.url}"


class AuthenticationError(HttpError):
    """Raised when the BirdDog API rejects the credentials or the access token."""


class DecodeError(BirdDogError):
    """Raised when a response body is not the JSON the caller expects."""


class TLSAdapter(HTTPAdapter):
    """HTTPS adapter that refuses protocol versions older than ``min_version``."""

    def __init__(self, min_version: ssl.TLSVersion = ssl.TLSVersion.TLSv1_2, **kwargs: Any) -> None:
        # HTTPAdapter.__init__ builds the pool manager, so this must be set first.
        self.min_version = min_version
        super().__init__(**kwargs)

    def _ssl_context(self) -> ssl.SSLContext:
        context = ssl.create_default_context()
        context.minimum_version = self.min_version
        return context

    def init_poolmanager(self, *args: Any, **kwargs: Any) -> None:
        kwargs["ssl_context"] = self._ssl_context()
        super().init_poolmanager(*args, **kwargs)

    def proxy_manager_for(self, proxy: str, **proxy_kwargs: Any) -> Any:
        # Requests routed through HTTPS_PROXY never touch the direct pool manager.
        proxy_kwargs["ssl_context"] = self._ssl_context()
        return super().proxy_manager_for(proxy, **proxy_kwargs)


def encode_query(pairs: QueryPairs) -> str:
    """Percent-encodes ordered ``(key, value)`` pairs, keeping repeated keys in order."""

    return urlencode([(key, str(value)) for key, value in pairs], safe=QUERY_SAFE_CHARS)


def indexed_params(name: str, values: Sequence[str]) -> list[Tuple[str, str]]:
    """Expands ``values`` into ``name[0]``, ``name[1]``, ... pairs in input order."""

    return [(f"{name}[{index}]", value) for index, value in enumerate(values)]


def extract_field(data: Any, field: str) -> Any:
    """Returns ``data[field]`` or raises :class:`DecodeError`."""

    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object containing '{field}', got {type(data).__name__}")
    if field not in data:
        raise DecodeError(f"Response is missing the '{field}' field")
    return data[field]


class HttpClient:
    """Builds versioned BirdDog URLs and performs JSON requests over a TLS 1.2+ session."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = DEFAULT_API_VERSION,
        timeout: int = DEFAULT_TIMEOUT,
        min_tls_version: ssl.TLSVersion = ssl.TLSVersion.TLSv1_2,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_version = api_version.strip("/")
        self.timeout = timeout
        self.min_tls_version = min_tls_version

        if session is None:
            session = requests.Session()
            session.mount("https://", TLSAdapter(min_version=min_tls_version))
        self._session = session

        self._api_headers = API_HEADERS_TEMPLATE.copy()
        self._api_headers["user-agent"] = user_agent

    @property
    def session(self) -> requests.Session:
        return self._session

    def build_url(self, path: str, params: Optional[QueryPairs] = None) -> str:
        url = f"{self.base_url}/{self.api_version}/{path.lstrip('/')}"
        if params:
            url = f"{url}?{encode_query(params)}"
        return url

    def get_json(self, path: str, access_token: str, params: Optional[QueryPairs] = None) -> Any:
        """GET an authenticated endpoint and return the decoded JSON body."""

        headers = {"authorization": f"{TOKEN_SCHEME} {access_token}"}
        return self._request("GET", self.build_url(path, params), headers)

    def post_json(self, path: str, payload: Dict[str, Any]) -> Any:
        """POST ``payload`` as JSON to an unauthenticated endpoint."""

        return self._request("POST", self.build_url(path), {}, payload)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(
        self,
        method: str,
        url: str,
        extra_headers: Dict[str, str],
        payload: Optional[Dict[str, Any]] = None,
    ) -> Any:
        headers = {**self._api_headers, **extra_headers}
        logging.debug("%s %s", method, url)
        try:
            response = self._session.request(method, url, headers=headers, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            logging.error("HTTP %s to %s failed: %s", method, url, exc)
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        status = response.status_code
        if status in {401, 403}:
            logging.error("Authentication failed (status %s) for %s", status, url)
            raise AuthenticationError(status, response.text, url)
        if not 200 <= status < 300:
            logging.error("API request to %s failed with status %s", url, status)
            raise HttpError(status, response.text, url)

        try:
            return response.json()
        except ValueError as exc:
            logging.error("Response from %s is not valid JSON: %s", url, exc)
            raise DecodeError(f"Invalid JSON response from {url}: {exc}") from exc
