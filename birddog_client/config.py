"""Environment-driven configuration (``.env`` files are honoured)."""

from __future__ import annotations

import logging
import os

from dotenv import find_dotenv, load_dotenv

from .models import ClientSettings, Credentials
from .utils.http_client import DEFAULT_API_VERSION, DEFAULT_BASE_URL, DEFAULT_TIMEOUT

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _env_str(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value


def _env_int(name: str) -> int | None:
    value = _env_str(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        logging.warning("Ignoring non-integer value for %s: %r", name, value)
        return None


def _load_env_file() -> None:
    # Only the explicit loaders read .env; importing the package must not touch os.environ.
    load_dotenv(find_dotenv(usecwd=True))


def load_settings() -> ClientSettings:
    _load_env_file()
    timeout = _env_int("BIRDDOG_TIMEOUT")
    return ClientSettings(
        base_url=_env_str("BIRDDOG_BASE_URL") or DEFAULT_BASE_URL,
        api_version=_env_str("BIRDDOG_API_VERSION") or DEFAULT_API_VERSION,
        timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
    )


def load_credentials() -> Credentials:
    """Reads BIRDDOG_API_KEY, BIRDDOG_USERNAME and BIRDDOG_PASSWORD."""

    _load_env_file()
    values = {
        "BIRDDOG_API_KEY": _env_str("BIRDDOG_API_KEY"),
        "BIRDDOG_USERNAME": _env_str("BIRDDOG_USERNAME"),
        "BIRDDOG_PASSWORD": _env_str("BIRDDOG_PASSWORD"),
    }
    missing = [name for name, value in values.items() if value is None]
    if missing:
        raise ValueError(f"Missing BirdDog credentials: {', '.join(missing)}")
    return Credentials(
        api_key=values["BIRDDOG_API_KEY"],
        user_name=values["BIRDDOG_USERNAME"],
        password=values["BIRDDOG_PASSWORD"],
    )


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
