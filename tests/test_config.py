"""Environment configuration."""

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from birddog_client import config
from birddog_client.config import configure_logging, load_credentials, load_settings

PROJECT_ROOT = Path(__file__).resolve().parent.parent

ENV_VARS = [
    "BIRDDOG_BASE_URL",
    "BIRDDOG_API_VERSION",
    "BIRDDOG_TIMEOUT",
    "BIRDDOG_API_KEY",
    "BIRDDOG_USERNAME",
    "BIRDDOG_PASSWORD",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # setenv first so teardown also removes values a .env file added.
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


def test_settings_defaults():
    settings = load_settings()
    assert settings.base_url == "https://api.birddoghr.com"
    assert settings.api_version == "v2"
    assert settings.timeout == 30


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("BIRDDOG_BASE_URL", "https://sandbox.birddoghr.com")
    monkeypatch.setenv("BIRDDOG_API_VERSION", "v1")
    monkeypatch.setenv("BIRDDOG_TIMEOUT", "12")
    settings = load_settings()
    assert (settings.base_url, settings.api_version, settings.timeout) == ("https://sandbox.birddoghr.com", "v1", 12)


def test_invalid_timeout_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("BIRDDOG_TIMEOUT", "soon")
    assert load_settings().timeout == 30


def test_credentials_from_env(monkeypatch):
    monkeypatch.setenv("BIRDDOG_API_KEY", "k")
    monkeypatch.setenv("BIRDDOG_USERNAME", "u@example.com")
    monkeypatch.setenv("BIRDDOG_PASSWORD", "pw")
    credentials = load_credentials()
    assert credentials.to_token_request() == {"apiKey": "k", "userName": "u@example.com", "password": "pw"}


def test_missing_credentials_are_named(monkeypatch):
    monkeypatch.setenv("BIRDDOG_API_KEY", "k")
    monkeypatch.setenv("BIRDDOG_PASSWORD", "")
    with pytest.raises(ValueError) as excinfo:
        load_credentials()
    assert "BIRDDOG_USERNAME" in str(excinfo.value)
    assert "BIRDDOG_PASSWORD" in str(excinfo.value)
    assert "BIRDDOG_API_KEY" not in str(excinfo.value)


def test_loaders_read_dotenv_from_working_directory(tmp_path):
    (tmp_path / ".env").write_text("BIRDDOG_API_VERSION=v1\nBIRDDOG_USERNAME=env@example.com\n", encoding="utf-8")
    assert load_settings().api_version == "v1"
    assert os.environ["BIRDDOG_USERNAME"] == "env@example.com"


def test_importing_package_leaves_environment_untouched(tmp_path):
    (tmp_path / ".env").write_text("BIRDDOG_IMPORT_MARKER=from_dotenv\n", encoding="utf-8")
    env = {key: value for key, value in os.environ.items() if key != "BIRDDOG_IMPORT_MARKER"}
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT), env.get("PYTHONPATH")]))
    script = "import os, birddog_client; print(os.environ.get('BIRDDOG_IMPORT_MARKER'))"

    result = subprocess.run([sys.executable, "-c", script], cwd=tmp_path, env=env, capture_output=True, text=True, timeout=60)

    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "None"


def test_configure_logging_applies_level_and_format(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging(logging.DEBUG)
    assert calls == [{"level": logging.DEBUG, "format": config.LOG_FORMAT}]
