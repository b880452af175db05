"""
Module: conftest.py
Description: Shared pytest fixtures for event push tests.

Provides settings pointed at temporary directories, config file writers,
sample targets and events, and async stand-ins for the host logger and
the backoff sleep.
"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from opencode_event_push.config.settings import Settings
from opencode_event_push.models.target import TargetConfig


@pytest.fixture
def test_settings(tmp_path):
    """
    Provide settings whose global config directory lives under tmp_path.

    The directory is not created; tests that need a global file write it
    with write_config.
    """
    return Settings(global_config_dir=tmp_path / "global", log_level="DEBUG")


@pytest.fixture
def project_dir(tmp_path):
    """Provide an empty project directory."""
    directory = tmp_path / "project"
    directory.mkdir()
    return directory


@pytest.fixture
def write_config(test_settings):
    """
    Provide a helper that writes a config document into a directory.

    Dicts are JSON-encoded; strings are written verbatim so tests can
    produce malformed files.
    """
    def _write(directory, document):
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / test_settings.config_filename
        content = document if isinstance(document, str) else json.dumps(document)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_event():
    """Provide a typical host event record."""
    return {
        "type": "session.created",
        "properties": {
            "sessionID": "ses_123",
            "title": "Refactor parser",
            "tokens": 42,
            "shared": False
        }
    }


@pytest.fixture
def make_target():
    """Provide a factory for TargetConfig with fast retry defaults."""
    def _make(url="https://hooks.example.com/events", attempts=1, delay_ms=0, **kwargs):
        return TargetConfig.model_validate({
            "url": url,
            "retry": {"attempts": attempts, "delayMs": delay_ms},
            **kwargs
        })

    return _make


@pytest.fixture
def failure_logger():
    """Provide an async stand-in for the host failure logger."""
    return AsyncMock(return_value=None)


@pytest.fixture
def no_sleep():
    """Provide a backoff sleep that returns immediately and records delays."""
    return AsyncMock(return_value=None)


@pytest.fixture
def host_client():
    """Provide a host client whose app.log coroutine is mocked."""
    client = MagicMock()
    client.app.log = AsyncMock(return_value=None)
    return client
