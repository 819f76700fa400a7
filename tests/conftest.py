"""Pytest configuration and fixtures for openhue tests."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
import requests
from requests.adapters import HTTPAdapter


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the CLI at a config directory that doesn't exist yet."""
    directory = tmp_path / '.openhue'
    monkeypatch.setenv('OPENHUE_CONFIG_DIR', str(directory))
    return directory


@pytest.fixture
def write_config(config_dir):
    """Write config.yaml with the given text and return its path."""
    def _write(text: str) -> Path:
        config_dir.mkdir(parents=True, exist_ok=True)
        path = config_dir / 'config.yaml'
        path.write_text(text)
        return path
    return _write


def make_response(status_code: int = 200, payload=None, text: str | None = None) -> requests.Response:
    """Build a requests.Response as the transport adapter would return it."""
    response = requests.Response()
    response.status_code = status_code
    if payload is not None:
        response._content = json.dumps(payload).encode()
    elif text is not None:
        response._content = text.encode()
    else:
        response._content = b''
    response.headers['Content-Type'] = 'application/json'
    response.encoding = 'utf-8'
    response.url = 'https://bridge.test/'
    return response


@pytest.fixture
def mock_send():
    """Patch the requests transport so no request leaves the process."""
    with patch.object(HTTPAdapter, 'send') as send:
        send.return_value = make_response(payload={'errors': [], 'data': []})
        yield send
