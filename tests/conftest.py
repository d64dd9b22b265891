import os

os.environ.setdefault("DD_TRACE_ENABLED", "false")
os.environ.setdefault("DD_INSTRUMENTATION_TELEMETRY_ENABLED", "false")

from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

import dependencies  # noqa: E402
from config import load_config  # noqa: E402
from infrastructure import GridwalkApiClient  # noqa: E402
from fakes import SESSION_TOKEN  # noqa: E402
from main import app  # noqa: E402


@pytest.fixture
def config(monkeypatch):
    monkeypatch.setenv("GRIDWALK_API", "http://api.test")
    monkeypatch.setenv("TILE_SERVER_URL", "http://tiles.test")
    monkeypatch.setenv("AWS_REGION", "eu-west-2")
    monkeypatch.setenv("S3_BUCKET_NAME", "remote-files")
    monkeypatch.delenv("NODE_ENV", raising=False)
    return load_config()


@pytest.fixture
def api():
    return MagicMock(spec=GridwalkApiClient)


@pytest.fixture
def client(api, config):
    app.dependency_overrides[dependencies.get_api_client] = lambda: api
    app.dependency_overrides[dependencies.get_config] = lambda: config
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def authed_client(client):
    client.cookies.set("sid", SESSION_TOKEN)
    return client
