from unittest.mock import Mock

import pytest
from gridwalk_common import TableAccessError

import dependencies
from exceptions import TokenGenerationError
from main import app
from response_models import Connection
from routes.leads import client_ip


def test_os_map_auth_without_credentials_is_500(client):
    app.dependency_overrides[dependencies.get_os_token_client] = lambda: None

    response = client.post("/api/os-map-auth")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "API key or secret not configured"}


def test_os_map_auth_returns_token(client):
    token_client = Mock()
    token_client.generate_token.return_value = {"access_token": "abc", "expires_in": "299"}
    app.dependency_overrides[dependencies.get_os_token_client] = lambda: token_client

    response = client.post("/api/os-map-auth")

    assert response.status_code == 200
    assert response.json() == {"access_token": "abc", "expires_in": "299"}


def test_os_map_auth_upstream_failure_is_500(client):
    token_client = Mock()
    token_client.generate_token.side_effect = TokenGenerationError()
    app.dependency_overrides[dependencies.get_os_token_client] = lambda: token_client

    response = client.post("/api/os-map-auth")

    assert response.status_code == 500
    assert response.json()["error"] == "Error generating token"


def test_connections_modal_lists_stored_connections(client):
    store = Mock()
    store.list_connections.return_value = [
        Connection(id="pg-main", name="Main", connector="postgis")
    ]
    app.dependency_overrides[dependencies.get_connection_store] = lambda: store

    response = client.get("/api/connections-modal")

    assert response.json() == [{"id": "pg-main", "name": "Main", "connector": "postgis"}]


def test_connections_modal_table_failure_is_500(client):
    store = Mock()
    store.list_connections.side_effect = TableAccessError("connections", "scan")
    app.dependency_overrides[dependencies.get_connection_store] = lambda: store

    response = client.get("/api/connections-modal")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Internal Server Error"}


def test_workspace_connections_are_relayed(authed_client, api):
    api.list_connections.return_value = [{"id": "c1", "name": "primary"}]

    response = authed_client.get("/api/connections", params={"workspace_id": "ws-1"})

    assert response.json() == [{"id": "c1", "name": "primary"}]


def test_workspace_sources(authed_client, api):
    api.list_sources.return_value = [
        {"id": "c1", "layer": "roads", "sources": [{"name": "roads"}, {"name": "rivers"}]}
    ]

    response = authed_client.get("/api/workspaces/ws-1/sources")

    assert response.json()[0]["sources"] == [{"name": "roads"}, {"name": "rivers"}]


@pytest.fixture
def lead_store(client):
    store = Mock()
    store.save_email.return_value = "lead-1"
    app.dependency_overrides[dependencies.get_lead_store] = lambda: store
    return store


def test_lead_records_forwarded_address(client, lead_store):
    response = client.post(
        "/api/leads",
        json={"email": "ada@b.co"},
        headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"},
    )

    assert response.status_code == 200
    assert response.json()["success"] is True
    lead_store.save_email.assert_called_once_with("ada@b.co", "203.0.113.7")


def test_lead_without_forwarded_for_is_unknown(client, lead_store):
    client.post("/api/leads", json={"email": "ada@b.co"})

    lead_store.save_email.assert_called_once_with("ada@b.co", "unknown")


@pytest.mark.parametrize("email", ["", "not-an-email", "a@b", "a b@c.d"])
def test_lead_rejects_invalid_email(client, lead_store, email):
    response = client.post("/api/leads", json={"email": email})

    assert response.status_code == 400
    lead_store.save_email.assert_not_called()


def test_lead_store_failure_is_500(client, lead_store):
    lead_store.save_email.side_effect = TableAccessError("landing", "put_item")

    response = client.post("/api/leads", json={"email": "ada@b.co"})

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to save email"


def test_client_ip_handles_blank_header():
    request = Mock()
    request.headers = {"x-forwarded-for": " , 10.0.0.1"}

    assert client_ip(request) == "unknown"
