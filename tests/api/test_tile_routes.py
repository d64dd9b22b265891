from unittest.mock import Mock

import pytest
import requests

import dependencies
from fakes import SESSION_TOKEN, FakeResponse
from infrastructure import TileServerClient
from main import app


@pytest.fixture
def tile_session(client):
    session = Mock(spec=requests.Session)
    app.dependency_overrides[dependencies.get_tile_client] = lambda: TileServerClient(
        session, "http://tiles.test"
    )
    return session


def test_tile_is_streamed_from_tile_server(client, tile_session):
    upstream = FakeResponse(
        text="\x1a\x02tile", headers={"Content-Type": "application/vnd.mapbox-vector-tile"}
    )
    tile_session.get.return_value = upstream

    response = client.get("/api/tiles/3/4/5.pbf", params={"layers": "roads"})

    assert response.status_code == 200
    assert response.content == b"\x1a\x02tile"
    assert response.headers["content-type"] == "application/vnd.mapbox-vector-tile"
    assert response.headers["cache-control"] == "public, max-age=3600"
    url = tile_session.get.call_args.args[0]
    assert url == "http://tiles.test/roads/3/4/5.pbf"
    assert tile_session.get.call_args.kwargs["stream"] is True
    assert upstream.closed


def test_tile_request_drops_connection_headers(client, tile_session):
    tile_session.get.return_value = FakeResponse(text="")
    client.cookies.set("sid", SESSION_TOKEN)

    client.get("/api/tiles/a/b", params={"layers": "x"}, headers={"X-Trace": "1"})

    assert tile_session.get.call_args.args[0] == "http://tiles.test/x/a/b"
    forwarded = {k.lower(): v for k, v in tile_session.get.call_args.kwargs["headers"].items()}
    assert forwarded["x-trace"] == "1"
    assert "host" not in forwarded
    assert "content-length" not in forwarded
    assert "cookie" not in forwarded


def test_tile_defaults_to_octet_stream(client, tile_session):
    tile_session.get.return_value = FakeResponse(text="raw")

    response = client.get("/api/tiles/1/2/3", params={"layers": "l"})

    assert response.headers["content-type"] == "application/octet-stream"


def test_tile_server_error_is_500(client, tile_session):
    upstream = FakeResponse(status_code=404, text="missing")
    tile_session.get.return_value = upstream

    response = client.get("/api/tiles/1/2/3", params={"layers": "l"})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Error proxying to tile server"}
    assert upstream.closed


def test_unreachable_tile_server_is_500(client, tile_session):
    tile_session.get.side_effect = requests.ConnectionError("refused")

    response = client.get("/api/tiles/1/2/3", params={"layers": "l"})

    assert response.status_code == 500


def test_tile_requires_layers(client, tile_session):
    response = client.get("/api/tiles/1/2/3")

    assert response.status_code == 400
    tile_session.get.assert_not_called()
