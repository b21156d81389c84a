"""Tests for the façade, the connection context and the existence prober."""

import base64

import httpx
import pytest

from geoserver_rest import (
    GeoServerRestClient,
    GeoServerRequestError,
    GeoServerResponseError,
    GeoServerSettings,
)
from geoserver_rest.about import AboutClient
from geoserver_rest.connection import build_basic_auth, normalize_url

from conftest import BASE_URL, rest_path


def test_url_gets_trailing_separator() -> None:
    assert normalize_url("http://localhost:8080/geoserver/rest") == "http://localhost:8080/geoserver/rest/"
    assert normalize_url("http://localhost:8080/geoserver/rest/") == "http://localhost:8080/geoserver/rest/"


def test_basic_auth_token() -> None:
    expected = "Basic " + base64.b64encode(b"admin:geoserver").decode("ascii")
    assert build_basic_auth("admin", "geoserver") == expected


def test_construction_makes_no_request() -> None:
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200)

    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    grc = GeoServerRestClient(BASE_URL, "admin", "geoserver", http_client=http_client)

    assert calls == []
    assert grc.url == BASE_URL + "/"


def test_all_resource_clients_share_one_connection(grc) -> None:
    clients = [
        grc.layers, grc.styles, grc.workspaces, grc.namespaces, grc.datastores,
        grc.imagemosaics, grc.security, grc.settings, grc.about, grc.reset_reload,
    ]
    assert all(client.connection is grc.connection for client in clients)


def test_connection_is_immutable(grc) -> None:
    with pytest.raises(AttributeError):
        grc.connection.url = "http://elsewhere/"


def test_every_request_carries_basic_auth(make_client) -> None:
    grc, recorder = make_client({("GET", "workspaces.json"): (200, {"workspaces": ""})})

    grc.workspaces.get_all()

    assert recorder.last().headers["Authorization"] == build_basic_auth("admin", "geoserver")


def test_exists_true_for_live_geoserver(make_client) -> None:
    grc, _ = make_client()
    assert grc.exists() is True


def test_exists_false_for_error_status(make_client) -> None:
    grc, _ = make_client(reachable=False)
    assert grc.exists() is False


def test_exists_false_for_empty_version_document(make_client) -> None:
    grc, _ = make_client({("GET", "about/version.json"): (200, {})})
    assert grc.exists() is False


@pytest.mark.parametrize("payload", [
    {"about": {"resource": [{"Version": "2.26.0"}]}},
    {"about": {}},
])
def test_exists_accepts_any_non_empty_version_document(make_client, payload) -> None:
    grc, _ = make_client({("GET", "about/version.json"): (200, payload)})

    assert grc.exists() is True
    assert grc.workspaces.get("missing") is None


def test_get_version_resource_without_name(make_client) -> None:
    payload = {"about": {"resource": [{"Version": "2.26.0"}]}}
    grc, _ = make_client({("GET", "about/version.json"): (200, payload)})

    version = grc.get_version()

    assert version.resources[0].version == "2.26.0"
    assert version.get_version() is None


def test_exists_false_for_non_json_answer(make_client) -> None:
    grc, _ = make_client({("GET", "about/version.json"): (200, "<html>login</html>")})
    assert grc.exists() is False


def test_exists_false_when_transport_fails() -> None:
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    grc = GeoServerRestClient(BASE_URL, "admin", "geoserver", http_client=http_client)

    assert grc.exists() is False


def test_get_version(make_client) -> None:
    grc, _ = make_client()

    version = grc.get_version()

    assert version.get_version("GeoServer") == "2.26.0"
    assert version.get_version("GeoTools") == "32.0"
    assert version.get_version("GeoWebCache") is None


def test_get_version_single_resource_object(make_client) -> None:
    payload = {"about": {"resource": {"@name": "GeoServer", "Version": "2.25.3"}}}
    grc, _ = make_client({("GET", "about/version.json"): (200, payload)})

    assert grc.get_version().get_version() == "2.25.3"


def test_get_version_raises_on_error_status(make_client) -> None:
    grc, _ = make_client({("GET", "about/version.json"): (401, "Unauthorized")})

    with pytest.raises(GeoServerResponseError) as exc_info:
        grc.get_version()

    assert exc_info.value.status_code == 401
    assert exc_info.value.geoserver_output == "Unauthorized"


def test_about_manifest_and_status(make_client) -> None:
    grc, recorder = make_client({
        ("GET", "about/manifest.json"): (200, {"about": {"resource": []}}),
        ("GET", "about/status.json"): (200, {"statuss": {"status": []}}),
    })
    about = AboutClient(grc.connection)

    assert about.get_manifest() == {"about": {"resource": []}}
    assert about.get_status() == {"statuss": {"status": []}}
    assert recorder.paths() == [("GET", "about/manifest.json"), ("GET", "about/status.json")]


def test_transport_failure_is_classified() -> None:
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    grc = GeoServerRestClient(BASE_URL, "admin", "geoserver", http_client=http_client)

    with pytest.raises(GeoServerRequestError) as exc_info:
        grc.workspaces.get_all()

    assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)
    assert exc_info.value.status_code is None


def test_context_manager_closes_owned_client() -> None:
    with GeoServerRestClient(BASE_URL, "admin", "geoserver") as grc:
        http_client = grc.connection.http
        assert not http_client.is_closed
    assert http_client.is_closed


def test_injected_client_is_not_closed() -> None:
    http_client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))

    with GeoServerRestClient(BASE_URL, "admin", "geoserver", http_client=http_client):
        pass

    assert not http_client.is_closed
    http_client.close()


def test_default_client_has_no_timeout() -> None:
    grc = GeoServerRestClient(BASE_URL, "admin", "geoserver")
    timeout = grc.connection.http.timeout
    assert (timeout.connect, timeout.read, timeout.write, timeout.pool) == (None, None, None, None)
    grc.close()


def test_from_settings() -> None:
    settings = GeoServerSettings(
        url="http://localhost:8080/geoserver/rest",
        user="admin",
        password="geoserver",
        timeout=12.5
    )

    grc = GeoServerRestClient.from_settings(settings)

    assert grc.url == "http://localhost:8080/geoserver/rest/"
    assert grc.connection.http.timeout.read == 12.5
    grc.close()
    assert grc.connection.http.is_closed


def test_request_path_is_relative_to_base_url(make_client) -> None:
    grc, recorder = make_client({("GET", "workspaces.json"): (200, {"workspaces": ""})})

    grc.workspaces.get_all()

    assert str(recorder.last().url) == BASE_URL + "/workspaces.json"
    assert rest_path(recorder.last()) == "workspaces.json"
