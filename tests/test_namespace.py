"""Tests for NamespaceClient."""

import pytest

from geoserver_rest import (
    GeoServerConflictError,
    GeoServerNotEmptyError,
    GeoServerNotFoundError,
    GeoServerProtectedResourceError,
    GeoServerResponseError,
)

from conftest import json_body, rest_path


def test_create_and_get_namespace(grc, fake_geoserver) -> None:
    assert grc.namespaces.create("example", "http://www.example.com") == "example"
    assert json_body(fake_geoserver.requests[-1]) == {
        "namespace": {"prefix": "example", "uri": "http://www.example.com"}
    }

    assert grc.namespaces.get("example") == {
        "namespace": {"prefix": "example", "uri": "http://www.example.com"}
    }


def test_create_existing_namespace_conflicts(grc) -> None:
    grc.namespaces.create("example", "http://www.example.com")

    with pytest.raises(GeoServerConflictError):
        grc.namespaces.create("example", "http://www.example.com")


def test_get_missing_namespace_returns_none(grc) -> None:
    assert grc.namespaces.get("missing") is None


def test_delete_namespace(grc, fake_geoserver) -> None:
    grc.namespaces.create("example", "http://www.example.com")

    grc.namespaces.delete("example")

    request = fake_geoserver.requests[-1]
    assert rest_path(request) == "namespaces/example"
    assert "recurse" not in request.url.params
    assert grc.namespaces.get("example") is None


def test_delete_missing_namespace(grc) -> None:
    with pytest.raises(GeoServerNotFoundError) as exc_info:
        grc.namespaces.delete("missing")

    assert exc_info.value.message == "Namespace doesn't exist"


def test_delete_non_empty_namespace(grc, fake_geoserver) -> None:
    grc.namespaces.create("example", "http://www.example.com")
    fake_geoserver.non_empty.add("example")

    with pytest.raises(GeoServerNotEmptyError) as exc_info:
        grc.namespaces.delete("example")

    assert exc_info.value.status_code == 403


def test_delete_default_namespace(grc) -> None:
    with pytest.raises(GeoServerProtectedResourceError) as exc_info:
        grc.namespaces.delete("cite")

    assert exc_info.value.message == "Can't delete default namespace"


def test_delete_unrecognized_status(make_client) -> None:
    grc, _ = make_client({("DELETE", "namespaces/example"): (500, "error")})

    with pytest.raises(GeoServerResponseError) as exc_info:
        grc.namespaces.delete("example")

    assert exc_info.value.message == "Response not recognized"


def test_get_all(make_client) -> None:
    payload = {"namespaces": {"namespace": [{"name": "cite"}]}}
    grc, recorder = make_client({("GET", "namespaces.json"): (200, payload)})

    assert grc.namespaces.get_all() == payload
    assert recorder.paths() == [("GET", "namespaces.json")]
