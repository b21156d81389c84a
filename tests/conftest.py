"""Shared fixtures: GeoServer stand-ins served through httpx.MockTransport."""

import json
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest

from geoserver_rest import GeoServerRestClient

BASE_URL = "http://geoserver.test/geoserver/rest"
BASE_PATH = "/geoserver/rest/"

VERSION_PAYLOAD = {
    "about": {
        "resource": [
            {
                "@name": "GeoServer",
                "Build-Timestamp": "01-Oct-2026 10:00",
                "Version": "2.26.0",
                "Git-Revision": "4f0c2a9"
            },
            {
                "@name": "GeoTools",
                "Version": "32.0"
            }
        ]
    }
}


def rest_path(request: httpx.Request) -> str:
    """Path of a request relative to the REST base URL."""
    return request.url.path[len(BASE_PATH):]


def json_body(request: httpx.Request) -> Any:
    return json.loads(request.content)


def _response(status: int, payload: Any = None) -> httpx.Response:
    if isinstance(payload, (dict, list)):
        return httpx.Response(status, json=payload)
    return httpx.Response(status, text=payload or "")


class RecordingRoutes:
    """
    Answers fixed responses per (method, path) and records every request.

    Unknown routes answer 404. The version endpoint answers like a live
    GeoServer unless reachable is False.
    """

    def __init__(self, routes: Optional[Dict[Tuple[str, str], Tuple[int, Any]]] = None, reachable: bool = True):
        self.routes = routes or {}
        self.reachable = reachable
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, rest_path(request))
        if key in self.routes:
            return _response(*self.routes[key])
        if key == ("GET", "about/version.json") and self.reachable:
            return _response(200, VERSION_PAYLOAD)
        return _response(404, "<html><body>HTTP ERROR 404 Not Found</body></html>")

    def paths(self) -> List[Tuple[str, str]]:
        return [(r.method, rest_path(r)) for r in self.requests]

    def last(self) -> httpx.Request:
        return self.requests[-1]


class FakeGeoServer:
    """In-memory GeoServer holding workspaces and namespaces."""

    default_namespace = "cite"

    def __init__(self):
        self.workspaces: List[str] = []
        self.non_empty = set()
        self.namespaces: Dict[str, str] = {"cite": "http://www.opengeospatial.net/cite"}
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = rest_path(request)
        method = request.method

        if path == "about/version.json":
            return _response(200, VERSION_PAYLOAD)

        if path == "workspaces.json" and method == "GET":
            if not self.workspaces:
                return _response(200, {"workspaces": ""})
            return _response(200, {"workspaces": {"workspace": [
                {"name": name, "href": f"{BASE_URL}/workspaces/{name}.json"}
                for name in self.workspaces
            ]}})

        if path == "workspaces" and method == "POST":
            name = json_body(request)["workspace"]["name"]
            if name in self.workspaces:
                return _response(409, f"Workspace '{name}' already exists")
            self.workspaces.append(name)
            return _response(201, name)

        if path.startswith("workspaces/") and method == "GET":
            name = path[len("workspaces/"):-len(".json")]
            if name not in self.workspaces:
                return _response(404, f"No such workspace: '{name}' found")
            return _response(200, {"workspace": {"name": name, "isolated": False}})

        if path.startswith("workspaces/") and method == "DELETE":
            name = path[len("workspaces/"):]
            if name not in self.workspaces:
                return _response(404, f"No such workspace: '{name}' found")
            if name in self.non_empty and request.url.params.get("recurse") != "true":
                return _response(400, "Workspace is not empty")
            self.workspaces.remove(name)
            return _response(200)

        if path == "namespaces" and method == "POST":
            namespace = json_body(request)["namespace"]
            if namespace["prefix"] in self.namespaces:
                return _response(409, f"Namespace '{namespace['prefix']}' already exists")
            self.namespaces[namespace["prefix"]] = namespace["uri"]
            return _response(201, namespace["prefix"])

        if path.startswith("namespaces/") and method == "GET":
            prefix = path[len("namespaces/"):-len(".json")]
            if prefix not in self.namespaces:
                return _response(404, f"No such namespace: '{prefix}' found")
            return _response(200, {"namespace": {"prefix": prefix, "uri": self.namespaces[prefix]}})

        if path.startswith("namespaces/") and method == "DELETE":
            prefix = path[len("namespaces/"):]
            if prefix == self.default_namespace:
                return _response(405, "Can't delete the default namespace")
            if prefix not in self.namespaces:
                return _response(404, f"No such namespace: '{prefix}' found")
            if prefix in self.non_empty:
                return _response(403, "Namespace is not empty")
            del self.namespaces[prefix]
            return _response(200)

        return _response(404, "Not found")


def build_client(handler: Callable[[httpx.Request], httpx.Response]) -> GeoServerRestClient:
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    return GeoServerRestClient(BASE_URL, "admin", "geoserver", http_client=http_client)


@pytest.fixture
def fake_geoserver() -> FakeGeoServer:
    return FakeGeoServer()


@pytest.fixture
def grc(fake_geoserver):
    client = build_client(fake_geoserver)
    yield client
    client.connection.http.close()


@pytest.fixture
def make_client():
    """Factory fixture: make_client(routes, reachable=True) -> (client, recorder)."""
    clients = []

    def _make(routes=None, reachable=True):
        recorder = RecordingRoutes(routes, reachable=reachable)
        client = build_client(recorder)
        clients.append(client)
        return client, recorder

    yield _make

    for client in clients:
        client.connection.http.close()
