"""
GeoServer REST client.

Typed client for the GeoServer administrative REST API. One façade,
GeoServerRestClient, exposes a client per resource family (workspaces,
namespaces, datastores, layers, styles, imagemosaics, security, settings,
about, reset_reload).

Usage:
    from geoserver_rest import GeoServerRestClient, GeoServerResponseError

    grc = GeoServerRestClient("http://localhost:8080/geoserver/rest/", "admin", "geoserver")
    try:
        grc.workspaces.create("my-workspace")
    except GeoServerResponseError as e:
        print(e.message, e.geoserver_output)
"""

from .client import GeoServerRestClient
from .config import GeoServerSettings
from .errors import (
    GeoServerResponseError,
    GeoServerConflictError,
    GeoServerNotEmptyError,
    GeoServerNotFoundError,
    GeoServerProtectedResourceError,
    GeoServerRequestError,
)
from .models import ContactInformation, VersionInfo

__version__ = "1.0.0"
__all__ = [
    "GeoServerRestClient",
    "GeoServerSettings",
    "GeoServerResponseError",
    "GeoServerConflictError",
    "GeoServerNotEmptyError",
    "GeoServerNotFoundError",
    "GeoServerProtectedResourceError",
    "GeoServerRequestError",
    "ContactInformation",
    "VersionInfo",
]
