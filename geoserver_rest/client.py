# ============================================================================
# CLAUDE CONTEXT - GEOSERVER REST CLIENT
# ============================================================================
# STATUS: Façade - single entry point of the library
# PURPOSE: Build the shared connection and expose one client per resource family
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: GeoServerRestClient
# DEPENDENCIES: httpx (sync), geoserver_rest.config (optional)
# ============================================================================
"""
Client for GeoServer REST API.

Has minimal basic functionality and offers REST client instances for
sub-entities, like workspaces or datastores, as member variables.

Usage:
    with GeoServerRestClient("http://localhost:8080/geoserver/rest/", "admin", "geoserver") as grc:
        if grc.exists():
            grc.workspaces.create("my-workspace")
"""

from typing import Optional

import httpx

from .about import AboutClient
from .config import GeoServerSettings, get_geoserver_settings
from .connection import GeoServerConnection, build_basic_auth, normalize_url
from .datastore import DatastoreClient
from .imagemosaic import ImageMosaicClient
from .layer import LayerClient
from .models import VersionInfo
from .namespace import NamespaceClient
from .reset_reload import ResetReloadClient
from .security import SecurityClient
from .settings import SettingsClient
from .style import StyleClient
from .workspace import WorkspaceClient
from .util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.FACADE, "GeoServerRestClient")


class GeoServerRestClient:
    """
    Client for GeoServer REST API.

    Attributes:
        layers: LayerClient
        styles: StyleClient
        workspaces: WorkspaceClient
        namespaces: NamespaceClient
        datastores: DatastoreClient
        imagemosaics: ImageMosaicClient
        security: SecurityClient
        settings: SettingsClient
        about: AboutClient
        reset_reload: ResetReloadClient
    """

    def __init__(
        self,
        url: str,
        user: str,
        password: str,
        http_client: Optional[httpx.Client] = None
    ):
        """
        Creates a GeoServerRestClient instance. No request is made.

        Args:
            url: The URL of the GeoServer REST API endpoint
            user: The user for the GeoServer REST API
            password: The password for the GeoServer REST API
            http_client: Transport to use. If not provided, an httpx.Client
                without timeout is created and owned by this instance.
        """
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(timeout=httpx.Timeout(None))

        self.connection = GeoServerConnection(
            url=normalize_url(url),
            auth=build_basic_auth(user, password),
            http=http_client
        )

        self.layers = LayerClient(self.connection)
        self.styles = StyleClient(self.connection)
        self.workspaces = WorkspaceClient(self.connection)
        self.namespaces = NamespaceClient(self.connection)
        self.datastores = DatastoreClient(self.connection)
        self.imagemosaics = ImageMosaicClient(self.connection)
        self.security = SecurityClient(self.connection)
        self.settings = SettingsClient(self.connection)
        self.about = AboutClient(self.connection)
        self.reset_reload = ResetReloadClient(self.connection)

    @classmethod
    def from_settings(cls, settings: Optional[GeoServerSettings] = None) -> 'GeoServerRestClient':
        """
        Create a client from environment-based settings.

        Args:
            settings: Explicit settings. If not provided, GEOSERVER_* environment
                variables (and .env) are read.
        """
        settings = settings or get_geoserver_settings()
        http_client = httpx.Client(
            timeout=httpx.Timeout(settings.timeout),
            verify=settings.verify_ssl
        )
        logger.info(f"Creating GeoServer REST client for {settings.url}")
        client = cls(settings.url, settings.user, settings.password, http_client=http_client)
        client._owns_http_client = True
        return client

    @property
    def url(self) -> str:
        return self.connection.url

    def exists(self) -> bool:
        """Checks if the configured GeoServer REST connection exists."""
        return self.about.exists()

    def get_version(self) -> VersionInfo:
        """Get the GeoServer version."""
        return self.about.get_version()

    def close(self):
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client and not self.connection.http.is_closed:
            self.connection.http.close()

    def __enter__(self) -> 'GeoServerRestClient':
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
