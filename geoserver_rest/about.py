# ============================================================================
# CLAUDE CONTEXT - ABOUT CLIENT
# ============================================================================
# STATUS: Resource Client - existence prober
# PURPOSE: GeoServer "about" endpoints and the reachability probe
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: AboutClient
# DEPENDENCIES: httpx (via GeoServerConnection), geoserver_rest.models
# ============================================================================
"""
Client for the GeoServer "about" endpoints.

exists() is the one operation in the library that never raises. The read
pattern in geoserver_rest.util calls it to tell "item not found" apart from
"GeoServer unreachable".
"""

from typing import Any, Dict

from .connection import GeoServerConnection
from .errors import GeoServerResponseError, raise_for_response
from .models import VersionInfo
from .util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.PROBE, "AboutClient")


class AboutClient:
    """
    Client for GeoServer "about" endpoint.

    Usage:
        about = AboutClient(connection)
        if about.exists():
            print(about.get_version().get_version("GeoServer"))
    """

    def __init__(self, connection: GeoServerConnection):
        self.connection = connection

    def get_version(self) -> VersionInfo:
        """
        Get the GeoServer version.

        Raises:
            GeoServerResponseError: If request fails
        """
        return VersionInfo.from_response(self._get_version_payload())

    def _get_version_payload(self) -> Any:
        response = self.connection.request("GET", "about/version.json")
        raise_for_response(response)
        return response.json()

    def exists(self) -> bool:
        """
        Checks if the configured GeoServer REST connection exists.

        Returns:
            True if GeoServer answered with a non-empty version document.
            Its shape is not checked.
        """
        try:
            payload = self._get_version_payload()
        except (GeoServerResponseError, ValueError) as e:
            logger.debug(f"GeoServer existence probe failed: {e}")
            return False
        return bool(payload)

    def get_manifest(self) -> Dict[str, Any]:
        """Get the manifest of all GeoServer library modules."""
        response = self.connection.request("GET", "about/manifest.json")
        raise_for_response(response)
        return response.json()

    def get_status(self) -> Dict[str, Any]:
        """Get the status of the installed GeoServer modules."""
        response = self.connection.request("GET", "about/status.json")
        raise_for_response(response)
        return response.json()
