# ============================================================================
# CLAUDE CONTEXT - NAMESPACE CLIENT
# ============================================================================
# STATUS: Resource Client - namespaces
# PURPOSE: List, read, create and delete GeoServer namespaces
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: NamespaceClient
# DEPENDENCIES: geoserver_rest.util
# ============================================================================
"""Client for GeoServer namespaces."""

from typing import Any, Dict, Optional

from . import util
from .connection import GeoServerConnection
from .errors import (
    GeoServerNotEmptyError,
    GeoServerNotFoundError,
    GeoServerProtectedResourceError,
)
from .util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.CLIENT, "NamespaceClient")

DELETE_STATUS_TABLE = {
    403: (GeoServerNotEmptyError, "Namespace or related Workspace is not empty (and recurse not true)"),
    404: (GeoServerNotFoundError, "Namespace doesn't exist"),
    405: (GeoServerProtectedResourceError, "Can't delete default namespace"),
}


class NamespaceClient:
    """Client for GeoServer namespaces."""

    def __init__(self, connection: GeoServerConnection):
        self.connection = connection

    def get_all(self) -> Dict[str, Any]:
        """
        Returns all namespaces.

        Raises:
            GeoServerResponseError: If request fails
        """
        return util.get_json(self.connection, "namespaces.json")

    def create(self, prefix: str, uri: str) -> str:
        """
        Creates a new namespace.

        Args:
            prefix: Prefix of the new namespace
            uri: URI of the new namespace

        Returns:
            The name of the created namespace

        Raises:
            GeoServerConflictError: If the namespace already exists
            GeoServerResponseError: If request fails
        """
        body = {"namespace": {"prefix": prefix, "uri": uri}}
        created = util.create(self.connection, "namespaces", "namespace", json_body=body)
        logger.info(f"Created namespace {prefix} ({uri})")
        return created

    def get(self, name: str) -> Optional[Dict[str, Any]]:
        """
        Returns a namespace, or None if it cannot be found.

        Raises:
            GeoServerResponseError: If GeoServer is unreachable
        """
        return util.get_or_none(self.connection, f"namespaces/{name}.json")

    def delete(self, name: str) -> None:
        """
        Deletes a namespace.

        Raises:
            GeoServerNotEmptyError: If the namespace is not empty
            GeoServerNotFoundError: If the namespace doesn't exist
            GeoServerProtectedResourceError: If it is the default namespace
            GeoServerResponseError: If the response is not recognized
        """
        util.delete(
            self.connection,
            f"namespaces/{name}",
            status_table=DELETE_STATUS_TABLE,
            fallback_message="Response not recognized"
        )
        logger.info(f"Deleted namespace {name}")
