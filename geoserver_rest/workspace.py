# ============================================================================
# CLAUDE CONTEXT - WORKSPACE CLIENT
# ============================================================================
# STATUS: Resource Client - workspaces
# PURPOSE: List, read, create and delete GeoServer workspaces
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: WorkspaceClient
# DEPENDENCIES: geoserver_rest.util
# ============================================================================
"""
Client for GeoServer workspaces.

WARNING: For most cases the NamespaceClient seems to fit better.
"""

from typing import Any, Dict, Optional

from . import util
from .connection import GeoServerConnection
from .errors import GeoServerNotEmptyError, GeoServerNotFoundError
from .util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.CLIENT, "WorkspaceClient")

# The REST docs say 403 for a non-empty workspace, GeoServer answers 400
DELETE_STATUS_TABLE = {
    400: (GeoServerNotEmptyError, "Workspace or related Namespace is not empty (and recurse not true)"),
    404: (GeoServerNotFoundError, "Workspace doesn't exist"),
}


class WorkspaceClient:
    """Client for GeoServer workspaces."""

    def __init__(self, connection: GeoServerConnection):
        self.connection = connection

    def get_all(self) -> Dict[str, Any]:
        """
        Returns all workspaces.

        GeoServer answers {"workspaces": ""} when there are none.

        Raises:
            GeoServerResponseError: If request fails
        """
        return util.get_json(self.connection, "workspaces.json")

    def get(self, name: str) -> Optional[Dict[str, Any]]:
        """
        Returns a workspace, or None if it does not exist.

        Raises:
            GeoServerResponseError: If GeoServer is unreachable
        """
        return util.get_or_none(self.connection, f"workspaces/{name}.json")

    def create(self, name: str) -> str:
        """
        Creates a new workspace.

        Returns:
            The name of the created workspace

        Raises:
            GeoServerConflictError: If the workspace already exists
            GeoServerResponseError: If request fails
        """
        body = {"workspace": {"name": name}}
        created = util.create(self.connection, "workspaces", "workspace", json_body=body)
        logger.info(f"Created workspace {name}")
        return created

    def delete(self, name: str, recurse: bool = False) -> None:
        """
        Deletes a workspace.

        Args:
            name: Name of the workspace to delete
            recurse: Flag to enable recursive deletion

        Raises:
            GeoServerNotEmptyError: If the workspace is not empty and recurse is false
            GeoServerNotFoundError: If the workspace doesn't exist
            GeoServerResponseError: If request fails
        """
        util.delete(
            self.connection,
            f"workspaces/{name}",
            recurse=recurse,
            status_table=DELETE_STATUS_TABLE
        )
        logger.info(f"Deleted workspace {name}")
