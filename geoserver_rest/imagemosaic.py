# ============================================================================
# CLAUDE CONTEXT - IMAGE MOSAIC CLIENT
# ============================================================================
# STATUS: Resource Client - ImageMosaic granules
# PURPOSE: List, harvest and delete granules of ImageMosaic coverage stores
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: ImageMosaicClient
# DEPENDENCIES: geoserver_rest.util
# ============================================================================
"""Client for GeoServer image mosaics."""

from typing import Any, Dict

from . import util
from .connection import GeoServerConnection

TEXT_HEADERS = {"Content-Type": "text/plain"}


class ImageMosaicClient:
    """Client for GeoServer image mosaics."""

    def __init__(self, connection: GeoServerConnection):
        self.connection = connection

    def _coverage_store_path(self, workspace: str, coverage_store: str) -> str:
        return f"workspaces/{workspace}/coveragestores/{coverage_store}"

    def get_granules(self, workspace: str, coverage_store: str, coverage: str) -> Dict[str, Any]:
        """Returns all granules of an image mosaic (GeoJSON feature collection)."""
        path = f"{self._coverage_store_path(workspace, coverage_store)}/coverages/{coverage}/index/granules.json"
        return util.get_json(self.connection, path)

    def harvest_granules(self, workspace: str, coverage_store: str, file_path: str) -> Any:
        """
        Harvests all granules in the given folder for an image mosaic.

        Args:
            file_path: Server-side path of the folder to harvest
        """
        response = util.send(
            self.connection,
            "POST",
            f"{self._coverage_store_path(workspace, coverage_store)}/external.imagemosaic",
            content=file_path,
            headers=TEXT_HEADERS
        )
        return response.json()

    def add_granule_by_server_file(self, workspace: str, coverage_store: str, file_path: str) -> str:
        """
        Adds a granule (defined by a server-side file) to an image mosaic.

        Returns:
            The response text
        """
        response = util.send(
            self.connection,
            "POST",
            f"{self._coverage_store_path(workspace, coverage_store)}/external.imagemosaic",
            content=file_path,
            headers=TEXT_HEADERS
        )
        return response.text

    def delete_single_granule(self, workspace: str, coverage_store: str, coverage: str, granule_id: str) -> None:
        """
        Deletes a single granule of an image mosaic.

        Args:
            granule_id: Feature id of the granule, e.g. 'my_mosaic.42'
        """
        path = (
            f"{self._coverage_store_path(workspace, coverage_store)}"
            f"/coverages/{coverage}/index/granules/{granule_id}"
        )
        util.send(self.connection, "DELETE", path)
