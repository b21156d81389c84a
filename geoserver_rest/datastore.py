# ============================================================================
# CLAUDE CONTEXT - DATASTORE CLIENT
# ============================================================================
# STATUS: Resource Client - data, coverage, WMS and WMTS stores
# PURPOSE: Read, create (incl. file uploads) and delete GeoServer stores
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: DatastoreClient, build_postgis_store_body, build_wfs_store_body,
#          build_wms_store_body, build_wmts_store_body, build_gpkg_store_body
# DEPENDENCIES: geoserver_rest.util, os (file size for uploads)
# PATTERNS: Body builders are pure functions, client methods only send them
# ============================================================================
"""
Client for GeoServer data stores.

Store creation bodies follow a fixed schema that GeoServer reads verbatim:
key names, nesting and the type string must match exactly. The builders
below are module-level functions so the bodies can be inspected without a
server.

Connection parameters are an ordered list of entries:
    {"@key": "<parameter name>", "$": <value>}
"""

import os
from typing import Any, Dict, Optional

from . import util
from .connection import GeoServerConnection
from .errors import GeoServerNotEmptyError
from .util_logger import LoggerFactory, ComponentType, log_exceptions

logger = LoggerFactory.create_logger(ComponentType.CLIENT, "DatastoreClient")

DELETE_COVERAGE_STORE_STATUS_TABLE = {
    401: (
        GeoServerNotEmptyError,
        'Deletion failed. There might be dependant objects to this store. '
        'Delete them first or call this with "recurse=false"'
    ),
}


# ============================================================================
# Connection parameter body builders
# ============================================================================

def _entry(key: str, value: Any) -> Dict[str, Any]:
    return {"@key": key, "$": value}


def build_postgis_store_body(
    workspace: str,
    namespace_uri: str,
    data_store: str,
    pg_host: str,
    pg_port: int,
    pg_user: str,
    pg_password: str,
    pg_schema: str,
    pg_db: str,
    expose_pk: Optional[bool] = None
) -> Dict[str, Any]:
    """
    Build the body for a PostGIS data store.

    Args:
        expose_pk: Expose primary keys, defaults to False

    Returns:
        dataStore body with exactly nine connection parameters
    """
    return {
        "dataStore": {
            "name": data_store,
            "type": "PostGIS",
            "enabled": True,
            "workspace": {
                "name": workspace
            },
            "connectionParameters": {
                "entry": [
                    _entry("dbtype", "postgis"),
                    _entry("schema", pg_schema),
                    _entry("database", pg_db),
                    _entry("host", pg_host),
                    _entry("port", pg_port),
                    _entry("passwd", pg_password),
                    _entry("namespace", namespace_uri),
                    _entry("user", pg_user),
                    _entry("Expose primary keys", bool(expose_pk)),
                ]
            }
        }
    }


def build_wfs_store_body(
    data_store: str,
    wfs_capabilities_url: str,
    namespace_url: str,
    use_http_connection_pooling: bool = True
) -> Dict[str, Any]:
    """Build the body for a cascaded WFS data store."""
    return {
        "dataStore": {
            "name": data_store,
            "type": "Web Feature Server (NG)",
            "connectionParameters": {
                "entry": [
                    _entry("WFSDataStoreFactory:GET_CAPABILITIES_URL", wfs_capabilities_url),
                    _entry("namespace", namespace_url),
                    _entry("WFSDataStoreFactory:USE_HTTP_CONNECTION_POOLING", use_http_connection_pooling),
                ]
            }
        }
    }


def build_wms_store_body(data_store: str, wms_capabilities_url: str) -> Dict[str, Any]:
    """Build the body for a cascaded WMS store."""
    return {
        "wmsStore": {
            "name": data_store,
            "type": "WMS",
            "capabilitiesURL": wms_capabilities_url
        }
    }


def build_wmts_store_body(data_store: str, wmts_capabilities_url: str) -> Dict[str, Any]:
    """Build the body for a cascaded WMTS store."""
    return {
        "wmtsStore": {
            "name": data_store,
            "type": "WMTS",
            "capabilitiesURL": wmts_capabilities_url
        }
    }


def build_gpkg_store_body(data_store: str, gpkg_path: str) -> Dict[str, Any]:
    """Build the body for a GeoPackage data store (path relative to the data dir)."""
    return {
        "dataStore": {
            "name": data_store,
            "type": "GeoPackage",
            "connectionParameters": {
                "entry": [
                    _entry("database", f"file:{gpkg_path}"),
                    _entry("dbtype", "geopkg"),
                ]
            }
        }
    }


# ============================================================================
# Client
# ============================================================================

class DatastoreClient:
    """
    Client for GeoServer data stores.

    Usage:
        stores = DatastoreClient(connection)
        stores.create_postgis_store("ws", "http://ws", "roads", "db", 5432,
                                    "user", "secret", "public", "gis")
        stores.get_data_store("ws", "roads")
    """

    def __init__(self, connection: GeoServerConnection):
        self.connection = connection

    # =========================================================================
    # Listing
    # =========================================================================

    def get_data_stores(self, workspace: str) -> Dict[str, Any]:
        """Get all DataStores in a workspace."""
        return self.get_stores(workspace, "datastores")

    def get_coverage_stores(self, workspace: str) -> Dict[str, Any]:
        """Get all CoverageStores in a workspace."""
        return self.get_stores(workspace, "coveragestores")

    def get_wms_stores(self, workspace: str) -> Dict[str, Any]:
        """Get all WmsStores in a workspace."""
        return self.get_stores(workspace, "wmsstores")

    def get_wmts_stores(self, workspace: str) -> Dict[str, Any]:
        """Get all WmtsStores in a workspace."""
        return self.get_stores(workspace, "wmtsstores")

    def get_stores(self, workspace: str, store_type: str) -> Dict[str, Any]:
        """
        Get information about various store types in a workspace.

        Args:
            workspace: The workspace name
            store_type: datastores, coveragestores, wmsstores or wmtsstores

        Raises:
            GeoServerResponseError: If request fails
        """
        return util.get_json(self.connection, f"workspaces/{workspace}/{store_type}.json")

    # =========================================================================
    # Single store lookup
    # =========================================================================

    def get_data_store(self, workspace: str, data_store: str) -> Optional[Dict[str, Any]]:
        """Get specific DataStore by name in a workspace, None if missing."""
        return self.get_store(workspace, data_store, "datastores")

    def get_coverage_store(self, workspace: str, cov_store: str) -> Optional[Dict[str, Any]]:
        """Get specific CoverageStore by name in a workspace, None if missing."""
        return self.get_store(workspace, cov_store, "coveragestores")

    def get_wms_store(self, workspace: str, wms_store: str) -> Optional[Dict[str, Any]]:
        """Get specific WmsStore by name in a workspace, None if missing."""
        return self.get_store(workspace, wms_store, "wmsstores")

    def get_wmts_store(self, workspace: str, wmts_store: str) -> Optional[Dict[str, Any]]:
        """Get specific WmtsStore by name in a workspace, None if missing."""
        return self.get_store(workspace, wmts_store, "wmtsstores")

    def get_store(self, workspace: str, store_name: str, store_type: str) -> Optional[Dict[str, Any]]:
        """
        Get GeoServer store by type.

        Returns:
            Store details, or None if it cannot be found

        Raises:
            GeoServerResponseError: If GeoServer is unreachable
        """
        return util.get_or_none(
            self.connection,
            f"workspaces/{workspace}/{store_type}/{store_name}.json"
        )

    # =========================================================================
    # File uploads
    # =========================================================================

    @log_exceptions(logger=logger)
    def create_geotiff_from_file(
        self,
        workspace: str,
        coverage_store: str,
        layer_name: str,
        layer_title: Optional[str],
        file_path: str
    ) -> str:
        """
        Creates a GeoTIFF store from a local file and publishes it as layer.

        The file is streamed as the request body with an explicit
        Content-Length.

        Args:
            workspace: The workspace to create GeoTIFF store in
            coverage_store: The name of the new GeoTIFF store
            layer_name: The published name of the new layer
            layer_title: The published title of the new layer (defaults to layer_name)
            file_path: Path to the GeoTIFF file

        Returns:
            The response text

        Raises:
            GeoServerResponseError: If request fails
            OSError: If the file cannot be read
        """
        lyr_title = layer_title or layer_name
        file_size = os.path.getsize(file_path)
        path = f"workspaces/{workspace}/coveragestores/{coverage_store}/file.geotiff"

        logger.info(
            f"Uploading GeoTIFF {file_path} to {workspace}:{coverage_store}",
            extra={'custom_dimensions': {'file_size_bytes': file_size}}
        )
        with open(file_path, "rb") as read_stream:
            return util.create(
                self.connection,
                path,
                "coverage store",
                method="PUT",
                params={"filename": lyr_title, "coverageName": layer_name},
                content=read_stream,
                headers={
                    "Content-Type": "image/tiff",
                    "Content-Length": str(file_size)
                }
            )

    @log_exceptions(logger=logger)
    def create_image_mosaic_store(self, workspace: str, coverage_store: str, zip_archive_path: str) -> str:
        """
        Creates an ImageMosaic store from a zip archive with the 3 necessary files
          - datastore.properties
          - indexer.properties
          - timeregex.properties

        Returns:
            The response text

        Raises:
            GeoServerResponseError: If request fails
            OSError: If the archive cannot be read
        """
        path = f"workspaces/{workspace}/coveragestores/{coverage_store}/file.imagemosaic"

        logger.info(f"Uploading ImageMosaic archive {zip_archive_path} to {workspace}:{coverage_store}")
        with open(zip_archive_path, "rb") as read_stream:
            return util.create(
                self.connection,
                path,
                "coverage store",
                method="PUT",
                content=read_stream,
                headers={"Content-Type": "application/zip"}
            )

    # =========================================================================
    # Store creation
    # =========================================================================

    def create_postgis_store(
        self,
        workspace: str,
        namespace_uri: str,
        data_store: str,
        pg_host: str,
        pg_port: int,
        pg_user: str,
        pg_password: str,
        pg_schema: str,
        pg_db: str,
        expose_pk: bool = False
    ) -> str:
        """
        Creates a PostGIS based data store.

        Raises:
            GeoServerConflictError: If the store already exists
            GeoServerResponseError: If request fails
        """
        body = build_postgis_store_body(
            workspace, namespace_uri, data_store, pg_host, pg_port,
            pg_user, pg_password, pg_schema, pg_db, expose_pk
        )
        return self._create_store(workspace, "datastores", body, "data store")

    def create_wms_store(self, workspace: str, data_store: str, wms_capabilities_url: str) -> str:
        """Creates a WMS based data store."""
        body = build_wms_store_body(data_store, wms_capabilities_url)
        return self._create_store(workspace, "wmsstores", body, "WMS store")

    def create_wmts_store(self, workspace: str, data_store: str, wmts_capabilities_url: str) -> str:
        """Creates a WMTS based data store."""
        body = build_wmts_store_body(data_store, wmts_capabilities_url)
        return self._create_store(workspace, "wmtsstores", body, "WMTS store")

    def create_wfs_store(
        self,
        workspace: str,
        data_store: str,
        wfs_capabilities_url: str,
        namespace_url: str,
        use_http_connection_pooling: bool = True
    ) -> str:
        """
        Creates a WFS based data store.

        Args:
            wfs_capabilities_url: WFS capabilities URL
            namespace_url: URL of the GeoServer namespace
            use_http_connection_pooling: use HTTP connection pooling for WFS connection
        """
        body = build_wfs_store_body(
            data_store, wfs_capabilities_url, namespace_url, use_http_connection_pooling
        )
        return self._create_store(workspace, "datastores", body, "data store")

    def create_gpkg_store(self, workspace: str, data_store: str, gpkg_path: str) -> str:
        """Creates a GeoPackage store from a file placed in the geoserver_data dir."""
        body = build_gpkg_store_body(data_store, gpkg_path)
        return self._create_store(workspace, "datastores", body, "data store")

    def _create_store(self, workspace: str, store_type: str, body: Dict[str, Any], kind: str) -> str:
        created = util.create(
            self.connection,
            f"workspaces/{workspace}/{store_type}",
            kind,
            json_body=body
        )
        logger.info(f"Created {kind} in workspace {workspace}")
        return created

    # =========================================================================
    # Deletion
    # =========================================================================

    def delete_data_store(self, workspace: str, data_store: str, recurse: bool = False) -> None:
        """
        Deletes a data store.

        Raises:
            GeoServerResponseError: If request fails
        """
        util.delete(
            self.connection,
            f"workspaces/{workspace}/datastores/{data_store}",
            recurse=recurse
        )

    def delete_coverage_store(self, workspace: str, coverage_store: str, recurse: bool = False) -> None:
        """
        Deletes a CoverageStore.

        Raises:
            GeoServerNotEmptyError: If dependent objects block the deletion
            GeoServerResponseError: If request fails
        """
        util.delete(
            self.connection,
            f"workspaces/{workspace}/coveragestores/{coverage_store}",
            recurse=recurse,
            status_table=DELETE_COVERAGE_STORE_STATUS_TABLE
        )

