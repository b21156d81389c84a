# ============================================================================
# CLAUDE CONTEXT - LAYER CLIENT
# ============================================================================
# STATUS: Resource Client - layers, feature types, WMS/WMTS layers, coverages
# PURPOSE: Publish, read, modify and delete published GeoServer resources
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: LayerClient
# DEPENDENCIES: geoserver_rest.util
# ============================================================================
"""
Client for GeoServer layers.

Layers are addressed by their qualified name "workspace:layer". The
resources backing them (feature types, WMS layers, coverages) are addressed
by workspace, store and name.
"""

from typing import Any, Dict, List, Optional

from . import util
from .connection import GeoServerConnection
from .errors import GeoServerNotFoundError
from .util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.CLIENT, "LayerClient")


def _time_dimension_metadata(dimension_info: Dict[str, Any]) -> Dict[str, Any]:
    """Wrap a dimensionInfo block in the metadata entry GeoServer expects."""
    return {
        "entry": [
            {
                "@key": "time",
                "dimensionInfo": dimension_info
            }
        ]
    }


class LayerClient:
    """Client for GeoServer layers."""

    def __init__(self, connection: GeoServerConnection):
        self.connection = connection

    # =========================================================================
    # Layers
    # =========================================================================

    def get(self, qualified_name: str) -> Optional[Dict[str, Any]]:
        """
        Returns a GeoServer layer by the given qualified name ("workspace:layer").

        Returns:
            Layer details, or None if it cannot be found
        """
        return util.get_or_none(self.connection, f"layers/{qualified_name}.json")

    def get_all(self) -> Dict[str, Any]:
        """Get all layers of the GeoServer."""
        return util.get_json(self.connection, "layers.json")

    def get_layers(self, workspace: str) -> Dict[str, Any]:
        """Get all layers of a workspace."""
        return util.get_json(self.connection, f"workspaces/{workspace}/layers.json")

    def modify_attribution(
        self,
        qualified_name: str,
        attribution_text: Optional[str] = None,
        attribution_link: Optional[str] = None
    ) -> None:
        """
        Sets the attribution text and link of a layer.

        Values left as None keep the current attribution.

        Raises:
            GeoServerNotFoundError: If the layer does not exist
            GeoServerResponseError: If request fails
        """
        layer_info = self.get(qualified_name)
        if layer_info is None:
            raise GeoServerNotFoundError(f"Layer {qualified_name} doesn't exist")

        layer = layer_info["layer"]
        attribution = layer.get("attribution") or {}
        if attribution_text is not None:
            attribution["title"] = attribution_text
        if attribution_link is not None:
            attribution["href"] = attribution_link
        layer["attribution"] = attribution

        util.send(self.connection, "PUT", f"layers/{qualified_name}.json", json_body=layer_info)

    # =========================================================================
    # Feature types
    # =========================================================================

    def publish_feature_type_default_data_store(
        self,
        workspace: str,
        native_name: str,
        name: str,
        title: Optional[str] = None,
        srs: str = "EPSG:4326",
        enabled: bool = True,
        abstract: str = ""
    ) -> str:
        """
        Publishes a FeatureType in the default data store of the workspace.

        Args:
            native_name: The native name of the FeatureType
            name: The published name of the FeatureType
            title: The published title (defaults to name)
        """
        body = {
            "featureType": {
                "name": name,
                "nativeName": native_name or name,
                "title": title or name,
                "srs": srs,
                "enabled": enabled,
                "abstract": abstract
            }
        }
        return util.create(
            self.connection,
            f"workspaces/{workspace}/featuretypes",
            "feature type",
            json_body=body
        )

    def publish_feature_type(
        self,
        workspace: str,
        data_store: str,
        native_name: str,
        name: str,
        title: Optional[str] = None,
        srs: str = "EPSG:4326",
        enabled: bool = True,
        abstract: str = "",
        native_bounding_box: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Publishes a FeatureType in the given data store.

        Args:
            native_bounding_box: Optional {"minx", "maxx", "miny", "maxy", "crs"}
        """
        feature_type = {
            "name": name,
            "nativeName": native_name or name,
            "title": title or name,
            "srs": srs,
            "enabled": enabled,
            "abstract": abstract
        }
        if native_bounding_box:
            feature_type["nativeBoundingBox"] = native_bounding_box

        created = util.create(
            self.connection,
            f"workspaces/{workspace}/datastores/{data_store}/featuretypes",
            "feature type",
            json_body={"featureType": feature_type}
        )
        logger.info(f"Published feature type {workspace}:{name}")
        return created

    def get_feature_type(self, workspace: str, data_store: str, name: str) -> Optional[Dict[str, Any]]:
        """Get detailed information about a FeatureType, None if missing."""
        return util.get_or_none(
            self.connection,
            f"workspaces/{workspace}/datastores/{data_store}/featuretypes/{name}.json"
        )

    def delete_feature_type(self, workspace: str, data_store: str, name: str, recurse: bool = False) -> None:
        """
        Deletes a FeatureType.

        Args:
            recurse: Also delete the layer published from the FeatureType
        """
        util.delete(
            self.connection,
            f"workspaces/{workspace}/datastores/{data_store}/featuretypes/{name}",
            recurse=recurse
        )

    def enable_time_feature_type(
        self,
        workspace: str,
        data_store: str,
        name: str,
        attribute: str,
        presentation: str = "DISCRETE_INTERVAL",
        resolution: Optional[int] = None,
        default_value: str = "MINIMUM",
        nearest_match_enabled: bool = False,
        raw_nearest_match_enabled: bool = False,
        acceptable_interval: Optional[str] = None
    ) -> None:
        """
        Enables the TIME dimension of a FeatureType.

        Args:
            attribute: Data column holding the time values
            presentation: LIST, DISCRETE_INTERVAL or CONTINUOUS_INTERVAL
            resolution: Resolution in milliseconds, e.g. 3600000 for 1 hour
            default_value: Default value strategy, e.g. MINIMUM, MAXIMUM, NEAREST
            acceptable_interval: e.g. 'PT30M'
        """
        body = {
            "featureType": {
                "name": name,
                "metadata": _time_dimension_metadata({
                    "attribute": attribute,
                    "presentation": presentation,
                    "resolution": resolution,
                    "units": "ISO8601",
                    "defaultValue": {
                        "strategy": default_value
                    },
                    "nearestMatchEnabled": nearest_match_enabled,
                    "rawNearestMatchEnabled": raw_nearest_match_enabled,
                    "acceptableInterval": acceptable_interval
                })
            }
        }
        util.send(
            self.connection,
            "PUT",
            f"workspaces/{workspace}/datastores/{data_store}/featuretypes/{name}.json",
            json_body=body
        )

    # =========================================================================
    # WMS / WMTS layers
    # =========================================================================

    def publish_wms_layer(
        self,
        workspace: str,
        data_store: str,
        native_name: str,
        name: str,
        title: Optional[str] = None,
        srs: str = "EPSG:4326",
        enabled: bool = True,
        abstract: str = ""
    ) -> str:
        """Publishes a layer of a cascaded WMS store."""
        body = {
            "wmsLayer": {
                "name": name,
                "nativeName": native_name or name,
                "title": title or name,
                "srs": srs,
                "enabled": enabled,
                "abstract": abstract
            }
        }
        created = util.create(
            self.connection,
            f"workspaces/{workspace}/wmsstores/{data_store}/wmslayers",
            "WMS layer",
            json_body=body
        )
        logger.info(f"Published WMS layer {workspace}:{name}")
        return created

    def get_wms_layer(self, workspace: str, data_store: str, layer_name: str) -> Optional[Dict[str, Any]]:
        """Get a WMS layer of a cascaded WMS store, None if missing."""
        return util.get_or_none(
            self.connection,
            f"workspaces/{workspace}/wmsstores/{data_store}/wmslayers/{layer_name}.json"
        )

    def get_wmts_layer(self, workspace: str, data_store: str, layer_name: str) -> Optional[Dict[str, Any]]:
        """Get a WMTS layer of a cascaded WMTS store, None if missing."""
        return util.get_or_none(
            self.connection,
            f"workspaces/{workspace}/wmtsstores/{data_store}/layers/{layer_name}.json"
        )

    # =========================================================================
    # Coverages
    # =========================================================================

    def publish_db_raster(
        self,
        workspace: str,
        coverage_store: str,
        native_name: str,
        name: str,
        title: Optional[str] = None,
        srs: str = "EPSG:4326",
        enabled: bool = True,
        abstract: str = ""
    ) -> str:
        """Publishes a raster stored in a database coverage store."""
        body = {
            "coverage": {
                "name": name,
                "nativeName": native_name or name,
                "title": title or name,
                "srs": srs,
                "enabled": enabled,
                "abstract": abstract
            }
        }
        return util.create(
            self.connection,
            f"workspaces/{workspace}/coveragestores/{coverage_store}/coverages",
            "coverage",
            json_body=body
        )

    def get_coverage(self, workspace: str, coverage_store: str, name: str) -> Optional[Dict[str, Any]]:
        """Get detailed information about a coverage, None if missing."""
        return util.get_or_none(
            self.connection,
            f"workspaces/{workspace}/coveragestores/{coverage_store}/coverages/{name}.json"
        )

    def rename_coverage_bands(
        self,
        workspace: str,
        coverage_store: str,
        name: str,
        band_names: List[str]
    ) -> None:
        """Renames the bands of a coverage, in band order."""
        body = {
            "coverage": {
                "dimensions": {
                    "coverageDimension": [{"name": band} for band in band_names]
                }
            }
        }
        util.send(
            self.connection,
            "PUT",
            f"workspaces/{workspace}/coveragestores/{coverage_store}/coverages/{name}.json",
            json_body=body
        )

    def enable_time_coverage(
        self,
        workspace: str,
        coverage_store: str,
        name: str,
        presentation: str = "DISCRETE_INTERVAL",
        resolution: Optional[int] = None,
        default_value: str = "MINIMUM",
        nearest_match_enabled: bool = False,
        raw_nearest_match_enabled: bool = False,
        acceptable_interval: Optional[str] = None
    ) -> None:
        """Enables the TIME dimension of a coverage (e.g. an ImageMosaic)."""
        body = {
            "coverage": {
                "metadata": _time_dimension_metadata({
                    "enabled": True,
                    "presentation": presentation,
                    "resolution": resolution,
                    "units": "ISO8601",
                    "defaultValue": {
                        "strategy": default_value
                    },
                    "nearestMatchEnabled": nearest_match_enabled,
                    "rawNearestMatchEnabled": raw_nearest_match_enabled,
                    "acceptableInterval": acceptable_interval
                })
            }
        }
        util.send(
            self.connection,
            "PUT",
            f"workspaces/{workspace}/coveragestores/{coverage_store}/coverages/{name}.json",
            json_body=body
        )
