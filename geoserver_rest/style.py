# ============================================================================
# CLAUDE CONTEXT - STYLE CLIENT
# ============================================================================
# STATUS: Resource Client - styles
# PURPOSE: List, publish, assign and delete SLD styles
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: StyleClient
# DEPENDENCIES: geoserver_rest.util, geoserver_rest.workspace
# ============================================================================
"""Client for GeoServer styles."""

from typing import Any, Dict, List, Optional

from . import util
from .connection import GeoServerConnection
from .errors import GeoServerNotEmptyError
from .workspace import WorkspaceClient
from .util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.CLIENT, "StyleClient")

SLD_HEADERS = {"Content-Type": "application/vnd.ogc.sld+xml"}

DELETE_STATUS_TABLE = {
    403: (
        GeoServerNotEmptyError,
        'Deletion failed. There might be dependant layers to this style. '
        'Delete them first or call this with "recurse=false"'
    ),
}


def _style_list(payload: Any) -> List[Dict[str, Any]]:
    """Extract the style list from a styles.json payload ({"styles": ""} when empty)."""
    styles = payload.get("styles") if isinstance(payload, dict) else None
    if not isinstance(styles, dict):
        return []
    style = styles.get("style") or []
    return style if isinstance(style, list) else [style]


class StyleClient:
    """Client for GeoServer styles."""

    def __init__(self, connection: GeoServerConnection):
        self.connection = connection

    def get_defaults(self) -> Dict[str, Any]:
        """Returns all default styles (styles not bound to a workspace)."""
        return util.get_json(self.connection, "styles.json")

    def get_in_workspace(self, workspace: str) -> Dict[str, Any]:
        """Returns all styles in a workspace."""
        return util.get_json(self.connection, f"workspaces/{workspace}/styles.json")

    def get_all_workspace_styles(self) -> List[Dict[str, Any]]:
        """
        Returns all styles defined in workspaces.

        Issues one request per workspace.
        """
        workspaces = WorkspaceClient(self.connection).get_all()
        workspace_list = (workspaces.get("workspaces") or {}).get("workspace") or []
        if isinstance(workspace_list, dict):
            workspace_list = [workspace_list]

        all_styles = []
        for ws in workspace_list:
            all_styles.extend(_style_list(self.get_in_workspace(ws["name"])))
        return all_styles

    def get_all(self) -> List[Dict[str, Any]]:
        """Returns all styles: the default ones followed by every workspace style."""
        return _style_list(self.get_defaults()) + self.get_all_workspace_styles()

    def publish(self, workspace: str, name: str, sld_body: str) -> str:
        """
        Publishes a new SLD style.

        Args:
            workspace: The workspace to publish the style in
            name: Name of the style
            sld_body: SLD style (as XML text)

        Raises:
            GeoServerConflictError: If the style already exists
            GeoServerResponseError: If request fails
        """
        created = util.create(
            self.connection,
            f"workspaces/{workspace}/styles",
            "style",
            params={"name": name},
            content=sld_body.encode("utf-8"),
            headers=SLD_HEADERS
        )
        logger.info(f"Published style {workspace}:{name}")
        return created

    def delete(
        self,
        workspace: Optional[str],
        name: str,
        recurse: bool = False,
        purge: bool = False
    ) -> None:
        """
        Deletes a style.

        Args:
            workspace: Workspace of the style, None for a global style
            recurse: Also remove references to the style from layers
            purge: Also delete the SLD file from disk

        Raises:
            GeoServerNotEmptyError: If layers still use the style
            GeoServerResponseError: If request fails
        """
        if workspace:
            path = f"workspaces/{workspace}/styles/{name}"
        else:
            path = f"styles/{name}"

        util.delete(
            self.connection,
            path,
            recurse=recurse,
            purge=purge,
            status_table=DELETE_STATUS_TABLE
        )

    def assign_style_to_layer(
        self,
        qualified_name: str,
        style_name: str,
        workspace_style: Optional[str] = None,
        is_default_style: bool = True
    ) -> None:
        """
        Assigns a style to a layer.

        Args:
            qualified_name: GeoServer layer name with workspace prefix
            style_name: The name of the style
            workspace_style: The workspace of the style, None for a global style
            is_default_style: Make it the layer's default style
        """
        qualified_style_name = f"{workspace_style}:{style_name}" if workspace_style else style_name
        body = {"style": {"name": qualified_style_name}}
        util.send(
            self.connection,
            "POST",
            f"layers/{qualified_name}/styles",
            params={"default": util.bool_param(is_default_style)},
            json_body=body
        )

    def get_style_information(self, style_name: str, workspace: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """Get information about a style, None if it cannot be found."""
        if workspace:
            path = f"workspaces/{workspace}/styles/{style_name}.json"
        else:
            path = f"styles/{style_name}.json"
        return util.get_or_none(self.connection, path)
