# ============================================================================
# CLAUDE CONTEXT - SECURITY CLIENT
# ============================================================================
# STATUS: Resource Client - users and roles
# PURPOSE: Manage GeoServer users and user/role associations
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: SecurityClient
# DEPENDENCIES: geoserver_rest.util
# ============================================================================
"""Client for GeoServer security (default user/group service)."""

from typing import Any, Dict

from . import util
from .connection import GeoServerConnection
from .errors import GeoServerConflictError
from .util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.CLIENT, "SecurityClient")


class SecurityClient:
    """Client for GeoServer security."""

    def __init__(self, connection: GeoServerConnection):
        self.connection = connection

    def get_all_users(self) -> Dict[str, Any]:
        """Returns all users registered in GeoServer."""
        return util.get_json(self.connection, "security/usergroup/users.json")

    def create_user(self, username: str, password: str) -> str:
        """
        Creates a new user. The user is enabled.

        GeoServer reports an existing user with 404 instead of 409.

        Raises:
            GeoServerConflictError: If the user already exists
            GeoServerResponseError: If request fails
        """
        body = {
            "user": {
                "userName": username,
                "password": password,
                "enabled": True
            }
        }
        created = util.create(
            self.connection,
            "security/usergroup/users.json",
            "user",
            json_body=body,
            status_table={
                404: (GeoServerConflictError, f"User {username} might already exist"),
            }
        )
        logger.info(f"Created user {username}")
        return created

    def update_user(self, username: str, password: str, enabled: bool) -> None:
        """Updates the password and enabled state of an existing user."""
        body = {
            "user": {
                "password": password,
                "enabled": enabled
            }
        }
        util.send(self.connection, "POST", f"security/usergroup/user/{username}.json", json_body=body)

    def associate_user_role(self, username: str, role: str) -> None:
        """Associates the given role to the user."""
        util.send(self.connection, "POST", f"security/roles/role/{role}/user/{username}")

    def delete_user(self, username: str) -> None:
        """Deletes a user."""
        util.delete(self.connection, f"security/usergroup/user/{username}")
        logger.info(f"Deleted user {username}")
