# ============================================================================
# CLAUDE CONTEXT - SETTINGS CLIENT
# ============================================================================
# STATUS: Resource Client - global settings and contact information
# PURPOSE: Read and update GeoServer global settings
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: SettingsClient
# DEPENDENCIES: geoserver_rest.util, geoserver_rest.models
# ============================================================================
"""
Client for GeoServer settings.

Not to be confused with geoserver_rest.config, which configures this
library itself.
"""

from typing import Any, Dict, Optional

from . import util
from .connection import GeoServerConnection
from .models import ContactInformation
from .util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.CLIENT, "SettingsClient")


class SettingsClient:
    """Client for GeoServer settings."""

    def __init__(self, connection: GeoServerConnection):
        self.connection = connection

    def get_settings(self) -> Dict[str, Any]:
        """Get the complete GeoServer settings object."""
        return util.get_json(self.connection, "settings.json")

    def update_settings(self, settings: Dict[str, Any]) -> None:
        """Update the global GeoServer settings."""
        util.send(self.connection, "PUT", "settings", json_body=settings)

    def update_proxy_base_url(self, proxy_base_url: str) -> bool:
        """
        Update the global proxyBaseUrl setting.

        Returns:
            False if the settings payload lacks global.settings, True otherwise
        """
        settings_json = self.get_settings()

        global_settings = (settings_json.get("global") or {}).get("settings")
        if not isinstance(global_settings, dict):
            logger.warning("Settings payload has no global.settings, proxyBaseUrl not updated")
            return False

        global_settings["proxyBaseUrl"] = proxy_base_url
        self.update_settings(settings_json)
        return True

    def get_contact_information(self) -> ContactInformation:
        """Get the contact information of the GeoServer."""
        payload = util.get_json(self.connection, "settings/contact")
        return ContactInformation.model_validate(payload.get("contact") or {})

    def update_contact_information(
        self,
        address: Optional[str] = None,
        city: Optional[str] = None,
        country: Optional[str] = None,
        postal_code: Optional[str] = None,
        state: Optional[str] = None,
        email: Optional[str] = None,
        organization: Optional[str] = None,
        contact_person: Optional[str] = None,
        phone_number: Optional[str] = None
    ) -> None:
        """
        Update the contact information.

        Fields left as None are not sent. Deleting is not supported.
        """
        contact = ContactInformation(
            address=address,
            city=city,
            country=country,
            postal_code=postal_code,
            state=state,
            email=email,
            organization=organization,
            contact_person=contact_person,
            phone_number=phone_number
        )
        util.send(self.connection, "PUT", "settings/contact", json_body=contact.to_request_body())
