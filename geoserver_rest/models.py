# ============================================================================
# CLAUDE CONTEXT - GEOSERVER MODELS
# ============================================================================
# STATUS: Shared Models - typed views of selected GeoServer payloads
# PURPOSE: Pydantic models for version info and contact information
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: VersionResource, VersionInfo, ContactInformation
# DEPENDENCIES: pydantic
# VALIDATION: Pydantic v2 validation
# ============================================================================

"""
Typed models for GeoServer payloads that the client decodes.

Most endpoints return arbitrary catalog JSON which is handed back as a
dict. The models here cover the payloads the client itself inspects.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class VersionResource(BaseModel):
    """
    One component entry of about/version.json.

    Example:
        {"@name": "GeoServer", "Version": "2.24.1", "Git-Revision": "..."}
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: Optional[str] = Field(default=None, alias="@name")
    version: Optional[str] = Field(default=None, alias="Version")
    build_timestamp: Optional[str] = Field(default=None, alias="Build-Timestamp")
    git_revision: Optional[str] = Field(default=None, alias="Git-Revision")


class VersionInfo(BaseModel):
    """Parsed about/version.json response."""
    resources: List[VersionResource] = Field(default_factory=list)

    @classmethod
    def from_response(cls, payload: dict) -> 'VersionInfo':
        """Build from the raw {"about": {"resource": [...]}} payload."""
        resources = (payload.get("about") or {}).get("resource") or []
        # GeoServer collapses single-element lists into an object
        if isinstance(resources, dict):
            resources = [resources]
        return cls(resources=resources)

    def get_version(self, component: str = "GeoServer") -> Optional[str]:
        """Return the version string of a component, None if absent."""
        for resource in self.resources:
            if resource.name == component:
                return resource.version
        return None


class ContactInformation(BaseModel):
    """
    GeoServer contact settings (settings/contact).

    Field names follow Python conventions; aliases are the GeoServer keys.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow", coerce_numbers_to_str=True)

    address: Optional[str] = None
    city: Optional[str] = Field(default=None, alias="addressCity")
    country: Optional[str] = Field(default=None, alias="addressCountry")
    postal_code: Optional[str] = Field(default=None, alias="addressPostalCode")
    state: Optional[str] = Field(default=None, alias="addressState")
    email: Optional[str] = Field(default=None, alias="contactEmail")
    organization: Optional[str] = Field(default=None, alias="contactOrganization")
    contact_person: Optional[str] = Field(default=None, alias="contactPerson")
    phone_number: Optional[str] = Field(default=None, alias="contactVoice")

    def to_request_body(self) -> dict:
        """Serialize to the {"contact": {...}} body GeoServer expects."""
        return {"contact": self.model_dump(by_alias=True, exclude_none=True)}
