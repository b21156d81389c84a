# ============================================================================
# CLAUDE CONTEXT - GEOSERVER ERRORS
# ============================================================================
# STATUS: Shared - error taxonomy for all resource clients
# PURPOSE: Classify GeoServer HTTP failures into typed exceptions
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: GeoServerResponseError, GeoServerConflictError, GeoServerNotEmptyError,
#          GeoServerNotFoundError, GeoServerProtectedResourceError, GeoServerRequestError,
#          get_geoserver_response_text, raise_for_response, StatusTable
# DEPENDENCIES: httpx
# ============================================================================
"""
GeoServer error taxonomy.

Every failure a resource client raises is a GeoServerResponseError. The
subclasses let callers tell apart the cases GeoServer reports with a
specific status code (conflict, not empty, missing, protected). The raw
GeoServer output is always attached for diagnostics.

A lookup of a single item that does not exist is NOT an error: the read
pattern returns None in that case (see geoserver_rest.util).
"""

from typing import Dict, Optional, Tuple, Type

import httpx


class GeoServerResponseError(Exception):
    """
    Generic GeoServer error.

    Attributes:
        message: Human-readable description
        geoserver_output: Raw response text from GeoServer (useful for debugging)
        status_code: HTTP status code, None for transport failures
    """

    default_message = "GeoServer Response Error"

    def __init__(
        self,
        message: Optional[str] = None,
        geoserver_output: Optional[str] = None,
        status_code: Optional[int] = None
    ):
        self.message = message or self.default_message
        self.geoserver_output = geoserver_output
        self.status_code = status_code
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message


class GeoServerConflictError(GeoServerResponseError):
    """Creation failed because an item with the same identifier already exists."""


class GeoServerNotEmptyError(GeoServerResponseError):
    """Deletion blocked by dependent resources and recurse was not requested."""


class GeoServerNotFoundError(GeoServerResponseError):
    """The targeted item does not exist (raised by delete / modify operations)."""


class GeoServerProtectedResourceError(GeoServerResponseError):
    """The targeted item is a default or protected resource and cannot be removed."""


class GeoServerRequestError(GeoServerResponseError):
    """The request never produced an HTTP response (connection error, timeout)."""

    default_message = "Unable to reach GeoServer"


# Maps a status code to the error class and message raised for it
StatusTable = Dict[int, Tuple[Type[GeoServerResponseError], str]]


def get_geoserver_response_text(response: httpx.Response) -> Optional[str]:
    """
    Return the GeoServer response text if available.

    Never raises - a body that cannot be read or decoded yields None.
    """
    try:
        return response.text
    except (httpx.ResponseNotRead, httpx.StreamError, UnicodeDecodeError, LookupError):
        return None


def raise_for_response(
    response: httpx.Response,
    status_table: Optional[StatusTable] = None,
    fallback_message: Optional[str] = None
) -> None:
    """
    Raise the classified error for a non-2xx response.

    Args:
        response: Response returned by GeoServer
        status_table: Family-specific status code mapping
        fallback_message: Message for codes missing from the table

    Raises:
        GeoServerResponseError: or the subclass selected by status_table
    """
    if response.is_success:
        return

    geoserver_output = get_geoserver_response_text(response)
    error_class, message = (status_table or {}).get(
        response.status_code,
        (GeoServerResponseError, fallback_message)
    )
    raise error_class(message, geoserver_output, response.status_code)


def conflict_table(kind: str) -> StatusTable:
    """Status table shared by every create operation."""
    return {
        409: (GeoServerConflictError, f"Unable to add {kind} as it already exists"),
    }
