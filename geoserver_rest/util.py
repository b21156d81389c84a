# ============================================================================
# CLAUDE CONTEXT - SHARED REQUEST PATTERNS
# ============================================================================
# STATUS: Shared - request/response patterns used by every resource client
# PURPOSE: Generic read, list, write and delete patterns with error classification
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: get_json, get_or_none, send, create, delete, bool_param
# DEPENDENCIES: httpx (via GeoServerConnection)
# ============================================================================
"""
Request patterns shared by the resource clients.

These are plain functions rather than a base class: each resource client
holds only the connection and calls the pattern that matches its endpoint.

- get_json:     GET a collection, any failure raises
- get_or_none:  GET a single item, returns None when GeoServer is up but
                the item is missing (decided by the existence probe)
- send:         any write with a status table, returns the response
- create:       POST/PUT that answers 409 with GeoServerConflictError
- delete:       DELETE with optional recurse/purge flags
"""

from typing import Any, Dict, Optional

import httpx

from .about import AboutClient
from .connection import GeoServerConnection
from .errors import (
    StatusTable,
    conflict_table,
    get_geoserver_response_text,
    raise_for_response,
    GeoServerResponseError,
)
from .util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.CLIENT, "patterns")

JSON_HEADERS = {"Content-Type": "application/json"}


def bool_param(value: Any) -> str:
    """Render a query flag the way GeoServer expects ('true' / 'false')."""
    if isinstance(value, str):
        return value.lower()
    return str(bool(value)).lower()


def _raise(
    response: httpx.Response,
    status_table: Optional[StatusTable],
    fallback_message: Optional[str],
    path: str
) -> None:
    if response.is_success:
        return
    logger.warning(
        f"GeoServer rejected request for {path} with HTTP {response.status_code}",
        extra={'custom_dimensions': {'path': path, 'status_code': response.status_code}}
    )
    raise_for_response(response, status_table, fallback_message)


def get_json(
    connection: GeoServerConnection,
    path: str,
    params: Optional[Dict[str, Any]] = None
) -> Any:
    """
    GET a JSON resource.

    Raises:
        GeoServerResponseError: If request fails
    """
    response = connection.request("GET", path, params=params)
    _raise(response, None, None, path)
    return response.json()


def get_or_none(connection: GeoServerConnection, path: str) -> Optional[Any]:
    """
    GET a single item, returning None if it does not exist.

    A failed GET is ambiguous: GeoServer answers missing items with 404 or
    with a generic error page. The existence probe decides - if GeoServer
    itself is reachable the item is treated as missing.

    Raises:
        GeoServerResponseError: If the GET fails and GeoServer is unreachable
    """
    response = connection.request("GET", path)
    if response.is_success:
        return response.json()

    if AboutClient(connection).exists():
        # GeoServer exists, but requested item does not exist, we return empty
        logger.debug(f"{path} not found (HTTP {response.status_code})")
        return None

    # There was a general problem with GeoServer
    logger.warning(
        f"GeoServer unreachable while reading {path}",
        extra={'custom_dimensions': {'path': path, 'status_code': response.status_code}}
    )
    raise GeoServerResponseError(
        None,
        get_geoserver_response_text(response),
        response.status_code
    )


def send(
    connection: GeoServerConnection,
    method: str,
    path: str,
    params: Optional[Dict[str, Any]] = None,
    json_body: Optional[Any] = None,
    content: Optional[Any] = None,
    headers: Optional[Dict[str, str]] = None,
    status_table: Optional[StatusTable] = None,
    fallback_message: Optional[str] = None
) -> httpx.Response:
    """
    Issue a write request and classify failures.

    A JSON body gets the application/json content type unless headers
    override it.

    Returns:
        The successful response

    Raises:
        GeoServerResponseError: or the subclass chosen by status_table
    """
    request_headers = dict(JSON_HEADERS) if json_body is not None else {}
    if headers:
        request_headers.update(headers)

    response = connection.request(
        method,
        path,
        params=params,
        headers=request_headers,
        json_body=json_body,
        content=content
    )
    _raise(response, status_table, fallback_message, path)
    return response


def create(
    connection: GeoServerConnection,
    path: str,
    kind: str,
    json_body: Optional[Any] = None,
    method: str = "POST",
    params: Optional[Dict[str, Any]] = None,
    content: Optional[Any] = None,
    headers: Optional[Dict[str, str]] = None,
    status_table: Optional[StatusTable] = None
) -> str:
    """
    Create a resource.

    Args:
        kind: Resource kind used in the conflict message (e.g. 'workspace')
        status_table: Extra family-specific codes, merged over the 409 entry

    Returns:
        The raw response text. GeoServer answers creates with the plain-text
        name of the new resource, so the text is the identifier. No JSON
        body is decoded here.

    Raises:
        GeoServerConflictError: If the resource already exists (409)
        GeoServerResponseError: If request fails otherwise
    """
    table = conflict_table(kind)
    if status_table:
        table.update(status_table)

    response = send(
        connection,
        method,
        path,
        params=params,
        json_body=json_body,
        content=content,
        headers=headers,
        status_table=table
    )
    return response.text


def delete(
    connection: GeoServerConnection,
    path: str,
    recurse: Optional[Any] = None,
    purge: Optional[Any] = None,
    status_table: Optional[StatusTable] = None,
    fallback_message: Optional[str] = None
) -> None:
    """
    Delete a resource.

    Args:
        recurse: Also delete dependent resources (omitted from the query if None)
        purge: Also delete the underlying files (omitted from the query if None)

    Raises:
        GeoServerResponseError: or the subclass chosen by status_table
    """
    params = {}
    if recurse is not None:
        params["recurse"] = bool_param(recurse)
    if purge is not None:
        params["purge"] = bool_param(purge)

    send(
        connection,
        "DELETE",
        path,
        params=params or None,
        status_table=status_table,
        fallback_message=fallback_message
    )
