# ============================================================================
# CLAUDE CONTEXT - GEOSERVER CONNECTION
# ============================================================================
# STATUS: Shared - connection context handed to every resource client
# PURPOSE: Immutable base URL + Basic auth + the single HTTP request primitive
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: GeoServerConnection, build_basic_auth, normalize_url
# DEPENDENCIES: httpx (sync)
# ============================================================================
"""
GeoServer connection context.

The façade builds one GeoServerConnection and shares it by reference with
every resource client. It is frozen: no client keeps any other state
between calls.

The httpx.Client is the transport collaborator. Whatever timeout or
cancellation behaviour it is configured with is what callers get - this
module adds none of its own and never retries.
"""

import base64
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from .errors import GeoServerRequestError
from .util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.TRANSPORT, "GeoServerConnection")


def normalize_url(url: str) -> str:
    """Guarantee a trailing path separator on the REST base URL."""
    return url if url.endswith('/') else url + '/'


def build_basic_auth(user: str, password: str) -> str:
    """Encode user:password as a Basic authentication header value."""
    token = base64.b64encode(f"{user}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


@dataclass(frozen=True)
class GeoServerConnection:
    """
    Connection context shared by all resource clients.

    Attributes:
        url: GeoServer REST endpoint, always ending with '/'
        auth: Pre-encoded Basic authentication string
        http: Transport used for every request
    """
    url: str
    auth: str
    http: httpx.Client

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        json_body: Optional[Any] = None,
        content: Optional[Any] = None
    ) -> httpx.Response:
        """
        Issue one HTTP request against the REST API.

        Args:
            method: HTTP verb
            path: Path relative to the REST base URL (e.g. 'workspaces.json')
            params: Query parameters
            headers: Extra headers (Authorization is always added)
            json_body: Body serialized as JSON
            content: Raw body (str, bytes or a binary file object)

        Returns:
            The httpx.Response, whatever its status code

        Raises:
            GeoServerRequestError: If no response was received
        """
        url = self.url + path
        request_headers = {"Authorization": self.auth}
        if headers:
            request_headers.update(headers)

        start_time = time.perf_counter()
        try:
            response = self.http.request(
                method,
                url,
                params=params,
                headers=request_headers,
                json=json_body,
                content=content
            )
        except httpx.RequestError as e:
            logger.warning(
                f"{method} {path} failed: {e}",
                extra={'custom_dimensions': {'method': method, 'path': path}}
            )
            raise GeoServerRequestError(f"Request to GeoServer failed: {e}") from e

        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        logger.debug(
            f"{method} {path} -> {response.status_code}",
            extra={'custom_dimensions': {
                'method': method,
                'path': path,
                'status_code': response.status_code,
                'duration_ms': duration_ms
            }}
        )
        return response
