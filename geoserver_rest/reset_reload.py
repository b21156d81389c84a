"""Client for the GeoServer reset and reload endpoints."""

from . import util
from .connection import GeoServerConnection
from .util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.CLIENT, "ResetReloadClient")


class ResetReloadClient:
    """Client for GeoServer "reset" and "reload" endpoints."""

    def __init__(self, connection: GeoServerConnection):
        self.connection = connection

    def reset(self) -> None:
        """Resets all store, raster and schema caches."""
        util.send(self.connection, "POST", "reset")
        logger.info("GeoServer caches reset")

    def reload(self) -> None:
        """Reloads the catalog and configuration from disk, then resets the caches."""
        util.send(self.connection, "POST", "reload")
        logger.info("GeoServer catalog reloaded")
