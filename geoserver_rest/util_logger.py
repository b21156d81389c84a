# ============================================================================
# CLAUDE CONTEXT - LOGGING
# ============================================================================
# STATUS: Shared - used by every resource client and the connection layer
# PURPOSE: JSON-only structured logging for GeoServer REST calls
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: ComponentType, LogLevel, ComponentConfig, JSONFormatter, LoggerFactory, log_exceptions
# DEPENDENCIES: enum, dataclasses, typing, datetime, logging, json, traceback (stdlib only!)
# PATTERNS: JSON-only output, component-specific loggers, exception decorator
# ENTRY_POINTS: LoggerFactory.create_logger(), @log_exceptions decorator
# ============================================================================

"""
Unified Logger System for the GeoServer REST client.

Every logger is created through LoggerFactory so that all output shares a
single JSON shape with component information attached as custom dimensions.
Records propagate to the host application's logging configuration. The
library only writes JSON lines to stdout itself when
GEOSERVER_REST_DEBUG_LOGGING=true.

Design Principles:
- Strong typing with dataclasses (stdlib only)
- Enum safety for categories
- Component-specific loggers
- Clean factory pattern
"""

from enum import Enum
from typing import Optional, Dict, Any
from datetime import datetime, timezone
from dataclasses import dataclass
import logging
import os
import sys
import json
import traceback
from functools import wraps


# Python 3.11+ counts this wrapper as a caller frame when resolving stacklevel
_WRAPPER_STACKLEVEL = 1 if sys.version_info >= (3, 11) else 0


# ============================================================================
# COMPONENT TYPES
# ============================================================================

class ComponentType(Enum):
    """
    Component types of the client library.

    NO "UTIL" or other non-architectural types.
    """
    FACADE = "facade"          # GeoServerRestClient
    CLIENT = "client"          # Per-resource REST clients
    PROBE = "probe"            # Existence prober (about endpoint)
    TRANSPORT = "transport"    # HTTP request primitive
    CONFIG = "config"          # Settings loading


# ============================================================================
# LOG LEVELS - Standard Python levels with enum safety
# ============================================================================

class LogLevel(Enum):
    """
    Standard Python log levels as enum for type safety.
    """
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_python_level(self) -> int:
        """Convert to Python logging level constant."""
        return getattr(logging, self.value)

    @classmethod
    def from_string(cls, level: str) -> 'LogLevel':
        """Create from string, case-insensitive."""
        return cls[level.upper()]


# ============================================================================
# COMPONENT CONFIGURATION - Per-component settings
# ============================================================================

@dataclass
class ComponentConfig:
    """
    Configuration for component-specific logging.
    """
    component_type: ComponentType
    log_level: LogLevel = LogLevel.INFO
    max_message_length: int = 1000


# ============================================================================
# JSON FORMATTER
# ============================================================================

class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.
    """

    def __init__(self, max_message_length: int = 1000):
        super().__init__()
        self.max_message_length = max_message_length

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as a single JSON line.

        Args:
            record: Python LogRecord to format

        Returns:
            JSON string with structured log data
        """
        log_obj = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'message': record.getMessage()[:self.max_message_length],
            'logger': record.name,
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if hasattr(record, 'custom_dimensions'):
            log_obj['customDimensions'] = record.custom_dimensions

        if record.exc_info:
            log_obj['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else None,
                'message': str(record.exc_info[1]) if record.exc_info[1] else None,
                'traceback': self.formatException(record.exc_info)
            }

        return json.dumps(log_obj, default=str)


# ============================================================================
# LOGGER FACTORY - Creates component-specific loggers
# ============================================================================

class LoggerFactory:
    """
    Factory for creating component-specific loggers.

    Example:
        logger = LoggerFactory.create_logger(
            ComponentType.CLIENT,
            "WorkspaceClient"
        )
        logger.info("Creating workspace")
    """

    debug_logging = os.getenv('GEOSERVER_REST_DEBUG_LOGGING', '').lower() == 'true'

    default_level = LogLevel.DEBUG if debug_logging else LogLevel.INFO

    DEFAULT_CONFIGS = {
        ComponentType.FACADE: ComponentConfig(
            component_type=ComponentType.FACADE,
            log_level=default_level
        ),
        ComponentType.CLIENT: ComponentConfig(
            component_type=ComponentType.CLIENT,
            log_level=default_level
        ),
        ComponentType.PROBE: ComponentConfig(
            component_type=ComponentType.PROBE,
            log_level=default_level
        ),
        ComponentType.TRANSPORT: ComponentConfig(
            component_type=ComponentType.TRANSPORT,
            log_level=default_level,
            max_message_length=2000
        ),
        ComponentType.CONFIG: ComponentConfig(
            component_type=ComponentType.CONFIG,
            log_level=default_level
        )
    }

    @classmethod
    def create_logger(
        cls,
        component_type: ComponentType,
        name: str,
        config: Optional[ComponentConfig] = None
    ) -> logging.Logger:
        """
        Create a logger for a specific component.

        Args:
            component_type: Type of component
            name: Component name (e.g., "DatastoreClient")
            config: Optional custom configuration

        Returns:
            Configured Python logger
        """
        if config is None:
            config = cls.DEFAULT_CONFIGS.get(
                component_type,
                ComponentConfig(component_type=component_type)
            )

        # Hierarchical name keeps everything under the package logger
        logger_name = f"geoserver_rest.{component_type.value}.{name}"
        logger = logging.getLogger(logger_name)

        if isinstance(config.log_level, str):
            log_level = LogLevel.from_string(config.log_level).to_python_level()
        else:
            log_level = config.log_level.to_python_level()
        logger.setLevel(log_level)

        # Remove existing handlers to avoid duplicates
        logger.handlers.clear()

        # JSON to stdout is opt-in, otherwise the host application decides
        if cls.debug_logging:
            handler = logging.StreamHandler(sys.stdout)
            handler.setLevel(log_level)
            handler.setFormatter(JSONFormatter(config.max_message_length))
        else:
            handler = logging.NullHandler()
        logger.addHandler(handler)

        logger.propagate = True

        original_log = logger._log

        def log_with_context(level, msg, args, exc_info=None, extra=None, stack_info=False, stacklevel=1):
            """Wrapper to inject component info as custom dimensions."""
            if extra is None:
                extra = {}

            custom_dims = {
                'component_type': component_type.value,
                'component_name': name
            }
            if 'custom_dimensions' in extra:
                custom_dims.update(extra['custom_dimensions'])
            extra['custom_dimensions'] = custom_dims

            original_log(level, msg, args, exc_info=exc_info, extra=extra,
                         stack_info=stack_info, stacklevel=stacklevel + _WRAPPER_STACKLEVEL)

        logger._log = log_with_context

        return logger


# ============================================================================
# EXCEPTION DECORATOR - Automatic exception logging with context
# ============================================================================

def log_exceptions(component_type: Optional[ComponentType] = None,
                   component_name: Optional[str] = None,
                   logger: Optional[logging.Logger] = None):
    """
    Decorator to log exceptions with full context, then re-raise them.

    Can be used in three ways:
    1. With existing logger: @log_exceptions(logger=my_logger)
    2. With component info: @log_exceptions(ComponentType.CLIENT, "DatastoreClient")
    3. Simple: @log_exceptions() - uses function module and name

    Example:
        @log_exceptions(ComponentType.CLIENT, "DatastoreClient")
        def create_geotiff_from_file(self, ...):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if logger:
                log = logger
            elif component_type and component_name:
                log = LoggerFactory.create_logger(component_type, component_name)
            else:
                log = LoggerFactory.create_logger(
                    ComponentType.CLIENT,
                    func.__module__ or "unknown"
                )

            try:
                return func(*args, **kwargs)
            except Exception as e:
                log.error(
                    f"Exception in {func.__name__}",
                    exc_info=True,
                    extra={
                        'custom_dimensions': {
                            'function_name': func.__name__,
                            'function_module': func.__module__,
                            'exception_type': type(e).__name__,
                            'exception_message': str(e),
                            'function_args': str(args[1:])[:500],
                            'function_kwargs': str(kwargs)[:500],
                            'traceback': traceback.format_exc()
                        }
                    }
                )
                # Re-raise the exception - don't swallow it
                raise
        return wrapper
    return decorator


def get_custom_dimensions(record: logging.LogRecord) -> Dict[str, Any]:
    """Return the custom dimensions attached to a record (empty if none)."""
    return getattr(record, 'custom_dimensions', {}) or {}
