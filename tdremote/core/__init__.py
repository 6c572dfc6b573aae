"""Core functionality for tdremote."""

from tdremote.core.exceptions import (
    ConfigurationError,
    MalformedResponseError,
    RemoteAdminError,
    TransportError,
)
from tdremote.core.bundle import BundleBuilder
from tdremote.core.logs import LogAggregator, LogLine, classify, format_message
from tdremote.core.remote_config import (
    ConfigClient,
    load_patch_file,
    parse_assignment,
)

__all__ = [
    "ConfigurationError",
    "MalformedResponseError",
    "RemoteAdminError",
    "TransportError",
    "BundleBuilder",
    "LogAggregator",
    "LogLine",
    "classify",
    "format_message",
    "ConfigClient",
    "load_patch_file",
    "parse_assignment",
]
