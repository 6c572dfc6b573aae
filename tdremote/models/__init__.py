"""Data models for tdremote."""

from tdremote.models.deployment import (
    BuildOptions,
    DeploymentFile,
    DeploymentInstructions,
)
from tdremote.models.logs import (
    LogLevel,
    LogMessage,
    LogMeta,
    WorkerLog,
    WorkerLogBody,
)
from tdremote.models.settings import (
    DELETE,
    AppSettings,
    ConfigSetting,
    DeleteMarker,
    PatchValue,
)

__all__ = [
    # Deployment models
    "BuildOptions",
    "DeploymentFile",
    "DeploymentInstructions",
    # Log models
    "LogLevel",
    "LogMessage",
    "LogMeta",
    "WorkerLog",
    "WorkerLogBody",
    # Config store models
    "AppSettings",
    "ConfigSetting",
    "DELETE",
    "DeleteMarker",
    "PatchValue",
]
