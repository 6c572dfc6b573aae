"""Log record data models."""

from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogLevel(IntEnum):
    """Severity cut points; lower numbers are more severe."""

    ERROR = 3
    WARNING = 4
    INFO = 6
    DEBUG = 7


class LogMeta(BaseModel):
    """Request context attached to a log record."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", coerce_numbers_to_str=True)

    context_id: str | None = Field(default=None, alias="contextId")
    context_duration: float | None = Field(default=None, alias="contextDuration")


class LogMessage(BaseModel):
    """A single log record as reported by a worker."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    msg: str = ""
    category: str | None = None
    elapsed: float | str | None = None
    level: int = LogLevel.INFO
    timestamp: float | None = None
    meta: LogMeta | None = None

    @field_validator("msg", mode="before")
    @classmethod
    def null_msg_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class WorkerLogBody(BaseModel):
    model_config = ConfigDict(extra="allow")

    applog: list[LogMessage | None] | None = None


class WorkerLog(BaseModel):
    """Application log block of one worker from /info/applog."""

    model_config = ConfigDict(extra="allow")

    worker: Any = None
    body: WorkerLogBody = Field(default_factory=WorkerLogBody)
