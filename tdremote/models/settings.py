"""Remote configuration store data models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DeleteMarker:
    """Patch value requesting removal of a setting."""

    _instance: "DeleteMarker | None" = None

    def __new__(cls) -> "DeleteMarker":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "DELETE"


DELETE = DeleteMarker()

PatchValue = str | DeleteMarker | None


class ConfigSetting(BaseModel):
    """One name/value pair on the wire."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    Name: str
    Value: str | None = None


class AppSettings(BaseModel):
    """Envelope used by /getconfig and /setconfig."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    settings: list[ConfigSetting] = Field(alias="AppSettings")

    @classmethod
    def from_mapping(cls, mapping: dict[str, str]) -> "AppSettings":
        return cls(AppSettings=[ConfigSetting(Name=k, Value=v) for k, v in mapping.items()])

    def to_mapping(self) -> dict[str, str]:
        """Collapse the list into a mapping; a repeated name keeps its last value."""
        result: dict[str, str] = {}
        for s in self.settings:
            if s.Value is None:
                # unset on the remote side
                result.pop(s.Name, None)
                continue
            result[s.Name] = s.Value
        return result

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
