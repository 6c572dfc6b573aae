"""Deployment bundle data models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DeploymentFile(BaseModel):
    """A single file of a deployment, either inlined or referenced by URL."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path: str = Field(min_length=1)
    content: str | None = None
    url: str | None = None
    source_name: str | None = Field(default=None, alias="sourceName")
    kind: str | None = None
    is_unused: bool | None = Field(default=None, alias="isUnused")

    @model_validator(mode="after")
    def check_content_or_url(self) -> "DeploymentFile":
        if (self.content is None) == (self.url is None):
            raise ValueError(f"{self.path}: exactly one of content or url must be set")
        return self


class DeploymentInstructions(BaseModel):
    """One atomic deployment snapshot sent to /deploy."""

    model_config = ConfigDict(frozen=True)

    meta: dict[str, Any] = Field(default_factory=dict)
    files: tuple[DeploymentFile, ...] = ()
    error: str | None = None

    @model_validator(mode="after")
    def check_unique_paths(self) -> "DeploymentInstructions":
        seen: set[str] = set()
        for f in self.files:
            if f.path in seen:
                raise ValueError(f"duplicate deployment path: {f.path}")
            seen.add(f.path)
        return self

    @property
    def paths(self) -> list[str]:
        return [f.path for f in self.files]

    def to_payload(self) -> dict[str, Any]:
        """Wire form: camelCase keys, unset fields left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class BuildOptions(BaseModel):
    """Settings for assembling a deployment bundle."""

    model_config = ConfigDict(frozen=True)

    script_extension: str = ".js"
    script_prefix: str = "script/"
    manifest_destination: str = "package.json"
    stub_path: str = "script/compiled.js"
    entry_module: str = "tdlite.js"

    @property
    def stub_content(self) -> str:
        """Loader line that boots the packaged entry module on the remote side."""
        return f'require("./{self.entry_module}");\n'
