"""Client configuration using pydantic-settings."""

from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tdremote.core.exceptions import ConfigurationError

TARGET_HELP = "need TD_UPLOAD_TARGET=https://somewhere.com/-tdevmgmt-/seCreTc0deheRE"


class ClientConfig(BaseSettings):
    """Settings for one CLI invocation, loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Remote environment
    upload_target: str = ""
    secure_channel: str | None = None  # "module:attribute" of the tunnel factory

    # Output
    interactive: bool | None = None

    # Deployment bundle
    runtime_dir: Path = Field(default_factory=Path.cwd)
    manifest_path: Path | None = None

    # Config store
    null_string_deletes: bool = True

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["console", "json"] = "console"

    @property
    def target(self) -> str:
        return self.upload_target

    @property
    def uses_tunnel(self) -> bool:
        """Targets that are not HTTPS URLs go through the encrypted tunnel."""
        return not self.target.startswith("https:")

    @property
    def resolved_manifest_path(self) -> Path:
        """Package manifest, by default next to the runtime directory."""
        if self.manifest_path is not None:
            return self.manifest_path
        return self.runtime_dir / ".." / "package.json"

    def require_target(self) -> str:
        """Return the target or raise if it is not configured."""
        if not self.target:
            raise ConfigurationError(TARGET_HELP)
        return self.target


def load_config(**overrides) -> ClientConfig:
    """Build a fresh configuration; keyword overrides beat the environment."""
    load_dotenv()
    return ClientConfig(**overrides)
