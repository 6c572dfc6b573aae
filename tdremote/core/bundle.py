"""Deployment bundle builder.

Collects the compiled scripts of the runtime directory plus the package
manifest into one DeploymentInstructions snapshot.
"""

from pathlib import Path

from tdremote.core.exceptions import ConfigurationError
from tdremote.models.deployment import (
    BuildOptions,
    DeploymentFile,
    DeploymentInstructions,
)
from tdremote.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_BUILD_OPTIONS = BuildOptions()


def _read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(
            f"cannot read {path}: {exc}",
            {"path": str(path)},
        ) from exc


class BundleBuilder:
    """Builds a fresh deployment snapshot on every call."""

    def build(
        self,
        runtime_dir: str | Path,
        manifest_path: str | Path,
        options: BuildOptions | None = DEFAULT_BUILD_OPTIONS,
    ) -> DeploymentInstructions:
        """Assemble scripts, manifest and loader stub.

        Args:
            runtime_dir: Directory whose top-level compiled scripts are shipped
            manifest_path: package.json to ship alongside the scripts
            options: Build settings; a missing value is rejected

        Returns:
            Instructions with an empty meta object and no error
        """
        if not options:
            raise ConfigurationError("bad build settings")

        runtime_dir = Path(runtime_dir)
        manifest_path = Path(manifest_path)
        if not runtime_dir.is_dir():
            raise ConfigurationError(
                f"runtime directory not found: {runtime_dir}",
                {"runtime_dir": str(runtime_dir)},
            )
        if not manifest_path.is_file():
            raise ConfigurationError(
                f"package manifest not found: {manifest_path}",
                {"manifest_path": str(manifest_path)},
            )

        files: list[DeploymentFile] = []
        for entry in self._script_entries(runtime_dir, options):
            dest = options.script_prefix + entry.name
            if dest == options.stub_path:
                logger.warning("bundle.stub_collision", file=entry.name, path=dest)
                continue
            files.append(DeploymentFile(path=dest, content=_read_source(entry)))

        files.append(
            DeploymentFile(
                path=options.manifest_destination,
                content=_read_source(manifest_path),
            )
        )
        files.append(DeploymentFile(path=options.stub_path, content=options.stub_content))

        instructions = DeploymentInstructions(meta={}, files=tuple(files))
        logger.info(
            "bundle.built",
            runtime_dir=str(runtime_dir),
            files=len(instructions.files),
        )
        return instructions

    @staticmethod
    def _script_entries(runtime_dir: Path, options: BuildOptions) -> list[Path]:
        # Each script is independent, so name order is as good as any.
        return sorted(
            (
                p
                for p in runtime_dir.iterdir()
                if p.name.endswith(options.script_extension) and p.is_file()
            ),
            key=lambda p: p.name,
        )
