"""Client for the remote key-value configuration store."""

import json
import re
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping

from pydantic import ValidationError

from tdremote.core.exceptions import ConfigurationError, MalformedResponseError
from tdremote.models.settings import DELETE, AppSettings, DeleteMarker, PatchValue
from tdremote.utils.logging import get_logger

if TYPE_CHECKING:
    from tdremote.transport.base import Transport

logger = get_logger(__name__)

GET_CONFIG_PATH = "/getconfig"
SET_CONFIG_PATH = "/setconfig"

NULL_LITERAL = "null"

_ASSIGNMENT_RE = re.compile(r"^(\w+)=(.*)$", re.DOTALL)


def parse_assignment(token: str) -> dict[str, PatchValue] | None:
    """Parse ``VAR=val`` into a one-key patch; ``VAR=null`` deletes.

    Returns None when the token is not an assignment.
    """
    m = _ASSIGNMENT_RE.match(token)
    if not m:
        return None
    name, value = m.group(1), m.group(2)
    return {name: DELETE if value == NULL_LITERAL else value}


def load_patch_file(path: str | Path) -> dict[str, PatchValue]:
    """Read a JSON object patch; JSON null values become deletions."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"cannot read config file {path}: {exc}") from exc
    except ValueError as exc:
        raise ConfigurationError(f"config file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"config file {path} must contain a JSON object")

    patch: dict[str, PatchValue] = {}
    for name, value in data.items():
        if value is None:
            patch[name] = DELETE
        elif isinstance(value, str):
            patch[name] = value
        else:
            patch[name] = json.dumps(value)
    return patch


class ConfigClient:
    """Fetch, merge and push the remote settings.

    Writes are never assumed to echo back what was sent, so every update
    ends with a fresh read.
    """

    def __init__(self, transport: "Transport", null_string_deletes: bool = True):
        self.transport = transport
        self.null_string_deletes = null_string_deletes

    async def get(self) -> dict[str, str]:
        response = await self.transport.send(GET_CONFIG_PATH)
        response.raise_for_status()
        try:
            return AppSettings.model_validate(response.json()).to_mapping()
        except ValidationError as exc:
            raise MalformedResponseError(
                f"expected an AppSettings list: {exc}", path=response.path
            ) from exc

    def is_deletion(self, value: Any) -> bool:
        if value is None or isinstance(value, DeleteMarker):
            return True
        return self.null_string_deletes and value == NULL_LITERAL

    def merge(
        self,
        current: Mapping[str, str],
        patch: Mapping[str, PatchValue],
    ) -> dict[str, str]:
        """Apply a patch to a mapping without touching the input."""
        merged = dict(current)
        for name, value in patch.items():
            if self.is_deletion(value):
                merged.pop(name, None)
            else:
                merged[name] = value
        return merged

    async def set(self, patch: Mapping[str, PatchValue]) -> dict[str, str]:
        """Merge ``patch`` into the remote settings and return the re-read state.

        An empty patch only pokes the remote process into reloading.
        """
        if not patch:
            await self.restart()
            return await self.get()

        merged = self.merge(await self.get(), patch)
        await self._push(merged)
        return await self.get()

    async def replace(self, mapping: Mapping[str, str]) -> dict[str, str]:
        """Push ``mapping`` as the complete settings set."""
        await self._push(dict(mapping))
        return await self.get()

    async def restart(self) -> None:
        """Send the empty update the remote side treats as a reload request."""
        logger.info("config.restart")
        response = await self.transport.send(SET_CONFIG_PATH, {})
        response.raise_for_status()

    async def _push(self, mapping: dict[str, str]) -> None:
        logger.info("config.push", settings=len(mapping))
        payload = AppSettings.from_mapping(mapping).to_payload()
        response = await self.transport.send(SET_CONFIG_PATH, payload)
        response.raise_for_status()
