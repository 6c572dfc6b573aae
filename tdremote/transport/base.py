"""Transport abstraction shared by the HTTPS and tunnel variants."""

import gzip
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from tdremote.core.exceptions import MalformedResponseError, TransportError
from tdremote.utils.logging import get_logger

GZIP_MAGIC = b"\x1f\x8b"

JSON_CONTENT_TYPE = "application/json;charset=utf8"


@dataclass
class Response:
    """Reply from the remote side; owned by the call that produced it."""

    status_code: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)
    path: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def raise_for_status(self) -> "Response":
        """Raise TransportError for a non-2xx status, otherwise return self."""
        if not self.ok:
            raise TransportError(
                f"{self.path or 'request'} failed with status {self.status_code}",
                status_code=self.status_code,
                path=self.path,
            )
        return self

    def json(self) -> Any:
        """Decode the body as JSON, gunzipping it first if still compressed."""
        body = self.body
        try:
            if body[:2] == GZIP_MAGIC:
                body = gzip.decompress(body)
            return json.loads(body.decode("utf-8"))
        except (OSError, EOFError, UnicodeDecodeError, ValueError) as exc:
            raise MalformedResponseError(str(exc), path=self.path) from exc


def normalize_path(path: str) -> str:
    """Strip leading slashes so the path can be appended to the target."""
    return path.lstrip("/")


def encode_payload(data: Any) -> tuple[bytes, bytes]:
    """Serialize data to UTF-8 JSON; return (raw, gzipped)."""
    raw = json.dumps(data, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    return raw, gzip.compress(raw)


class Transport(ABC):
    """Sends one request to the configured target and returns its Response.

    Subclasses implement ``_send``; path normalization and the status
    diagnostic live here. There are no retries: a failure is raised once
    and a non-2xx status is returned as-is.
    """

    def __init__(self, target: str):
        self.target = target
        self.logger = get_logger(f"transport.{self.mode}")

    @property
    @abstractmethod
    def mode(self) -> str:
        """Short name of the channel kind."""
        pass

    async def send(self, path: str, payload: Any = None) -> Response:
        """Send to ``path``; a payload other than None turns the request into a POST."""
        path = normalize_path(path)
        response = await self._send(path, payload)
        if response.path is None:
            response.path = path
        self.logger.info("transport.response", path=path, status_code=response.status_code)
        return response

    @abstractmethod
    async def _send(self, path: str, payload: Any) -> Response:
        pass
