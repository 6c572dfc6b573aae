"""Transport over a pre-authenticated encrypted tunnel."""

from typing import Any, Protocol, runtime_checkable

from tdremote.core.exceptions import RemoteAdminError, TransportError
from tdremote.transport.base import Response, Transport


@runtime_checkable
class SecureChannel(Protocol):
    """Encrypted channel keyed by the target identifier.

    Implementations own authentication and encryption; they receive the
    normalized path and the JSON-ready payload (or None).
    """

    async def send_secure(self, target: str, path: str, data: Any) -> Response:
        ...


class TunnelTransport(Transport):
    """Routes every request through a SecureChannel."""

    def __init__(self, target: str, channel: SecureChannel):
        super().__init__(target)
        self.channel = channel

    @property
    def mode(self) -> str:
        return "tunnel"

    async def _send(self, path: str, payload: Any) -> Response:
        try:
            return await self.channel.send_secure(self.target, path, payload)
        except RemoteAdminError:
            raise
        except Exception as exc:
            raise TransportError(f"tunnel send to {path} failed: {exc}", path=path) from exc
