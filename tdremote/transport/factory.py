"""Selects the transport variant for a target."""

import importlib
from typing import TYPE_CHECKING

import httpx

from tdremote.core.exceptions import ConfigurationError
from tdremote.transport.base import Transport
from tdremote.transport.https import HttpsTransport
from tdremote.transport.tunnel import SecureChannel, TunnelTransport
from tdremote.utils.logging import get_logger

if TYPE_CHECKING:
    from tdremote.config import ClientConfig

logger = get_logger(__name__)


def load_secure_channel(import_path: str) -> SecureChannel:
    """Import a channel from ``module:attribute``.

    The attribute may be a channel instance or a zero-argument factory.
    """
    module_name, _, attr = import_path.partition(":")
    if not module_name or not attr:
        raise ConfigurationError(
            f"secure channel must look like 'module:attribute', got {import_path!r}"
        )
    try:
        module = importlib.import_module(module_name)
        obj = getattr(module, attr)
    except (ImportError, AttributeError) as exc:
        raise ConfigurationError(f"cannot load secure channel {import_path!r}: {exc}") from exc

    if isinstance(obj, type) or (callable(obj) and not isinstance(obj, SecureChannel)):
        obj = obj()
    if not isinstance(obj, SecureChannel):
        raise ConfigurationError(f"{import_path!r} does not provide send_secure()")
    return obj


def create_transport(
    config: "ClientConfig",
    channel: SecureChannel | None = None,
    http_transport: httpx.AsyncBaseTransport | None = None,
) -> Transport:
    """Build the transport for ``config.target``; the choice is made once here."""
    target = config.require_target()

    if not config.uses_tunnel:
        logger.debug("transport.selected", mode="https")
        return HttpsTransport(target, http_transport=http_transport)

    if channel is None:
        if not config.secure_channel:
            raise ConfigurationError(
                f"target {target!r} is not an https: URL and no secure channel is configured"
            )
        channel = load_secure_channel(config.secure_channel)

    logger.debug("transport.selected", mode="tunnel")
    return TunnelTransport(target, channel)
