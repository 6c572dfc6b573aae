"""Transports to the remote environment."""

from tdremote.transport.base import Response, Transport, encode_payload, normalize_path
from tdremote.transport.factory import create_transport, load_secure_channel
from tdremote.transport.https import HttpsTransport
from tdremote.transport.tunnel import SecureChannel, TunnelTransport

__all__ = [
    "HttpsTransport",
    "Response",
    "SecureChannel",
    "Transport",
    "TunnelTransport",
    "create_transport",
    "encode_payload",
    "load_secure_channel",
    "normalize_path",
]
