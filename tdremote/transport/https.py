"""Direct HTTPS transport built on httpx."""

from typing import Any

import httpx

from tdremote.core.exceptions import TransportError
from tdremote.transport.base import (
    JSON_CONTENT_TYPE,
    Response,
    Transport,
    encode_payload,
)


class HttpsTransport(Transport):
    """Talks to an ``https:`` target with gzip-compressed JSON bodies."""

    def __init__(
        self,
        target: str,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(target.rstrip("/"))
        self._http_transport = http_transport

    @property
    def mode(self) -> str:
        return "https"

    def url_for(self, path: str) -> str:
        return f"{self.target}/{path}"

    async def _send(self, path: str, payload: Any) -> Response:
        headers = {"Accept-Encoding": "gzip"}
        method = "GET"
        content = None

        if payload is not None:
            raw, content = encode_payload(payload)
            self.logger.info(
                "transport.upload",
                path=path,
                bytes=len(raw),
                compressed=len(content),
            )
            method = "POST"
            headers["Content-Type"] = JSON_CONTENT_TYPE
            headers["Content-Encoding"] = "gzip"

        url = self.url_for(path)
        try:
            # No client-side timeout; the remote side decides.
            async with httpx.AsyncClient(
                transport=self._http_transport,
                timeout=None,
            ) as client:
                res = await client.request(method, url, content=content, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"{method} {path} failed: {exc}", path=path) from exc

        return Response(
            status_code=res.status_code,
            body=res.content,
            headers=dict(res.headers),
            path=path,
        )
