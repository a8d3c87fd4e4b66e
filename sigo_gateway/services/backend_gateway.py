"""
Backend Gateway
Forwards same-origin calls to the SIGO backend and normalizes its responses
"""

import json
from typing import Any, Callable, Mapping, Optional

import httpx
from fastapi import Request
from fastapi.responses import JSONResponse, Response

from sigo_gateway.config import Settings
from sigo_gateway.utils.key_normalizer import normalize_keys
from sigo_gateway.utils.logger import get_logger
from sigo_gateway.utils.tls_policy import relaxed_local_address, should_relax_tls
from sigo_gateway.utils.url_builder import build_backend_url

logger = get_logger(__name__)

_UNSET: Any = object()

# Statuses that must not carry a response body
_BODYLESS_STATUSES = (204, 304)


class BackendGateway:
    """
    Stateless forwarder to the SIGO backend.

    One shared AsyncClient is created lazily on first use. When the TLS
    trust policy applies, that client skips certificate validation and binds
    to 0.0.0.0 so name resolution is IPv4 only, unless the backend host is an
    IPv6 literal.

    Lifecycle:
        - Created in the FastAPI lifespan from the injected Settings
        - Call close() during app shutdown
    """

    PREVIEW_CHARS = 400

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = settings.backend_url
        self.tls_relaxed = should_relax_tls(settings.backend_url, settings.environment)
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        # No await between check and assignment: safe under concurrent calls
        if self._client is None:
            if self.tls_relaxed:
                transport = self._transport or self._relaxed_transport()
                self._client = httpx.AsyncClient(transport=transport, verify=False)
                logger.warning("TLS validation disabled for local backend", backend_url=self.base_url)
            else:
                self._client = httpx.AsyncClient(transport=self._transport)
        return self._client

    def _relaxed_transport(self) -> httpx.AsyncHTTPTransport:
        local_address = relaxed_local_address(self.base_url)
        if local_address is None:
            return httpx.AsyncHTTPTransport(verify=False)
        return httpx.AsyncHTTPTransport(verify=False, local_address=local_address)

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None

    def build_url(self, path: str) -> str:
        return build_backend_url(self.base_url, path)

    async def forward(
        self,
        path: str,
        method: str = "GET",
        headers: Optional[Mapping[str, str]] = None,
        body: Any = _UNSET,
    ) -> Response:
        """
        Forward one call to the backend.

        Returns the backend's (key-normalized) JSON body with the backend's
        status code. A non-JSON backend body is wrapped as
        {"message", "backendStatus"}; a transport failure becomes a 500 with
        {"message"}. Nothing is retried.
        """
        has_body = body is not _UNSET

        request_headers = httpx.Headers(headers or {})
        request_headers["Accept"] = "application/json"
        request_headers["Cache-Control"] = "no-cache"
        if has_body and "content-type" not in request_headers:
            request_headers["Content-Type"] = "application/json"

        content = json.dumps(body) if has_body else None
        url = self.build_url(path)

        try:
            response = await self._get_client().request(
                method, url, headers=request_headers, content=content
            )

            if response.status_code in _BODYLESS_STATUSES:
                return Response(status_code=response.status_code, headers={"Cache-Control": "no-store"})

            content_type = response.headers.get("content-type", "")
            if "application/json" not in content_type:
                return self._non_json_response(url, response)

            data = response.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.error(
                "Error communicating with backend",
                path=path,
                url=url,
                error=repr(e),
            )
            return self._json_response(
                {"message": str(e) or "unknown error contacting backend"},
                status_code=500,
            )

        return self._json_response(normalize_keys(data), status_code=response.status_code)

    async def forward_with_body(
        self,
        request: Request,
        path_builder: Callable[[Any], str],
        method: str = "POST",
        headers: Optional[Mapping[str, str]] = None,
    ) -> Response:
        """Read the inbound JSON body, derive the backend path from it and forward"""
        body = await request.json()
        return await self.forward(path_builder(body), method=method, headers=headers, body=body)

    def _non_json_response(self, url: str, response: httpx.Response) -> Response:
        text = response.text
        logger.error(
            "Backend returned non-JSON response",
            url=url,
            status=response.status_code,
            headers=dict(response.headers),
            preview=text[:self.PREVIEW_CHARS],
        )
        return self._json_response(
            {
                "message": text or f"unexpected backend response (status {response.status_code})",
                "backendStatus": response.status_code,
            },
            status_code=response.status_code,
        )

    @staticmethod
    def _json_response(content: Any, status_code: int) -> JSONResponse:
        return JSONResponse(content=content, status_code=status_code, headers={"Cache-Control": "no-store"})
