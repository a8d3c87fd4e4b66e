"""
SIGO API Client
Async client for the gateway's same-origin /api routes
"""

from typing import Any, Optional

import httpx

from sigo_gateway.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_ERROR_MESSAGE = "failed to communicate with the API"


class ApiError(Exception):
    """Non-success response from the gateway"""

    def __init__(self, message: str, status: int, payload: Any):
        super().__init__(message)
        self.message = message
        self.status = status
        self.payload = payload


class SigoApiClient:
    """
    HTTP client for the gateway.

    Uses one shared AsyncClient, created on first use and released by
    close() (or by leaving an ``async with`` block).
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 30.0
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                transport=self._transport,
                timeout=self.timeout
            )
        return self._client

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "SigoApiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def api_fetch(
        self,
        url: str,
        method: str = "GET",
        json_body: Any = None,
        parse_json: bool = True
    ) -> Any:
        """
        Call a gateway route and return its decoded body.

        JSON bodies are decoded, anything else is returned as text. With
        parse_json=False the body is not read and None is returned.

        Raises:
            ApiError: the gateway answered with a non-2xx status
        """
        response = await self._get_client().request(
            method,
            url,
            json=json_body,
            headers={"Content-Type": "application/json", "Cache-Control": "no-cache"}
        )

        if not parse_json:
            return None

        content_type = response.headers.get("content-type", "")
        payload = response.json() if "application/json" in content_type else response.text

        if not response.is_success:
            message = DEFAULT_ERROR_MESSAGE
            if isinstance(payload, dict) and "message" in payload:
                message = str(payload["message"])
            logger.error("API request failed", method=method, url=url, status=response.status_code, message=message)
            raise ApiError(message, response.status_code, payload)

        return payload
