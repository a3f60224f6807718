from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from .config import Settings
from .errors import RemoteError, TransportError

API_KEY_HEADER = "X-API-Key"


def build_http_client(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Create the shared AsyncClient for the DumbMoney API."""
    return httpx.AsyncClient(
        base_url=settings.base_url,
        limits=httpx.Limits(
            max_connections=settings.max_connections,
            max_keepalive_connections=settings.max_keepalive_connections,
        ),
        timeout=httpx.Timeout(settings.http_timeout),
        transport=transport,
    )


class DumbMoneyClient:
    """
    Thin wrapper around the DumbMoney HTTP API.

    One method call issues exactly one request: no retries, no caching.
    Non-2xx responses raise RemoteError, network failures raise TransportError.
    """

    def __init__(self, http_client: httpx.AsyncClient, api_key: str = "") -> None:
        self.http_client = http_client
        self.api_key = api_key

    def _auth_headers(self) -> Dict[str, str]:
        if self.api_key:
            return {API_KEY_HEADER: self.api_key}
        return {}

    async def get(self, path: str, authenticated: bool = False) -> Any:
        headers = self._auth_headers() if authenticated else {}
        return await self._request("GET", path, headers=headers)

    async def post(self, path: str, body: Dict[str, Any]) -> Any:
        headers = {"Content-Type": "application/json", **self._auth_headers()}
        return await self._request("POST", path, headers=headers, payload=body)

    async def _request(
        self,
        method: str,
        path: str,
        headers: Dict[str, str],
        payload: Optional[Dict[str, Any]] = None,
    ) -> Any:
        try:
            response = await self.http_client.request(
                method=method,
                url=path,
                json=payload,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            raise RemoteError(response.status_code, response.text)

        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(f"Invalid JSON response from {path}: {exc}") from exc
