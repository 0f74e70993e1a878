"""
REST client for the platform API.

Every call is a single attempt: no retries, no backoff and no rate-limit
bookkeeping. Failures surface as RemoteOperationError subclasses.
"""
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from chatwire.core.config import settings
from chatwire.core.exceptions import RemoteHTTPError, RemoteNetworkError
from chatwire.core.logging_config import LogCategory, log_debug, log_error, log_info, log_warning

AUDIT_LOG_REASON_HEADER = "X-Audit-Log-Reason"


class RestClient:
    """
    Thin async client for the platform REST API.

    Handles:
    - Authorization and User-Agent headers
    - Audit-log reasons for mutating calls
    - Translating transport and HTTP failures into RemoteOperationError
    - Creating its httpx.AsyncClient on first use
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the REST client.

        Args:
            token: API token (defaults to settings.api_token)
            base_url: API base URL (defaults to settings.api_base_url)
            http_client: AsyncClient to send requests with; one is created on
                first use when omitted
        """
        self.token = token if token is not None else settings.api_token
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self._http_client = http_client

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the http client, creating it if missing or closed."""
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(timeout=settings.request_timeout)
            log_info("HTTP client created", category=LogCategory.REST, timeout=settings.request_timeout)
        return self._http_client

    def _build_headers(self, reason: Optional[str] = None) -> Dict[str, str]:
        headers = {"User-Agent": settings.user_agent}
        if self.token:
            headers["Authorization"] = f"{settings.token_type} {self.token}"
        if reason:
            headers[AUDIT_LOG_REASON_HEADER] = quote(reason, safe="")
        return headers

    @staticmethod
    def _safe_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        reason: Optional[str] = None,
    ) -> Any:
        """
        Make a request against the API.

        Returns:
            Decoded JSON body, or None for empty/204 responses

        Raises:
            RemoteHTTPError: If the API answers with a non-2xx status
            RemoteNetworkError: If no response was received
        """
        url = f"{self.base_url}{path}"
        log_debug("API request", category=LogCategory.REST, method=method, path=path)

        try:
            client = await self._get_client()
            response = await client.request(
                method,
                url,
                json=json,
                headers=self._build_headers(reason),
                timeout=settings.request_timeout,
            )
        except httpx.HTTPError as e:
            log_error(e, method=method, path=path)
            raise RemoteNetworkError(
                f"Failed to communicate with API: {e}", method=method, path=path
            ) from e

        if response.status_code >= 400:
            body = self._safe_json(response)
            detail = None
            if isinstance(body, dict):
                detail = body.get("message") or body.get("detail")
            detail = detail or response.text or "Unknown error"
            log_warning(
                f"API error: HTTP {response.status_code} - {detail}",
                category=LogCategory.REST,
                method=method,
                path=path,
            )
            raise RemoteHTTPError(response.status_code, detail, method=method, path=path)

        if response.status_code == 204 or not response.content:
            return None
        return self._safe_json(response)

    # Integrations

    async def get_server_integrations(self, server_id: str) -> list:
        """GET /servers/{server_id}/integrations"""
        return await self.request("GET", f"/servers/{server_id}/integrations") or []

    async def sync_server_integration(self, server_id: str, integration_id: str) -> None:
        """Trigger a sync. POST /servers/{server_id}/integrations/{integration_id}"""
        await self.request("POST", f"/servers/{server_id}/integrations/{integration_id}")

    async def modify_server_integration(
        self,
        server_id: str,
        integration_id: str,
        payload: Dict[str, Any],
        reason: Optional[str] = None,
    ) -> Any:
        """PATCH /servers/{server_id}/integrations/{integration_id}"""
        return await self.request(
            "PATCH",
            f"/servers/{server_id}/integrations/{integration_id}",
            json=payload,
            reason=reason,
        )

    async def delete_server_integration(
        self,
        server_id: str,
        integration_id: str,
        reason: Optional[str] = None,
    ) -> None:
        """DELETE /servers/{server_id}/integrations/{integration_id}"""
        await self.request(
            "DELETE",
            f"/servers/{server_id}/integrations/{integration_id}",
            reason=reason,
        )

    async def aclose(self) -> None:
        """Close the http client. The next request opens a new one."""
        if self._http_client is not None and not self._http_client.is_closed:
            await self._http_client.aclose()
            log_info("HTTP client closed", category=LogCategory.REST)
        self._http_client = None
