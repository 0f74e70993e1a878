"""
Unit tests for RestClient using httpx.MockTransport.
"""
import json

import httpx
import pytest

from chatwire.core.exceptions import RemoteHTTPError, RemoteNetworkError, RemoteOperationError
from chatwire.rest.api import AUDIT_LOG_REASON_HEADER, RestClient

BASE_URL = "https://api.test/v1"


def _make_rest(handler) -> RestClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return RestClient(token="secret-token", base_url=BASE_URL, http_client=http_client)


class TestRequest:

    @pytest.mark.asyncio
    async def test_headers_and_json_body(self):
        """Test auth, audit reason and JSON body are sent."""
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["request"] = request
            return httpx.Response(200, json={"ok": True})

        rest = _make_rest(handler)
        result = await rest.request("PATCH", "/things/1", json={"a": 1}, reason="tidy up / now")

        request = captured["request"]
        assert result == {"ok": True}
        assert str(request.url) == f"{BASE_URL}/things/1"
        assert request.headers["Authorization"] == "Bot secret-token"
        assert request.headers[AUDIT_LOG_REASON_HEADER] == "tidy%20up%20%2F%20now"
        assert json.loads(request.content) == {"a": 1}
        await rest.aclose()

    @pytest.mark.asyncio
    async def test_no_reason_header_without_reason(self):
        """Test no audit header is sent without a reason."""
        captured = {}

        def handler(request):
            captured["request"] = request
            return httpx.Response(204)

        rest = _make_rest(handler)
        result = await rest.request("DELETE", "/things/1")

        assert result is None
        assert AUDIT_LOG_REASON_HEADER not in captured["request"].headers

    @pytest.mark.asyncio
    async def test_http_error_uses_message(self):
        """Test non-2xx responses raise RemoteHTTPError with the API message."""
        def handler(request):
            return httpx.Response(404, json={"message": "Unknown Integration", "code": 10005})

        rest = _make_rest(handler)

        with pytest.raises(RemoteHTTPError) as exc_info:
            await rest.request("GET", "/servers/1/integrations")

        error = exc_info.value
        assert error.status_code == 404
        assert error.detail == "Unknown Integration"
        assert error.method == "GET"
        assert error.path == "/servers/1/integrations"
        assert isinstance(error, RemoteOperationError)

    @pytest.mark.asyncio
    async def test_http_error_plain_text(self):
        """Test a plain text error body becomes the detail."""
        def handler(request):
            return httpx.Response(502, text="Bad Gateway")

        rest = _make_rest(handler)

        with pytest.raises(RemoteHTTPError) as exc_info:
            await rest.request("GET", "/x")

        assert exc_info.value.detail == "Bad Gateway"

    @pytest.mark.asyncio
    async def test_transport_error_becomes_network_error(self):
        """Test transport failures raise RemoteNetworkError."""
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        rest = _make_rest(handler)

        with pytest.raises(RemoteNetworkError) as exc_info:
            await rest.request("POST", "/x")

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


class TestIntegrationRoutes:

    @pytest.mark.asyncio
    async def test_routes(self):
        """Test the integration routes use the expected methods and paths."""
        seen = []

        def handler(request):
            seen.append((request.method, request.url.path, request.content))
            if request.method == "GET":
                return httpx.Response(200, json=[{"id": "100"}])
            return httpx.Response(204)

        rest = _make_rest(handler)

        integrations = await rest.get_server_integrations("300")
        await rest.sync_server_integration("300", "100")
        await rest.modify_server_integration("300", "100", {"expire_behavior": 1}, reason="r")
        await rest.delete_server_integration("300", "100")

        assert integrations == [{"id": "100"}]
        assert [(method, path) for method, path, _ in seen] == [
            ("GET", "/v1/servers/300/integrations"),
            ("POST", "/v1/servers/300/integrations/100"),
            ("PATCH", "/v1/servers/300/integrations/100"),
            ("DELETE", "/v1/servers/300/integrations/100"),
        ]
        assert seen[1][2] == b""
        assert json.loads(seen[2][2]) == {"expire_behavior": 1}

    @pytest.mark.asyncio
    async def test_empty_integration_list(self):
        """Test an empty integration list is returned as-is."""
        rest = _make_rest(lambda request: httpx.Response(200, json=[]))

        assert await rest.get_server_integrations("300") == []


class TestHttpClientLifecycle:

    @pytest.mark.asyncio
    async def test_client_created_on_first_use_and_reused(self):
        """Test the AsyncClient is created lazily and reused between requests."""
        rest = RestClient(token="t", base_url=BASE_URL)

        first = await rest._get_client()
        second = await rest._get_client()

        assert isinstance(first, httpx.AsyncClient)
        assert first is second
        await rest.aclose()

    @pytest.mark.asyncio
    async def test_aclose_then_reopen(self):
        """Test aclose closes the client and the next use opens a new one."""
        rest = RestClient(token="t", base_url=BASE_URL)
        first = await rest._get_client()

        await rest.aclose()
        second = await rest._get_client()

        assert first.is_closed
        assert second is not first
        await rest.aclose()

    @pytest.mark.asyncio
    async def test_aclose_without_client_is_noop(self):
        """Test aclose before any request does nothing."""
        rest = RestClient(token="t", base_url=BASE_URL)

        await rest.aclose()
        await rest.aclose()
