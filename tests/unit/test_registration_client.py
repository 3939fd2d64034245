"""Tests for the upstream registration client (httpx.MockTransport)."""

import httpx
import pytest

from src.tr_common.errors import WaitlistPromotionError
from src.tr_waitlist.infrastructure.registration_client import RegistrationApiClient


def _client(handler) -> RegistrationApiClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://upstream/api")
    return RegistrationApiClient(http)


class TestPromoteWaitlist:
    async def test_success(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"success": True, "data": {"id": 5}})

        payload = await _client(handler).promote_waitlist("5")

        assert payload["success"] is True
        assert seen[0].method == "POST"
        assert seen[0].url.path == "/api/registrations/5/promote-waitlist"

    async def test_error_status_uses_upstream_message(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(409, json={"success": False, "error": "No seats available"})

        with pytest.raises(WaitlistPromotionError) as exc_info:
            await _client(handler).promote_waitlist("5")
        assert exc_info.value.message == "No seats available"
        assert exc_info.value.code == 3001

    async def test_success_false_in_ok_response(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"success": False})

        with pytest.raises(WaitlistPromotionError) as exc_info:
            await _client(handler).promote_waitlist("5")
        assert exc_info.value.message == "Failed to promote from waitlist"

    async def test_non_json_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="boom")

        with pytest.raises(WaitlistPromotionError) as exc_info:
            await _client(handler).promote_waitlist("5")
        assert exc_info.value.message == "Failed to promote from waitlist"

    async def test_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(WaitlistPromotionError) as exc_info:
            await _client(handler).promote_waitlist("5")
        assert "connection refused" in exc_info.value.message

    async def test_ok_response_without_success_flag(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"error": "No seats"})

        with pytest.raises(WaitlistPromotionError) as exc_info:
            await _client(handler).promote_waitlist("7")
        assert exc_info.value.message == "No seats"

    async def test_empty_ok_response(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={})

        with pytest.raises(WaitlistPromotionError) as exc_info:
            await _client(handler).promote_waitlist("7")
        assert exc_info.value.message == "Failed to promote from waitlist"
