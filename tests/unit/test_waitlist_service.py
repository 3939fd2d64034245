"""Unit tests for WaitlistApplicationService using a mock client."""

from unittest.mock import AsyncMock

import pytest

from src.tr_common.errors import WaitlistPromotionError
from src.tr_waitlist.application.service import WaitlistApplicationService


@pytest.fixture
def mock_client():
    client = AsyncMock()
    client.promote_waitlist = AsyncMock(return_value={"success": True})
    return client


class TestPromote:
    async def test_success(self, mock_client) -> None:
        result = await WaitlistApplicationService(mock_client).promote("12", "Golf")

        mock_client.promote_waitlist.assert_awaited_once_with("12")
        assert result.registration_id == "12"
        assert result.activity == "Golf"
        assert result.promoted is True

    async def test_failure_propagates(self, mock_client) -> None:
        mock_client.promote_waitlist.side_effect = WaitlistPromotionError("No seats")

        with pytest.raises(WaitlistPromotionError) as exc_info:
            await WaitlistApplicationService(mock_client).promote("12")
        assert exc_info.value.message == "No seats"
