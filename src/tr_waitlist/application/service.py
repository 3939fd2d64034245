"""Waitlist promotion: the single outbound command.

Nothing here touches aggregation state. On success the caller refreshes its
registrant snapshot and recomputes reports; on failure nothing was applied.
"""

import logging
from typing import Protocol

from pydantic import BaseModel

from src.tr_common.errors import WaitlistPromotionError

logger = logging.getLogger(__name__)


class PromotionClientProtocol(Protocol):
    async def promote_waitlist(self, registration_id: str) -> dict: ...


class PromotionResult(BaseModel):
    registration_id: str
    activity: str | None
    promoted: bool = True


class WaitlistApplicationService:
    def __init__(self, client: PromotionClientProtocol) -> None:
        self._client = client

    async def promote(self, registration_id: str, activity: str | None = None) -> PromotionResult:
        try:
            await self._client.promote_waitlist(registration_id)
        except WaitlistPromotionError as exc:
            logger.warning(
                "Waitlist promotion failed: registration=%s activity=%s error=%s",
                registration_id, activity, exc.message,
            )
            raise
        logger.info(
            "Waitlist promotion ok: registration=%s activity=%s", registration_id, activity
        )
        return PromotionResult(registration_id=registration_id, activity=activity)
