"""HTTP client for the upstream registration service.

Used for one command only: promoting a registrant off an activity waitlist.
The shared httpx.AsyncClient is created lazily and closed on app shutdown.
"""

import httpx

from config.settings import settings
from src.tr_common.errors import WaitlistPromotionError

_http_client: httpx.AsyncClient | None = None

DEFAULT_FAILURE = "Failed to promote from waitlist"


async def get_http_client() -> httpx.AsyncClient:
    """Get or create the shared upstream client."""
    global _http_client  # noqa: PLW0603
    if _http_client is None:
        _http_client = httpx.AsyncClient(
            base_url=settings.REGISTRATION_API_URL,
            timeout=settings.REGISTRATION_API_TIMEOUT_SECONDS,
        )
    return _http_client


async def close_http_client() -> None:
    """Close the shared upstream client."""
    global _http_client  # noqa: PLW0603
    if _http_client is not None:
        await _http_client.aclose()
        _http_client = None


def _error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return DEFAULT_FAILURE
    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return DEFAULT_FAILURE


class RegistrationApiClient:
    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def promote_waitlist(self, registration_id: str) -> dict:
        """POST /registrations/{id}/promote-waitlist.

        Raises WaitlistPromotionError on transport errors, non-2xx answers
        and on any body without a truthy `success`.
        """
        try:
            response = await self._http.post(
                f"/registrations/{registration_id}/promote-waitlist", json={}
            )
        except httpx.HTTPError as exc:
            raise WaitlistPromotionError(f"{DEFAULT_FAILURE}: {exc}") from exc

        if response.is_error:
            raise WaitlistPromotionError(_error_detail(response))
        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict) or not payload.get("success"):
            raise WaitlistPromotionError(_error_detail(response))
        return payload
