"""tr_waitlist REST endpoint.

POST /waitlist/registrations/{registration_id}/promote
"""

from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from src.tr_common.response import ApiResponse, success_response
from src.tr_waitlist.application.service import WaitlistApplicationService
from src.tr_waitlist.infrastructure.registration_client import (
    RegistrationApiClient,
    get_http_client,
)

router = APIRouter(prefix="/waitlist", tags=["waitlist"])


class PromoteRequest(BaseModel):
    activity: str | None = None


async def get_waitlist_service(
    http: Annotated[httpx.AsyncClient, Depends(get_http_client)],
) -> WaitlistApplicationService:
    return WaitlistApplicationService(RegistrationApiClient(http))


@router.post("/registrations/{registration_id}/promote")
async def promote(
    registration_id: str,
    body: PromoteRequest,
    request: Request,
    service: Annotated[WaitlistApplicationService, Depends(get_waitlist_service)],
) -> ApiResponse:
    result = await service.promote(registration_id, body.activity)
    resp = success_response(result.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
