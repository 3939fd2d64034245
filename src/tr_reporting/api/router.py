"""tr_reporting REST endpoints.

Event and registrants arrive wholesale in the request body; nothing is fetched.

POST /reports/summary  tier counts per category + discount usage
POST /reports/tiers/{category}/users  registrants behind one tier count
POST /reports/discounts/users  registrants behind one discount code
POST /reports/tiers/{category}/export  xlsx snapshot of the tier users
"""

from urllib.parse import quote

from fastapi import APIRouter, Request
from fastapi.responses import Response

from src.tr_common.enums import PricingCategory
from src.tr_common.errors import UnknownCategoryError
from src.tr_common.response import ApiResponse, success_response
from src.tr_reporting.application.schemas import (
    DiscountUsersRequest,
    ReportRequest,
    TierUsersRequest,
)
from src.tr_reporting.application.service import ReportApplicationService
from src.tr_reporting.infrastructure.xlsx_writer import XLSX_MEDIA_TYPE

router = APIRouter(prefix="/reports", tags=["reports"])

_service = ReportApplicationService()


def _parse_category(category: str) -> PricingCategory:
    try:
        return PricingCategory(category.lower())
    except ValueError:
        raise UnknownCategoryError(category) from None


def _with_request_id(request: Request, resp: ApiResponse) -> ApiResponse:
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("/summary")
async def summarize(body: ReportRequest, request: Request) -> ApiResponse:
    result = _service.summarize(
        body.event.to_domain(), [r.to_domain() for r in body.registrants]
    )
    return _with_request_id(request, success_response(result.model_dump()))


@router.post("/tiers/{category}/users")
async def tier_users(
    category: str, body: TierUsersRequest, request: Request
) -> ApiResponse:
    result = _service.lookup_tier_users(
        body.event.to_domain(),
        [r.to_domain() for r in body.registrants],
        _parse_category(category),
        body.label,
        body.query,
    )
    return _with_request_id(request, success_response(result.model_dump()))


@router.post("/discounts/users")
async def discount_users(body: DiscountUsersRequest, request: Request) -> ApiResponse:
    result = _service.lookup_discount_users(
        body.event.to_domain(),
        [r.to_domain() for r in body.registrants],
        body.code,
        body.query,
    )
    return _with_request_id(request, success_response(result.model_dump()))


@router.post("/tiers/{category}/export")
async def export_tier_users(category: str, body: TierUsersRequest) -> Response:
    content, file_name = _service.export_tier_users(
        body.event.to_domain(),
        [r.to_domain() for r in body.registrants],
        _parse_category(category),
        body.label,
        body.query,
    )
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={quote(file_name)}"},
    )
