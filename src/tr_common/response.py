"""Envelope for the report and waitlist JSON routes.

Summary and lookup data, waitlist promotion results and AppError failures
all travel as `{code, message, data, timestamp, request_id}`. `code` is 0 on
success, otherwise the AppError code (1001, 1002, 3001) with `data` null.
The router overwrites `request_id` with the one the request-log middleware
assigned, so the body matches the X-Request-ID header.

The xlsx export route is the exception: it answers with the workbook bytes.
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    code: int = 0
    message: str = "success"
    data: Any = None
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    request_id: str = Field(default_factory=lambda: f"req_{uuid.uuid4().hex[:12]}")


def success_response(data: Any = None) -> ApiResponse:
    return ApiResponse(code=0, message="success", data=data)


def error_response(code: int, message: str) -> ApiResponse:
    return ApiResponse(code=code, message=message, data=None)
