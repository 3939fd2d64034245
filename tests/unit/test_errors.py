"""Tests for tr_common.errors and tr_common.response."""

from src.tr_common.errors import (
    AppError,
    EmptyLookupKeyError,
    UnknownCategoryError,
    WaitlistPromotionError,
)
from src.tr_common.response import ApiResponse, error_response, success_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500

    def test_is_exception(self) -> None:
        assert isinstance(AppError(code=1001, message="test"), Exception)


class TestSpecificErrors:
    def test_unknown_category(self) -> None:
        err = UnknownCategoryError("spouse")
        assert err.code == 1001
        assert err.http_status == 404
        assert "spouse" in err.message

    def test_empty_lookup_key(self) -> None:
        err = EmptyLookupKeyError("label")
        assert err.code == 1002
        assert err.http_status == 422

    def test_waitlist_promotion_default_message(self) -> None:
        err = WaitlistPromotionError()
        assert err.code == 3001
        assert err.http_status == 502
        assert err.message == "Failed to promote from waitlist"


class TestApiResponse:
    def test_success(self) -> None:
        resp = success_response({"a": 1})
        assert resp.code == 0
        assert resp.data == {"a": 1}
        assert resp.request_id.startswith("req_")

    def test_error(self) -> None:
        resp = error_response(1001, "nope")
        assert isinstance(resp, ApiResponse)
        assert resp.code == 1001
        assert resp.data is None
