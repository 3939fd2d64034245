"""Unified error codes and custom exceptions.

The tiering engine itself never raises on malformed registrant or tier data;
these errors cover request handling and the outbound waitlist command.

Error code ranges:
  1xxx: Request
  3xxx: Upstream command
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Request ---

class UnknownCategoryError(AppError):
    def __init__(self, category: str) -> None:
        super().__init__(1001, f"Unknown pricing category: {category}", 404)


class EmptyLookupKeyError(AppError):
    def __init__(self, field: str) -> None:
        super().__init__(1002, f"{field} must not be empty", 422)


# --- 3xxx: Upstream command ---

class WaitlistPromotionError(AppError):
    def __init__(self, detail: str = "Failed to promote from waitlist") -> None:
        super().__init__(3001, detail, 502)

