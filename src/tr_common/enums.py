"""Global enums shared by the tiering and reporting contexts."""

from enum import Enum


class PricingCategory(str, Enum):
    """Independent pricing tables an event may carry."""
    REGISTRATION = "registration"
    COMPANION = "companion"
    DEPENDENT = "dependent"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class AttributionSource(str, Enum):
    """Which path produced an effective tier label."""
    STORED = "STORED"
    INFERRED = "INFERRED"


class RegistrantStatus(str, Enum):
    ACTIVE = "Active"
    CANCELLED = "Cancelled"


class DiscountType(str, Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"
