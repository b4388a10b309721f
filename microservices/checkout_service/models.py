"""
Checkout Service Data Models
"""

from typing import Optional
from pydantic import Field

from core.payload import StrictModel

DEFAULT_PAYMENT_PROVIDER = "pp_system_default"


class ShippingAddressRequest(StrictModel):
    """Shipping address and contact email for a cart"""
    firstName: str = Field(..., min_length=1)
    lastName: str = Field(..., min_length=1)
    address1: str = Field(..., min_length=1)
    address2: Optional[str] = None
    city: str = Field(..., min_length=1)
    province: Optional[str] = None
    postalCode: str = Field(..., min_length=1)
    countryCode: str = Field(..., min_length=2, max_length=2)
    phone: Optional[str] = None
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class SelectShippingOptionRequest(StrictModel):
    optionId: str = Field(..., min_length=1)


class PaymentSessionRequest(StrictModel):
    providerId: str = DEFAULT_PAYMENT_PROVIDER


class CompleteCheckoutRequest(StrictModel):
    paymentProviderId: Optional[str] = None
