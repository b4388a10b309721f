"""
Cart Service Data Models
"""

from typing import Optional
from pydantic import Field

from core.payload import StrictModel


class CreateCartRequest(StrictModel):
    """Create a cart in a region"""
    regionId: str = Field(..., min_length=1)
    countryCode: Optional[str] = Field(None, min_length=2, max_length=2)
    salesChannelId: Optional[str] = None
    email: Optional[str] = None


class AddLineItemRequest(StrictModel):
    variantId: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)


class UpdateLineItemRequest(StrictModel):
    quantity: int = Field(..., ge=1)
