"""
Inventory Service Data Models
"""

from typing import Optional, Dict, Any
from pydantic import Field

from core.payload import StrictModel

INVENTORY_ITEM_ID_PREFIX = "iitem_"
STOCK_LOCATION_ID_PREFIX = "sloc_"


class UpdateInventoryItemRequest(StrictModel):
    """Partial update of an inventory item"""
    sku: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    hs_code: Optional[str] = None
    origin_country: Optional[str] = None
    mid_code: Optional[str] = None
    material: Optional[str] = None
    weight: Optional[float] = Field(None, ge=0)
    length: Optional[float] = Field(None, ge=0)
    height: Optional[float] = Field(None, ge=0)
    width: Optional[float] = Field(None, ge=0)
    requires_shipping: Optional[bool] = None
    metadata: Optional[Dict[str, Any]] = None


class CreateLocationLevelRequest(StrictModel):
    location_id: str = Field(..., min_length=1)
    stocked_quantity: int = Field(..., ge=0)
    incoming_quantity: Optional[int] = Field(None, ge=0)


class UpdateLocationLevelRequest(StrictModel):
    stocked_quantity: Optional[int] = Field(None, ge=0)
    incoming_quantity: Optional[int] = Field(None, ge=0)
