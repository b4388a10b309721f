"""
Store Administration Data Models

Admin request bodies for the store, its currencies, sales channels,
regions, stock locations and API keys. Field names follow Medusa.
"""

from enum import Enum
from typing import Optional, Dict, Any, List
from pydantic import Field

from core.payload import StrictModel


class ApiKeyType(str, Enum):
    PUBLISHABLE = "publishable"
    SECRET = "secret"


class UpdateStoreRequest(StrictModel):
    name: Optional[str] = Field(None, min_length=1)
    default_sales_channel_id: Optional[str] = None
    default_region_id: Optional[str] = None
    default_location_id: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class AddStoreCurrencyRequest(StrictModel):
    currency_code: str = Field(..., min_length=3, max_length=3)
    is_default: bool = False


class LinkChangesRequest(StrictModel):
    """Ids to link / unlink"""
    add: List[str] = Field(default_factory=list)
    remove: List[str] = Field(default_factory=list)


# ==================== Sales Channels ====================

class CreateSalesChannelRequest(StrictModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    is_disabled: Optional[bool] = None
    metadata: Optional[Dict[str, Any]] = None


class UpdateSalesChannelRequest(StrictModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    is_disabled: Optional[bool] = None
    metadata: Optional[Dict[str, Any]] = None


# ==================== Regions ====================

class CreateRegionRequest(StrictModel):
    name: str = Field(..., min_length=1)
    currency_code: str = Field(..., min_length=3, max_length=3)
    countries: Optional[List[str]] = None
    payment_providers: Optional[List[str]] = None
    automatic_taxes: Optional[bool] = None
    is_tax_inclusive: Optional[bool] = None
    metadata: Optional[Dict[str, Any]] = None


class UpdateRegionRequest(StrictModel):
    name: Optional[str] = Field(None, min_length=1)
    currency_code: Optional[str] = Field(None, min_length=3, max_length=3)
    countries: Optional[List[str]] = None
    payment_providers: Optional[List[str]] = None
    automatic_taxes: Optional[bool] = None
    is_tax_inclusive: Optional[bool] = None
    metadata: Optional[Dict[str, Any]] = None


# ==================== Stock Locations ====================

class StockLocationAddress(StrictModel):
    address_1: str = Field(..., min_length=1)
    address_2: Optional[str] = None
    city: str = Field(..., min_length=1)
    country_code: str = Field(..., min_length=2, max_length=2)
    province: Optional[str] = None
    postal_code: Optional[str] = None
    phone: Optional[str] = None


class CreateStockLocationRequest(StrictModel):
    name: str = Field(..., min_length=1)
    address: Optional[StockLocationAddress] = None
    metadata: Optional[Dict[str, Any]] = None


class UpdateStockLocationRequest(StrictModel):
    name: Optional[str] = Field(None, min_length=1)
    address: Optional[StockLocationAddress] = None
    metadata: Optional[Dict[str, Any]] = None


# ==================== API Keys ====================

class CreateApiKeyRequest(StrictModel):
    title: str = Field(..., min_length=1)
    type: ApiKeyType = ApiKeyType.PUBLISHABLE


class UpdateApiKeyRequest(StrictModel):
    title: str = Field(..., min_length=1)
