"""
Product Service Data Models

Request bodies accepted by the products endpoints. Responses are plain
camelCase dictionaries built by ProductService.transform_product.
"""

from enum import Enum
from typing import Optional, Dict, Any, List
from pydantic import Field

from core.payload import StrictModel


class ProductStatus(str, Enum):
    """Product publication status"""
    DRAFT = "draft"
    PROPOSED = "proposed"
    PUBLISHED = "published"
    REJECTED = "rejected"


class ProductOptionInput(StrictModel):
    """Option declared on a product, e.g. Storage: 256GB / 512GB"""
    title: str = Field(..., min_length=1)
    values: List[str] = Field(..., min_length=1)


class VariantPriceInput(StrictModel):
    currency_code: str = Field(..., min_length=3, max_length=3)
    amount: float = Field(..., ge=0)


class ProductVariantInput(StrictModel):
    """Variant to create; ``options`` maps option title to value"""
    title: str = Field(..., min_length=1)
    sku: Optional[str] = None
    allow_backorder: Optional[bool] = None
    manage_inventory: Optional[bool] = None
    prices: List[VariantPriceInput] = Field(default_factory=list)
    options: Optional[Dict[str, str]] = None


class CreateProductRequest(StrictModel):
    """Admin product creation"""
    title: str = Field(..., min_length=1)
    subtitle: Optional[str] = None
    description: Optional[str] = None
    handle: Optional[str] = None
    is_giftcard: Optional[bool] = None
    status: ProductStatus = ProductStatus.DRAFT
    thumbnail: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    collection_id: Optional[str] = None
    categories: List[str] = Field(default_factory=list)
    sales_channels: List[str] = Field(default_factory=list)
    shipping_profile_id: Optional[str] = None
    options: List[ProductOptionInput] = Field(default_factory=list)
    variants: List[ProductVariantInput] = Field(default_factory=list)
    metadata: Optional[Dict[str, Any]] = None
