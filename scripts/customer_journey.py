#!/usr/bin/env python3
"""
Customer journey smoke check

Drives the BFF the way a storefront does: browse, search, view a product,
create a cart, add and update items, then set a shipping address. Each
response must match its expected shape; any mismatch or failed call aborts
the run with a non-zero exit status.

Environment:
    BFF_URL           BFF base URL (default http://localhost:3001/api/v1)
    REGION_ID         Region used for the cart (required)
    SALES_CHANNEL_ID  Sales channel for the cart (optional)

Usage:
    REGION_ID=reg_... python -m scripts.customer_journey
"""

import asyncio
import logging
import os
import sys
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from core.logger import setup_service_logger

logger = logging.getLogger(__name__)

DEFAULT_BFF_URL = "http://localhost:3001/api/v1"

ModelT = TypeVar("ModelT", bound=BaseModel)


class JourneyError(Exception):
    """A journey step failed or returned an unexpected shape"""


# ==================== Response shapes ====================

class Envelope(BaseModel):
    success: bool
    data: Dict[str, Any]
    timestamp: str


class PriceData(BaseModel):
    currencyCode: Optional[str] = None
    amount: Optional[float] = None


class VariantData(BaseModel):
    id: str
    title: Optional[str] = None
    sku: Optional[str] = None
    prices: List[PriceData] = []


class ProductData(BaseModel):
    id: str
    title: str
    handle: Optional[str] = None
    description: Optional[str] = None
    variants: List[VariantData] = []
    images: List[Dict[str, Any]] = []


class ProductListData(BaseModel):
    products: List[ProductData]
    count: int
    offset: int
    limit: int


class ProductDetailData(BaseModel):
    product: ProductData


class CartItemData(BaseModel):
    id: str
    title: Optional[str] = None
    quantity: int
    variantId: Optional[str] = None
    total: Optional[float] = None


class CartData(BaseModel):
    id: str
    regionId: Optional[str] = None
    currencyCode: Optional[str] = None
    items: List[CartItemData] = []
    total: Optional[float] = None


class CartEnvelopeData(BaseModel):
    cart: CartData


# ==================== Journey ====================

def _step(number: int, title: str):
    logger.info("")
    logger.info("=" * 80)
    logger.info(f"STEP {number}: {title}")
    logger.info("=" * 80)


def _format_price(variant: VariantData) -> str:
    if not variant.prices or variant.prices[0].amount is None:
        return "n/a"
    price = variant.prices[0]
    return f"{(price.currencyCode or '').upper()} {price.amount / 100:.2f}"


class CustomerJourney:
    """Sequential storefront walk-through against a running BFF"""

    def __init__(
        self,
        client: httpx.AsyncClient,
        region_id: Optional[str],
        sales_channel_id: Optional[str] = None,
    ):
        self.client = client
        self.region_id = region_id
        self.sales_channel_id = sales_channel_id
        self.products: List[ProductData] = []
        self.cart: Optional[CartData] = None

    async def call(self, model: Type[ModelT], method: str, path: str, **kwargs) -> ModelT:
        """Issue a request and validate the enveloped payload against ``model``"""
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise JourneyError(f"{method} {path} failed: {e}") from e

        if response.is_error:
            raise JourneyError(f"{method} {path} returned {response.status_code}: {response.text}")

        try:
            envelope = Envelope.model_validate(response.json())
            return model.model_validate(envelope.data)
        except (ValueError, ValidationError) as e:
            raise JourneyError(f"{method} {path} returned an unexpected shape: {e}") from e

    async def browse_products(self):
        _step(1, "Browse Products")
        listing = await self.call(ProductListData, "GET", "/products", params={"limit": 10, "offset": 0})
        logger.info(f"✓ Found {len(listing.products)} of {listing.count} products")
        for index, product in enumerate(listing.products[:5], start=1):
            price = _format_price(product.variants[0]) if product.variants else "n/a"
            logger.info(f"  {index}. {product.title} ({product.handle}) {price}")

        self.products = [product for product in listing.products if product.variants][:2]
        if not self.products:
            raise JourneyError("No purchasable products found; run the store bootstrap first")

    async def search_products(self, term: str = "iPhone"):
        _step(2, f'Search Products for "{term}"')
        results = await self.call(ProductListData, "GET", "/products", params={"search": term, "limit": 5})
        logger.info(f"✓ Found {len(results.products)} product(s) matching \"{term}\"")
        for index, product in enumerate(results.products, start=1):
            logger.info(f"  {index}. {product.title}")

    async def view_product_details(self):
        _step(3, "View Product Details")
        detail = await self.call(ProductDetailData, "GET", f"/products/{self.products[0].id}")
        product = detail.product
        logger.info(f"✓ {product.title}")
        logger.info(f"  Handle: {product.handle}")
        logger.info(f"  Variants: {len(product.variants)}, images: {len(product.images)}")
        for index, variant in enumerate(product.variants[:3], start=1):
            logger.info(f"    {index}. {variant.title} - SKU: {variant.sku}")

    async def create_cart(self):
        _step(4, "Create Shopping Cart")
        if not self.region_id:
            raise JourneyError("REGION_ID is not set; use the region id printed by the store bootstrap")

        body: Dict[str, Any] = {"regionId": self.region_id}
        if self.sales_channel_id:
            body["salesChannelId"] = self.sales_channel_id
        self.cart = (await self.call(CartEnvelopeData, "POST", "/cart", json=body)).cart
        logger.info(f"✓ Cart created: {self.cart.id} ({(self.cart.currencyCode or '').upper()})")

    async def add_items(self):
        _step(5, "Add Items to Cart")
        for quantity, product in enumerate(self.products, start=1):
            variant = product.variants[0]
            self.cart = (await self.call(
                CartEnvelopeData,
                "POST",
                f"/cart/{self.cart.id}/line-items",
                json={"variantId": variant.id, "quantity": quantity},
            )).cart
            logger.info(f"✓ Added {product.title} ({variant.title}) x{quantity}")
        logger.info(f"  Cart total: {self.cart.total}")

    async def update_quantity(self, quantity: int = 3):
        _step(6, "Update Cart Item Quantity")
        variant_id = self.products[0].variants[0].id
        item = next((i for i in self.cart.items if i.variantId == variant_id), None)
        if item is None:
            raise JourneyError(f"Line item for variant {variant_id} missing from cart")

        previous_total = self.cart.total
        self.cart = (await self.call(
            CartEnvelopeData,
            "PUT",
            f"/cart/{self.cart.id}/line-items/{item.id}",
            json={"quantity": quantity},
        )).cart

        updated = next((i for i in self.cart.items if i.id == item.id), None)
        if updated is None or updated.quantity != quantity:
            raise JourneyError(f"Expected quantity {quantity}, got {updated.quantity if updated else None}")
        if self.cart.total == previous_total:
            raise JourneyError(f"Cart total did not change after the update ({previous_total})")
        logger.info(f"✓ Quantity updated to {quantity}, total {previous_total} -> {self.cart.total}")

    async def guest_checkout(self):
        _step(7, "Customer Account")
        logger.info("ℹ Continuing as guest; the email is attached with the shipping address")

    async def add_shipping_address(self):
        _step(8, "Add Shipping Address")
        self.cart = (await self.call(
            CartEnvelopeData,
            "POST",
            f"/checkout/{self.cart.id}/shipping-address",
            json={
                "firstName": "Ali",
                "lastName": "Khan",
                "address1": "House 12, Street 5, F-7/2",
                "city": "Islamabad",
                "province": "Islamabad Capital Territory",
                "postalCode": "44000",
                "countryCode": "pk",
                "phone": "+92-300-1234567",
                "email": "journey.customer@example.com",
            },
        )).cart
        logger.info(f"✓ Shipping address set on cart {self.cart.id}")

    async def select_shipping_method(self):
        _step(9, "Select Shipping Method")
        logger.info("ℹ Pending: shipping method and payment are not exercised by this check")

    async def run(self):
        await self.browse_products()
        await self.search_products()
        await self.view_product_details()
        await self.create_cart()
        await self.add_items()
        await self.update_quantity()
        await self.guest_checkout()
        await self.add_shipping_address()
        await self.select_shipping_method()


async def run_journey() -> CustomerJourney:
    base_url = os.getenv("BFF_URL", DEFAULT_BFF_URL).rstrip("/")
    async with httpx.AsyncClient(base_url=base_url, timeout=30.0) as client:
        journey = CustomerJourney(
            client,
            region_id=os.getenv("REGION_ID"),
            sales_channel_id=os.getenv("SALES_CHANNEL_ID"),
        )
        await journey.run()
        return journey


def main() -> int:
    setup_service_logger("customer_journey", log_format="%(message)s")
    try:
        journey = asyncio.run(run_journey())
    except Exception as e:
        logger.error("")
        logger.error("=" * 80)
        logger.error(f"✗ CUSTOMER JOURNEY FAILED: {e}")
        logger.error("=" * 80)
        return 1

    logger.info("")
    logger.info("=" * 80)
    logger.info(f"✓ CUSTOMER JOURNEY COMPLETED (cart {journey.cart.id})")
    logger.info("=" * 80)
    return 0


if __name__ == "__main__":
    sys.exit(main())
