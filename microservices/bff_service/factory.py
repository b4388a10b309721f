"""
BFF Service Factory

Builds every domain translator around one shared outbound gateway.
This is the only place translators get wired to real I/O.

Usage:
    from .factory import create_bff_services
    services = create_bff_services(medusa_client)
"""
from dataclasses import dataclass

from core.medusa_client import MedusaGatewayProtocol

from microservices.auth_service.auth_service import AuthService
from microservices.cart_service.cart_service import CartService
from microservices.category_service.category_service import CategoryService
from microservices.checkout_service.checkout_service import CheckoutService
from microservices.collection_service.collection_service import CollectionService
from microservices.inventory_service.inventory_service import InventoryService
from microservices.order_service.order_service import OrderService
from microservices.product_service.product_service import ProductService
from microservices.store_service.store_service import StoreService


@dataclass
class BffServices:
    """Translator instances sharing one gateway"""
    medusa: MedusaGatewayProtocol
    products: ProductService
    carts: CartService
    checkout: CheckoutService
    auth: AuthService
    orders: OrderService
    categories: CategoryService
    collections: CollectionService
    inventory: InventoryService
    store: StoreService


def create_bff_services(medusa: MedusaGatewayProtocol) -> BffServices:
    """
    Create all translators.

    Args:
        medusa: Outbound gateway (MedusaClient in production, a mock in tests)

    Returns:
        BffServices bundle stored on app.state
    """
    return BffServices(
        medusa=medusa,
        products=ProductService(medusa),
        carts=CartService(medusa),
        checkout=CheckoutService(medusa),
        auth=AuthService(medusa),
        orders=OrderService(medusa),
        categories=CategoryService(medusa),
        collections=CollectionService(medusa),
        inventory=InventoryService(medusa),
        store=StoreService(medusa),
    )
