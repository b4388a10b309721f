"""
FastAPI dependencies resolving translators from app.state
"""

from fastapi import HTTPException, Request

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

from .factory import BffServices


def get_services(request: Request) -> BffServices:
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return services


def get_medusa(request: Request) -> MedusaGatewayProtocol:
    return get_services(request).medusa


def get_product_service(request: Request) -> ProductService:
    return get_services(request).products


def get_cart_service(request: Request) -> CartService:
    return get_services(request).carts


def get_checkout_service(request: Request) -> CheckoutService:
    return get_services(request).checkout


def get_auth_service(request: Request) -> AuthService:
    return get_services(request).auth


def get_order_service(request: Request) -> OrderService:
    return get_services(request).orders


def get_category_service(request: Request) -> CategoryService:
    return get_services(request).categories


def get_collection_service(request: Request) -> CollectionService:
    return get_services(request).collections


def get_inventory_service(request: Request) -> InventoryService:
    return get_services(request).inventory


def get_store_service(request: Request) -> StoreService:
    return get_services(request).store
