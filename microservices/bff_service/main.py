"""
Storefront BFF

Responsibilities:
- Storefront catalogue, cart, checkout, customer auth and order endpoints
- Admin endpoints for categories, collections, inventory and store setup
- Uniform success envelope and error body over the Medusa backend
"""

import logging
from contextlib import asynccontextmanager
from http import HTTPStatus
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from core import __version__
from core.config import BffConfig, get_settings
from core.errors import BffError
from core.logger import setup_service_logger
from core.medusa_client import MedusaClient, MedusaGatewayProtocol

from microservices.auth_service.routes import router as auth_router
from microservices.cart_service.routes import router as cart_router
from microservices.category_service.routes import router as category_router
from microservices.checkout_service.routes import router as checkout_router
from microservices.collection_service.routes import router as collection_router
from microservices.inventory_service.routes import router as inventory_router
from microservices.order_service.routes import router as order_router
from microservices.product_service.routes import router as product_router
from microservices.store_service.routes import router as store_router

from .factory import create_bff_services
from .health_routes import router as health_router
from .middleware import ResponseEnvelopeMiddleware

logger = logging.getLogger(__name__)

DOMAIN_ROUTERS = [
    health_router,
    product_router,
    cart_router,
    checkout_router,
    auth_router,
    order_router,
    category_router,
    collection_router,
    inventory_router,
    store_router,
]


def _error_body(status_code: int, message, error: Optional[str] = None) -> dict:
    if error is None:
        try:
            error = HTTPStatus(status_code).phrase
        except ValueError:
            error = "Error"
    return {"statusCode": status_code, "message": message, "error": error}


def _validation_messages(exc: RequestValidationError) -> list:
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path"))
        text = err.get("msg", "Invalid value")
        messages.append(f"{location}: {text}" if location else text)
    return messages


def register_exception_handlers(app: FastAPI):
    """Render every failure as {"statusCode", "message", "error"}"""

    @app.exception_handler(BffError)
    async def bff_error_handler(request: Request, exc: BffError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.status_code, exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content=_error_body(400, _validation_messages(exc)),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=500,
            content=_error_body(500, "Internal server error"),
        )


def create_app(
    settings: Optional[BffConfig] = None,
    medusa: Optional[MedusaGatewayProtocol] = None,
) -> FastAPI:
    """
    Build the BFF application.

    Args:
        settings: Configuration; the global settings when omitted
        medusa: Pre-built gateway (tests). When omitted the lifespan opens a
            MedusaClient from settings and closes it on shutdown.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifecycle management"""
        setup_service_logger(
            settings.logging.service_name,
            level=settings.logging.log_level,
            log_format=settings.logging.log_format,
            log_file=settings.logging.log_file,
            enable_console=settings.logging.enable_console,
        )

        owned_client = None
        if getattr(app.state, "services", None) is None:
            owned_client = MedusaClient.from_config(settings.medusa)
            app.state.services = create_bff_services(owned_client)

        logger.info(
            f"✅ Medusa BFF started on {settings.host}:{settings.port}{settings.base_path} "
            f"(backend {settings.medusa.backend_url}, env {settings.environment})"
        )
        if not settings.medusa.publishable_key:
            logger.warning("⚠️  MEDUSA_PUBLISHABLE_KEY is not set, storefront calls will be rejected")

        yield

        if owned_client is not None:
            await owned_client.close()
            app.state.services = None
        logger.info("Medusa BFF shutdown complete")

    app = FastAPI(
        title="Medusa Storefront BFF",
        description="Backend-for-frontend translating storefront and admin calls to Medusa",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.services = create_bff_services(medusa) if medusa is not None else None

    app.add_middleware(ResponseEnvelopeMiddleware, base_path=settings.base_path)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    for router in DOMAIN_ROUTERS:
        app.include_router(router, prefix=settings.base_path)

    return app


app = create_app()


if __name__ == "__main__":
    config = get_settings()
    uvicorn.run(
        "microservices.bff_service.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level=config.logging.log_level.lower(),
    )
