#!/usr/bin/env python3
"""
Core Module for the Medusa BFF

Shared components used by every domain translator, the FastAPI app and the
operator scripts.

COMPONENTS:
    - config/: Dataclass configuration loaded from environment / dotenv files
    - logger.py: Service logger setup
    - errors.py: Error taxonomy rendered by the global exception handlers
    - medusa_client.py: Outbound request gateway to the Medusa backend
    - auth_dependencies.py: Authorization header extraction and gates
    - payload.py: Request/response translation helpers

USAGE:
    from core.config import get_settings
    from core.medusa_client import MedusaClient

    settings = get_settings()
    async with MedusaClient.from_config(settings.medusa) as medusa:
        products = await medusa.store_request("/products")
"""

__version__ = "1.0.0"
