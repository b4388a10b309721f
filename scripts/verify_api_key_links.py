#!/usr/bin/env python3
"""
Verify publishable API key to sales channel links

Lists every publishable key with the sales channels it is scoped to.
Storefront requests made with an unlinked key see no products, so any
unlinked key makes the script exit non-zero.

Usage:
    python -m scripts.verify_api_key_links
"""

import asyncio
import logging
import sys

from core.config import get_settings
from core.logger import setup_service_logger

from .admin_client import AdminApiClient

logger = logging.getLogger(__name__)


async def verify_api_key_links(admin: AdminApiClient) -> int:
    """
    Log each publishable key and its linked channels.

    Returns:
        Number of keys linked to no sales channel
    """
    api_keys = await admin.list_all(
        "/api-keys",
        "api_keys",
        {"type": "publishable", "fields": "id,title,type,token,*sales_channels"},
    )
    if not api_keys:
        logger.warning("⚠️  No publishable API keys found")
        return 0

    logger.info(f"Found {len(api_keys)} publishable API key(s):")
    unlinked = 0
    for api_key in api_keys:
        logger.info("")
        logger.info(f"API Key: {api_key.get('title')}")
        logger.info(f"  ID: {api_key['id']}")
        logger.info(f"  Token: {api_key.get('token')}")

        channels = api_key.get("sales_channels") or []
        if channels:
            logger.info(f"  ✓ Linked to {len(channels)} sales channel(s):")
            for channel in channels:
                logger.info(f"    - {channel.get('name')} ({channel.get('id')})")
        else:
            unlinked += 1
            logger.warning("  ⚠️  NOT linked to any sales channels!")

    return unlinked


async def run_verification() -> int:
    settings = get_settings()
    async with AdminApiClient.from_config(settings.medusa) as admin:
        return await verify_api_key_links(admin)


def main() -> int:
    settings = get_settings()
    setup_service_logger("verify_api_key_links", level=settings.logging.log_level, log_format="%(message)s")
    try:
        unlinked = asyncio.run(run_verification())
    except Exception as e:
        logger.error(f"❌ Verification failed: {e}")
        return 1

    if unlinked:
        logger.error(f"❌ {unlinked} publishable key(s) are not linked to a sales channel")
        return 1
    logger.info("✅ All publishable keys are linked")
    return 0


if __name__ == "__main__":
    sys.exit(main())
