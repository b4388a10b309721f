#!/usr/bin/env python3
"""
Store bootstrap

Configures a freshly migrated Medusa instance over the Admin API: store
settings, regions, sales channels, warehouses, publishable keys, shipping,
the category tree, the product catalogue and inventory levels.

Safe to re-run. Every step re-reads the platform's current state and only
creates what is missing; links are upserted by diffing current links against
the wanted set.

Usage:
    MEDUSA_ADMIN_EMAIL=admin@example.com MEDUSA_ADMIN_PASSWORD=... \\
        python -m scripts.bootstrap_store
"""

import asyncio
import logging
import sys
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from core.config import get_settings
from core.logger import setup_service_logger
from microservices.product_service.models import CreateProductRequest, ProductStatus
from microservices.product_service.product_service import ProductService

from . import bootstrap_config as config
from .admin_client import AdminApiClient

logger = logging.getLogger(__name__)

TOTAL_STEPS = 12


class BootstrapError(Exception):
    """A precondition failed; the run cannot continue"""


@dataclass
class StoreContext:
    """The store every step configures"""
    store_id: str
    store_name: Optional[str] = None
    default_sales_channel_id: Optional[str] = None
    default_region_id: Optional[str] = None
    default_location_id: Optional[str] = None
    shipping_profile_id: Optional[str] = None


@dataclass
class ResourceCounts:
    created: int = 0
    reused: int = 0
    skipped: int = 0
    failed: int = 0


@dataclass
class BootstrapReport:
    """Ids and counters collected during one run"""
    counts: Dict[str, ResourceCounts] = field(default_factory=lambda: defaultdict(ResourceCounts))
    regions: List[Dict[str, Any]] = field(default_factory=list)
    sales_channels: List[Dict[str, Any]] = field(default_factory=list)
    stock_locations: List[Dict[str, Any]] = field(default_factory=list)
    category_ids: Dict[str, str] = field(default_factory=dict)
    api_key_tokens: Dict[str, str] = field(default_factory=dict)

    def count(self, kind: str) -> ResourceCounts:
        return self.counts[kind]

    @property
    def total_created(self) -> int:
        return sum(counts.created for counts in self.counts.values())


def _ids(records: Iterable[Dict[str, Any]]) -> List[str]:
    return [record["id"] for record in records if record.get("id")]


def _shipping_set(location: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    return next(
        (s for s in location.get("fulfillment_sets") or [] if s.get("type") == "shipping"), None
    )


def _step(number: int, title: str):
    logger.info("")
    logger.info(f"[Step {number}/{TOTAL_STEPS}] {title}...")


class StoreBootstrapper:
    """
    Runs the bootstrap steps in dependency order.

    Each step reads the state it needs, creates what is missing and records
    ids in the report for later steps. A failing item is logged and skipped;
    only BootstrapError aborts the run.
    """

    def __init__(self, admin: AdminApiClient):
        self.admin = admin
        self.report = BootstrapReport()

    async def run(self) -> BootstrapReport:
        logger.info("=" * 60)
        logger.info("Medusa store bootstrap")
        logger.info("=" * 60)

        try:
            context = await self.setup_store()
            await self.setup_regions(context)
            await self.setup_sales_channels(context)
            await self.setup_stock_locations(context)
            await self.link_locations_to_channels(context)
            await self.setup_api_keys(context)
            await self.link_api_keys_to_channels(context)
            await self.setup_shipping(context)
            await self.setup_categories(context)
            await self.setup_products(context)
            await self.setup_inventory(context)
            await self.assign_store_defaults(context)
        except BootstrapError as e:
            logger.error(f"❌ Bootstrap aborted: {e}")
            raise

        self.log_summary()
        return self.report

    # ==================== Step 1: Store ====================

    async def setup_store(self) -> StoreContext:
        _step(1, "Loading store")
        response = await self.admin.get(
            "/stores",
            query={"fields": "id,name,default_sales_channel_id,default_region_id,"
                             "default_location_id,*supported_currencies"},
        )
        stores = response.get("stores") or []
        if not stores:
            raise BootstrapError("No store found. Run the Medusa migrations first.")

        store = stores[0]
        context = StoreContext(
            store_id=store["id"],
            store_name=store.get("name"),
            default_sales_channel_id=store.get("default_sales_channel_id"),
            default_region_id=store.get("default_region_id"),
            default_location_id=store.get("default_location_id"),
        )
        if not context.default_sales_channel_id:
            raise BootstrapError("No default sales channel found.")
        logger.info(f"✓ Store found: {context.store_name} ({context.store_id})")

        update: Dict[str, Any] = {}
        currencies = self._merge_currencies(store.get("supported_currencies") or [])
        if currencies is not None:
            update["supported_currencies"] = currencies
        if context.store_name != config.STORE_NAME:
            update["name"] = config.STORE_NAME

        counts = self.report.count("store")
        if not update:
            logger.info("✓ Store name and currencies already configured")
            counts.reused += 1
            return context

        try:
            await self.admin.post(f"/stores/{context.store_id}", update)
            context.store_name = config.STORE_NAME
            counts.created += 1
            logger.info(
                f"✓ Store updated: {config.STORE_NAME} "
                f"(currencies: {', '.join(c['currency_code'] for c in config.CURRENCIES)})"
            )
        except Exception as e:
            counts.failed += 1
            logger.warning(f"⚠️  Could not update store settings: {e}")
        return context

    @staticmethod
    def _merge_currencies(existing: List[Dict[str, Any]]) -> Optional[List[Dict[str, Any]]]:
        """Configured currencies merged into the store's; None when nothing is missing"""
        current = [
            {"currency_code": c.get("currency_code"), "is_default": bool(c.get("is_default"))}
            for c in existing
        ]
        present = {c["currency_code"] for c in current}
        missing = [c for c in config.CURRENCIES if c["currency_code"] not in present]
        if not missing:
            return None

        new_default = next((c["currency_code"] for c in missing if c["is_default"]), None)
        for currency in current:
            if new_default:
                currency["is_default"] = False
        for currency in missing:
            current.append({
                "currency_code": currency["currency_code"],
                "is_default": currency["currency_code"] == new_default,
            })
        if not any(c["is_default"] for c in current):
            current[0]["is_default"] = True
        return current

    # ==================== Steps 2-4: Regions, channels, locations ====================

    async def _create_all(self, kind: str, path: str, key: str, seeds: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        created = []
        counts = self.report.count(kind)
        for seed in seeds:
            label = seed.get("name") or seed.get("title")
            try:
                response = await self.admin.post(path, seed)
                record = response[key]
                created.append(record)
                counts.created += 1
                logger.info(f"  ✓ Created {label} ({record['id']})")
            except Exception as e:
                counts.failed += 1
                logger.warning(f"  ⚠️  Could not create {label}: {e}")
        return created

    async def setup_regions(self, context: StoreContext):
        _step(2, "Regions")
        regions = await self.admin.list_all("/regions", "regions", {"fields": "id,name,currency_code,*countries"})
        if regions:
            self.report.count("regions").reused += len(regions)
            logger.info(f"✓ Using existing {len(regions)} region(s)")
        else:
            regions = await self._create_all("regions", "/regions", "region", config.REGIONS)
        for region in regions:
            logger.info(f"  - {region.get('name')} ({region['id']}) {region.get('currency_code')}")
        self.report.regions = regions

    async def setup_sales_channels(self, context: StoreContext):
        _step(3, "Sales channels")
        channels = await self.admin.list_all("/sales-channels", "sales_channels")
        builtin_only = not channels or (
            len(channels) == 1 and channels[0]["id"] == context.default_sales_channel_id
        )
        if builtin_only:
            channels = channels + await self._create_all(
                "sales channels", "/sales-channels", "sales_channel", config.SALES_CHANNELS
            )
        else:
            self.report.count("sales channels").reused += len(channels)
            logger.info(f"✓ Using existing {len(channels)} sales channel(s)")
        for channel in channels:
            logger.info(f"  - {channel.get('name')} ({channel['id']})")
        self.report.sales_channels = channels

    async def setup_stock_locations(self, context: StoreContext):
        _step(4, "Stock locations")
        locations = await self.admin.list_all("/stock-locations", "stock_locations")
        if locations:
            self.report.count("stock locations").reused += len(locations)
            logger.info(f"✓ Using existing {len(locations)} stock location(s)")
        else:
            locations = await self._create_all(
                "stock locations", "/stock-locations", "stock_location", config.STOCK_LOCATIONS
            )
        for location in locations:
            logger.info(f"  - {location.get('name')} ({location['id']})")
        self.report.stock_locations = locations

    # ==================== Link upserts ====================

    async def _upsert_channel_links(self, kind: str, owner_path: str, owners: List[Dict[str, Any]]):
        """Link every owner to every known sales channel, adding only missing links"""
        channel_ids = _ids(self.report.sales_channels)
        counts = self.report.count(kind)
        for owner in owners:
            label = owner.get("name") or owner.get("title") or owner["id"]
            linked = set(_ids(owner.get("sales_channels") or []))
            missing = [channel_id for channel_id in channel_ids if channel_id not in linked]
            if not missing:
                counts.reused += 1
                logger.info(f"  ✓ {label} already linked to all {len(channel_ids)} channel(s)")
                continue
            try:
                await self.admin.post(f"{owner_path}/{owner['id']}/sales-channels", {"add": missing})
                counts.created += len(missing)
                logger.info(f"  ✓ Linked {label} to {len(missing)} channel(s)")
            except Exception as e:
                counts.failed += 1
                logger.warning(f"  ⚠️  Could not link {label}: {e}")

    async def link_locations_to_channels(self, context: StoreContext):
        _step(5, "Linking stock locations to sales channels")
        locations = await self.admin.list_all(
            "/stock-locations", "stock_locations", {"fields": "id,name,*sales_channels"}
        )
        await self._upsert_channel_links("location links", "/stock-locations", locations)

    # ==================== Steps 6-7: API keys ====================

    async def _list_publishable_keys(self) -> List[Dict[str, Any]]:
        return await self.admin.list_all(
            "/api-keys", "api_keys", {"type": "publishable", "fields": "id,title,token,*sales_channels"}
        )

    async def setup_api_keys(self, context: StoreContext):
        _step(6, "Publishable API keys")
        keys = await self._list_publishable_keys()
        if keys:
            self.report.count("api keys").reused += len(keys)
            logger.info(f"✓ Using existing {len(keys)} publishable key(s)")
        else:
            keys = await self._create_all("api keys", "/api-keys", "api_key", config.API_KEYS)
        for key in keys:
            self.report.api_key_tokens[key.get("title") or key["id"]] = key.get("token")

    async def link_api_keys_to_channels(self, context: StoreContext):
        _step(7, "Linking API keys to sales channels")
        await self._upsert_channel_links("api key links", "/api-keys", await self._list_publishable_keys())

    # ==================== Step 8: Shipping ====================

    async def _resolve_shipping_profile(self) -> str:
        profiles = await self.admin.list_all("/shipping-profiles", "shipping_profiles")
        profile = next((p for p in profiles if p.get("type") == "default"), None) or (profiles[0] if profiles else None)
        counts = self.report.count("shipping profiles")
        if profile:
            counts.reused += 1
            logger.info(f"✓ Shipping profile: {profile.get('name')} ({profile['id']})")
            return profile["id"]

        try:
            response = await self.admin.post(
                "/shipping-profiles", {"name": config.SHIPPING_PROFILE_NAME, "type": "default"}
            )
        except Exception as e:
            raise BootstrapError(f"No shipping profile available and creating one failed: {e}") from e
        profile = response["shipping_profile"]
        counts.created += 1
        logger.info(f"✓ Created shipping profile {profile['id']}")
        return profile["id"]

    async def _load_location_fulfillment(self, location_id: str) -> Dict[str, Any]:
        response = await self.admin.get(
            f"/stock-locations/{location_id}",
            query={"fields": "id,name,*fulfillment_providers,*fulfillment_sets,*fulfillment_sets.service_zones"},
        )
        return response["stock_location"]

    def _region_countries(self) -> List[str]:
        countries: List[str] = []
        for region in self.report.regions:
            for country in region.get("countries") or []:
                code = country.get("iso_2") if isinstance(country, dict) else country
                if code and code not in countries:
                    countries.append(code)
        if not countries:
            for region in config.REGIONS:
                countries.extend(c for c in region["countries"] if c not in countries)
        return countries

    async def setup_shipping(self, context: StoreContext):
        _step(8, "Shipping")
        context.shipping_profile_id = await self._resolve_shipping_profile()

        if not self.report.stock_locations:
            logger.warning("⚠️  No stock location, skipping fulfillment setup")
            return

        location_id = self.report.stock_locations[0]["id"]
        try:
            zone = await self._ensure_service_zone(location_id)
        except Exception as e:
            self.report.count("fulfillment sets").failed += 1
            logger.warning(f"⚠️  Fulfillment setup failed for {location_id}, skipping shipping options: {e}")
            return
        if zone is None:
            self.report.count("fulfillment sets").failed += 1
            logger.warning(f"⚠️  No shipping fulfillment set on {location_id}, skipping shipping options")
            return

        await self._ensure_shipping_options(context, zone["id"])

    async def _ensure_service_zone(self, location_id: str) -> Optional[Dict[str, Any]]:
        """Provider link, shipping fulfillment set and service zone of a location"""
        location = await self._load_location_fulfillment(location_id)

        provider_ids = _ids(location.get("fulfillment_providers") or [])
        if config.FULFILLMENT_PROVIDER_ID not in provider_ids:
            await self.admin.post(
                f"/stock-locations/{location_id}/fulfillment-providers",
                {"add": [config.FULFILLMENT_PROVIDER_ID]},
            )
            logger.info(f"✓ Linked fulfillment provider {config.FULFILLMENT_PROVIDER_ID}")

        fulfillment_set = _shipping_set(location)
        if fulfillment_set is None:
            await self.admin.post(
                f"/stock-locations/{location_id}/fulfillment-sets",
                {"name": config.FULFILLMENT_SET_NAME, "type": "shipping"},
            )
            fulfillment_set = _shipping_set(await self._load_location_fulfillment(location_id))
            if fulfillment_set is None:
                return None
            self.report.count("fulfillment sets").created += 1
            logger.info(f"✓ Created fulfillment set {fulfillment_set['id']}")
        else:
            self.report.count("fulfillment sets").reused += 1

        zones = fulfillment_set.get("service_zones") or []
        if zones:
            self.report.count("service zones").reused += 1
            return zones[0]

        response = await self.admin.post(
            f"/fulfillment-sets/{fulfillment_set['id']}/service-zones",
            {
                "name": config.SERVICE_ZONE_NAME,
                "geo_zones": [
                    {"type": "country", "country_code": code} for code in self._region_countries()
                ],
            },
        )
        zones = response["fulfillment_set"].get("service_zones") or []
        if not zones:
            return None
        self.report.count("service zones").created += 1
        logger.info(f"✓ Created service zone {zones[0]['id']}")
        return zones[0]

    async def _ensure_shipping_options(self, context: StoreContext, service_zone_id: str):
        existing = await self.admin.list_all(
            "/shipping-options", "shipping_options", {"service_zone_id": service_zone_id}
        )
        names = {option.get("name") for option in existing}
        counts = self.report.count("shipping options")

        for seed in config.SHIPPING_OPTIONS:
            if seed.name in names:
                counts.reused += 1
                logger.info(f"  ✓ Shipping option exists: {seed.name}")
                continue
            try:
                await self.admin.post("/shipping-options", {
                    "name": seed.name,
                    "price_type": "flat",
                    "provider_id": config.FULFILLMENT_PROVIDER_ID,
                    "service_zone_id": service_zone_id,
                    "shipping_profile_id": context.shipping_profile_id,
                    "type": {"label": seed.name, "description": seed.description, "code": seed.code},
                    "prices": [{"currency_code": "pkr", "amount": seed.amount}],
                    "rules": [
                        {"attribute": "enabled_in_store", "value": "true", "operator": "eq"},
                        {"attribute": "is_return", "value": "false", "operator": "eq"},
                    ],
                })
                counts.created += 1
                logger.info(f"  ✓ Created shipping option: {seed.name}")
            except Exception as e:
                counts.failed += 1
                logger.warning(f"  ⚠️  Could not create shipping option {seed.name}: {e}")

    # ==================== Step 9: Categories ====================

    async def setup_categories(self, context: StoreContext):
        _step(9, "Product categories")
        existing = await self.admin.list_all(
            "/product-categories", "product_categories", {"fields": "id,name,handle"}
        )
        known = {category["handle"]: category["id"] for category in existing if category.get("handle")}

        for seed in config.CATEGORIES:
            await self._ensure_category(seed, None, known, depth=0)

    async def _ensure_category(self, seed: config.CategorySeed, parent_id: Optional[str], known: Dict[str, str], depth: int):
        indent = "  " * (depth + 1)
        counts = self.report.count("categories")

        category_id = known.get(seed.handle)
        if category_id:
            counts.reused += 1
            logger.info(f"{indent}✓ Found category: {seed.name} ({seed.handle})")
        else:
            try:
                response = await self.admin.post("/product-categories", {
                    "name": seed.name,
                    "handle": seed.handle,
                    "description": seed.description,
                    "is_active": seed.is_active,
                    "is_internal": seed.is_internal,
                    "parent_category_id": parent_id,
                })
                category_id = response["product_category"]["id"]
                known[seed.handle] = category_id
                counts.created += 1
                logger.info(f"{indent}✓ Created category: {seed.name} ({category_id})")
            except Exception as e:
                counts.failed += 1
                logger.warning(f"{indent}⚠️  Could not create category {seed.name}, skipping its subtree: {e}")
                return

        self.report.category_ids[seed.handle] = category_id
        for child in seed.children:
            await self._ensure_category(child, category_id, known, depth + 1)

    # ==================== Step 10: Products ====================

    def build_product_payload(self, seed: Dict[str, Any], category_id: str, context: StoreContext) -> Dict[str, Any]:
        request = CreateProductRequest(
            title=seed["title"],
            handle=seed["handle"],
            description=seed.get("description"),
            status=ProductStatus.PUBLISHED,
            thumbnail=seed.get("thumbnail"),
            images=seed.get("images") or [],
            categories=[category_id],
            sales_channels=_ids(self.report.sales_channels),
            shipping_profile_id=context.shipping_profile_id,
            options=seed.get("options") or [],
            variants=[dict(variant, manage_inventory=True) for variant in seed["variants"]],
        )
        return ProductService.build_create_payload(request)

    async def setup_products(self, context: StoreContext):
        _step(10, "Products")
        channel_ids = _ids(self.report.sales_channels)
        if not channel_ids:
            raise BootstrapError("No sales channel available for products")
        if not context.shipping_profile_id:
            raise BootstrapError("No shipping profile available for products")

        existing = await self.admin.list_all("/products", "products", {"fields": "id,handle,*sales_channels"})
        by_handle = {product["handle"]: product for product in existing if product.get("handle")}
        pending_links: Dict[str, List[str]] = defaultdict(list)
        counts = self.report.count("products")

        for seed in config.PRODUCTS:
            product = by_handle.get(seed["handle"])
            if product:
                counts.skipped += 1
                linked = set(_ids(product.get("sales_channels") or []))
                for channel_id in channel_ids:
                    if channel_id not in linked:
                        pending_links[channel_id].append(product["id"])
                logger.info(f"  ✓ Exists: {seed['title']}")
                continue

            category_id = self.report.category_ids.get(seed["category_handle"])
            if not category_id:
                counts.skipped += 1
                logger.warning(f"  ⚠️  Category {seed['category_handle']} not found, skipping {seed['title']}")
                continue

            try:
                payload = self.build_product_payload(seed, category_id, context)
                response = await self.admin.post("/products", payload)
                counts.created += 1
                logger.info(f"  ✓ Created: {seed['title']} ({response['product']['id']})")
            except Exception as e:
                counts.failed += 1
                logger.warning(f"  ⚠️  Could not create {seed['title']}: {e}")

        link_counts = self.report.count("product links")
        for channel_id, product_ids in pending_links.items():
            try:
                await self.admin.post(f"/sales-channels/{channel_id}/products", {"add": product_ids})
                link_counts.created += len(product_ids)
                logger.info(f"  ✓ Linked {len(product_ids)} existing product(s) to channel {channel_id}")
            except Exception as e:
                link_counts.failed += 1
                logger.warning(f"  ⚠️  Could not link products to channel {channel_id}: {e}")

    # ==================== Step 11: Inventory ====================

    async def setup_inventory(self, context: StoreContext):
        _step(11, "Inventory")
        await self._ensure_inventory_items()
        await self._ensure_inventory_levels()

    async def _ensure_inventory_items(self):
        variants = await self.admin.list_all(
            "/product-variants", "variants", {"fields": "id,sku,title,product_id,*inventory_items"}
        )
        counts = self.report.count("inventory items")

        for variant in variants:
            if variant.get("inventory_items"):
                counts.reused += 1
                continue
            sku = variant.get("sku")
            if not sku:
                counts.skipped += 1
                logger.warning(f"  ⚠️  Variant {variant['id']} has no SKU, no inventory item created")
                continue
            try:
                response = await self.admin.post(
                    "/inventory-items", {"sku": sku, "title": variant.get("title") or sku}
                )
                item_id = response["inventory_item"]["id"]
                await self.admin.post(
                    f"/products/{variant['product_id']}/variants/{variant['id']}/inventory-items",
                    {"inventory_item_id": item_id, "required_quantity": 1},
                )
                counts.created += 1
                logger.info(f"  ✓ Inventory item {item_id} for {sku}")
            except Exception as e:
                counts.failed += 1
                logger.warning(f"  ⚠️  Could not create inventory item for {sku}: {e}")

    async def _ensure_inventory_levels(self):
        location_ids = _ids(self.report.stock_locations)
        items = await self.admin.list_all(
            "/inventory-items", "inventory_items", {"fields": "id,sku,*location_levels"}
        )
        counts = self.report.count("inventory levels")

        for item in items:
            stocked = {level.get("location_id") for level in item.get("location_levels") or []}
            for location_id in location_ids:
                if location_id in stocked:
                    counts.reused += 1
                    continue
                try:
                    await self.admin.post(
                        f"/inventory-items/{item['id']}/location-levels",
                        {"location_id": location_id, "stocked_quantity": config.INITIAL_STOCK_QUANTITY},
                    )
                    counts.created += 1
                except Exception as e:
                    counts.failed += 1
                    logger.warning(f"  ⚠️  Could not stock {item.get('sku') or item['id']} at {location_id}: {e}")

        logger.info(
            f"✓ Inventory levels: {counts.created} created, {counts.reused} existing, {counts.failed} failed"
        )

    # ==================== Step 12: Store defaults ====================

    async def assign_store_defaults(self, context: StoreContext):
        _step(12, "Store defaults")
        update: Dict[str, Any] = {}
        if self.report.regions and context.default_region_id != self.report.regions[0]["id"]:
            update["default_region_id"] = self.report.regions[0]["id"]
        if self.report.stock_locations and context.default_location_id != self.report.stock_locations[0]["id"]:
            update["default_location_id"] = self.report.stock_locations[0]["id"]

        if not update:
            logger.info("✓ Store defaults already set")
            return

        await self.admin.post(f"/stores/{context.store_id}", update)
        context.default_region_id = update.get("default_region_id", context.default_region_id)
        context.default_location_id = update.get("default_location_id", context.default_location_id)
        logger.info(f"✓ Store defaults updated: {update}")

    # ==================== Summary ====================

    def log_summary(self):
        logger.info("")
        logger.info("=" * 60)
        logger.info("Bootstrap summary")
        logger.info("=" * 60)
        for kind, counts in self.report.counts.items():
            logger.info(
                f"  {kind:<20} created={counts.created} reused={counts.reused} "
                f"skipped={counts.skipped} failed={counts.failed}"
            )

        if self.report.api_key_tokens:
            logger.info("")
            logger.info("Publishable API keys:")
            for title, token in self.report.api_key_tokens.items():
                logger.info(f"  {title}: {token}")

        if self.report.regions:
            logger.info("")
            logger.info(f"Region id: {self.report.regions[0]['id']}")

        logger.info("")
        logger.info("Next steps:")
        logger.info("  1. Set MEDUSA_PUBLISHABLE_KEY for the BFF to one of the keys above")
        logger.info("  2. Start the BFF: python -m microservices.bff_service.main")
        logger.info("  3. Run the journey check: python -m scripts.customer_journey")


async def run_bootstrap() -> BootstrapReport:
    settings = get_settings()
    async with AdminApiClient.from_config(settings.medusa) as admin:
        return await StoreBootstrapper(admin).run()


def main() -> int:
    settings = get_settings()
    setup_service_logger("bootstrap_store", level=settings.logging.log_level, log_format="%(message)s")
    try:
        asyncio.run(run_bootstrap())
    except Exception as e:
        logger.error(f"❌ Bootstrap failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
