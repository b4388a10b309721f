"""
Store Administration Service

Admin access to the store singleton and its currencies, plus CRUD over the
sales channel, region, stock location and API key families. Responses keep
Medusa's snake_case names and drop internal fields.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from core.admin_service_base import AdminServiceBase
from core.errors import BadRequestError, NotFoundError
from core.payload import provided_fields

from .models import (
    UpdateStoreRequest,
    AddStoreCurrencyRequest,
    LinkChangesRequest,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceFamily:
    """How one admin resource family is addressed and reshaped"""
    path: str
    singular: str
    plural: str
    id_prefix: str
    label: str
    transform: Callable[[Dict[str, Any]], Dict[str, Any]]


def transform_store(store: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": store.get("id"),
        "name": store.get("name"),
        "default_sales_channel_id": store.get("default_sales_channel_id"),
        "default_region_id": store.get("default_region_id"),
        "default_location_id": store.get("default_location_id"),
        "metadata": store.get("metadata"),
        "supported_currencies": [
            {
                "id": currency.get("id"),
                "currency_code": currency.get("currency_code"),
                "is_default": bool(currency.get("is_default")),
                "symbol": (currency.get("currency") or {}).get("symbol"),
                "name": (currency.get("currency") or {}).get("name"),
            }
            for currency in store.get("supported_currencies") or []
        ],
        "created_at": store.get("created_at"),
        "updated_at": store.get("updated_at"),
    }


def transform_sales_channel(channel: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": channel.get("id"),
        "name": channel.get("name"),
        "description": channel.get("description"),
        "is_disabled": channel.get("is_disabled"),
        "metadata": channel.get("metadata"),
        "created_at": channel.get("created_at"),
        "updated_at": channel.get("updated_at"),
    }


def transform_region(region: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": region.get("id"),
        "name": region.get("name"),
        "currency_code": region.get("currency_code"),
        "automatic_taxes": region.get("automatic_taxes"),
        "is_tax_inclusive": region.get("is_tax_inclusive"),
        "countries": [
            {"iso_2": country.get("iso_2"), "display_name": country.get("display_name")}
            if isinstance(country, dict) else {"iso_2": country, "display_name": None}
            for country in region.get("countries") or []
        ],
        "metadata": region.get("metadata"),
        "created_at": region.get("created_at"),
        "updated_at": region.get("updated_at"),
    }


def transform_stock_location(location: Dict[str, Any]) -> Dict[str, Any]:
    address = location.get("address")
    return {
        "id": location.get("id"),
        "name": location.get("name"),
        "address": {
            "address_1": address.get("address_1"),
            "address_2": address.get("address_2"),
            "city": address.get("city"),
            "country_code": address.get("country_code"),
            "province": address.get("province"),
            "postal_code": address.get("postal_code"),
            "phone": address.get("phone"),
        } if address else None,
        "metadata": location.get("metadata"),
        "created_at": location.get("created_at"),
        "updated_at": location.get("updated_at"),
    }


def transform_api_key(api_key: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": api_key.get("id"),
        "title": api_key.get("title"),
        "token": api_key.get("token"),
        "redacted": api_key.get("redacted"),
        "type": api_key.get("type"),
        "last_used_at": api_key.get("last_used_at"),
        "revoked_at": api_key.get("revoked_at"),
        "sales_channels": [
            {"id": channel.get("id"), "name": channel.get("name")}
            for channel in api_key.get("sales_channels") or []
        ],
        "created_at": api_key.get("created_at"),
        "updated_at": api_key.get("updated_at"),
    }


SALES_CHANNELS = ResourceFamily(
    "/sales-channels", "sales_channel", "sales_channels", "sc_", "sales channel", transform_sales_channel
)
REGIONS = ResourceFamily(
    "/regions", "region", "regions", "reg_", "region", transform_region
)
STOCK_LOCATIONS = ResourceFamily(
    "/stock-locations", "stock_location", "stock_locations", "sloc_", "stock location",
    transform_stock_location,
)
API_KEYS = ResourceFamily(
    "/api-keys", "api_key", "api_keys", "apk_", "API key", transform_api_key
)


class StoreService(AdminServiceBase):
    """Store administration translator"""

    require_bearer = False

    # ====================
    # Store singleton
    # ====================

    async def _fetch_store(self, authorization: Optional[str]) -> Dict[str, Any]:
        response = await self.admin_call(
            "/stores",
            authorization,
            query={"fields": "*supported_currencies,*supported_currencies.currency"},
        )
        stores = response.get("stores") or []
        if not stores:
            raise NotFoundError("Store not found")
        return stores[0]

    async def get_store(self, authorization: Optional[str]) -> Dict[str, Any]:
        return transform_store(await self._fetch_store(authorization))

    async def update_store(
        self, request: UpdateStoreRequest, authorization: Optional[str]
    ) -> Dict[str, Any]:
        self.authorize(authorization)
        store = await self._fetch_store(authorization)
        body = provided_fields(request, nullable=("metadata",))
        response = await self.admin_call(
            f"/stores/{store['id']}", authorization, method="POST", body=body
        )
        return transform_store(response["store"])

    async def _save_currencies(
        self, store_id: str, currencies: List[Dict[str, Any]], authorization: Optional[str]
    ) -> Dict[str, Any]:
        response = await self.admin_call(
            f"/stores/{store_id}",
            authorization,
            method="POST",
            body={"supported_currencies": currencies},
        )
        return transform_store(response["store"])

    async def add_store_currency(
        self, request: AddStoreCurrencyRequest, authorization: Optional[str]
    ) -> Dict[str, Any]:
        """Add a supported currency; adding one that exists is a no-op"""
        self.authorize(authorization)
        store = await self._fetch_store(authorization)
        code = request.currency_code.lower()
        existing = store.get("supported_currencies") or []

        if any(c.get("currency_code") == code for c in existing):
            logger.info(f"Currency {code} already supported by store {store['id']}")
            return transform_store(store)

        currencies = [
            {
                "currency_code": c.get("currency_code"),
                "is_default": False if request.is_default else bool(c.get("is_default")),
            }
            for c in existing
        ]
        currencies.append({"currency_code": code, "is_default": request.is_default})
        return await self._save_currencies(store["id"], currencies, authorization)

    async def remove_store_currency(
        self, currency_code: str, authorization: Optional[str]
    ) -> Dict[str, Any]:
        """Remove a supported currency; the store always keeps one default"""
        self.authorize(authorization)
        store = await self._fetch_store(authorization)
        code = currency_code.lower()
        existing = store.get("supported_currencies") or []

        if not any(c.get("currency_code") == code for c in existing):
            raise NotFoundError(f"Currency {code} is not supported by the store", code)

        remaining = [
            {"currency_code": c.get("currency_code"), "is_default": bool(c.get("is_default"))}
            for c in existing
            if c.get("currency_code") != code
        ]
        if not remaining:
            raise BadRequestError("Cannot remove the last currency from store")
        if not any(c["is_default"] for c in remaining):
            remaining[0]["is_default"] = True

        return await self._save_currencies(store["id"], remaining, authorization)

    async def list_currencies(
        self,
        authorization: Optional[str],
        offset: int = 0,
        limit: int = 200,
        q: Optional[str] = None,
    ) -> Dict[str, Any]:
        response = await self.admin_call(
            "/currencies", authorization, query={"offset": offset, "limit": limit, "q": q}
        )
        currencies = response.get("currencies") or []
        return {
            "currencies": [
                {
                    "code": c.get("code"),
                    "name": c.get("name"),
                    "symbol": c.get("symbol"),
                    "symbol_native": c.get("symbol_native"),
                    "decimal_digits": c.get("decimal_digits"),
                }
                for c in currencies
            ],
            "count": response.get("count", len(currencies)),
            "offset": response.get("offset", offset),
            "limit": response.get("limit", limit),
        }

    # ====================
    # Resource families
    # ====================

    def _not_found(self, family: ResourceFamily, resource_id: str) -> Dict[str, Any]:
        label = family.label[0].upper() + family.label[1:]
        return {"not_found": f"{label} with ID {resource_id} not found", "resource_id": resource_id}

    async def list_resources(
        self,
        family: ResourceFamily,
        authorization: Optional[str],
        offset: int = 0,
        limit: int = 20,
        query: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        params = {"offset": offset, "limit": limit}
        params.update(query or {})
        response = await self.admin_call(family.path, authorization, query=params)
        records = response.get(family.plural) or []
        return {
            family.plural: [family.transform(record) for record in records],
            "count": response.get("count", len(records)),
            "offset": response.get("offset", offset),
            "limit": response.get("limit", limit),
        }

    async def get_resource(
        self,
        family: ResourceFamily,
        resource_id: str,
        authorization: Optional[str],
        query: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        self.authorize(authorization)
        self.check_id(resource_id, family.id_prefix, family.label)
        response = await self.admin_call(
            f"{family.path}/{resource_id}",
            authorization,
            query=query,
            **self._not_found(family, resource_id),
        )
        return family.transform(response[family.singular])

    async def create_resource(
        self, family: ResourceFamily, request, authorization: Optional[str]
    ) -> Dict[str, Any]:
        self.authorize(authorization)
        body = request.model_dump(mode="json", exclude_none=True)
        response = await self.admin_call(family.path, authorization, method="POST", body=body)
        record = response[family.singular]
        logger.info(f"Created {family.label} {record.get('id')}")
        return family.transform(record)

    async def update_resource(
        self, family: ResourceFamily, resource_id: str, request, authorization: Optional[str]
    ) -> Dict[str, Any]:
        self.authorize(authorization)
        self.check_id(resource_id, family.id_prefix, family.label)
        body = provided_fields(request, nullable=("description", "metadata"))
        response = await self.admin_call(
            f"{family.path}/{resource_id}",
            authorization,
            method="POST",
            body=body,
            **self._not_found(family, resource_id),
        )
        return family.transform(response[family.singular])

    async def delete_resource(
        self, family: ResourceFamily, resource_id: str, authorization: Optional[str]
    ) -> Dict[str, Any]:
        self.authorize(authorization)
        self.check_id(resource_id, family.id_prefix, family.label)
        response = await self.admin_call(
            f"{family.path}/{resource_id}",
            authorization,
            method="DELETE",
            **self._not_found(family, resource_id),
        )
        logger.info(f"Deleted {family.label} {resource_id}")
        return {
            "id": response.get("id", resource_id),
            "object": response.get("object", family.singular),
            "deleted": True,
        }

    async def update_links(
        self,
        family: ResourceFamily,
        resource_id: str,
        link_path: str,
        request: LinkChangesRequest,
        authorization: Optional[str],
    ) -> Dict[str, Any]:
        """Batch link/unlink, e.g. sales channels of a stock location"""
        self.authorize(authorization)
        self.check_id(resource_id, family.id_prefix, family.label)
        body: Dict[str, Any] = {}
        if request.add:
            body["add"] = request.add
        if request.remove:
            body["remove"] = request.remove
        if not body:
            raise BadRequestError("Provide ids to add or remove")

        response = await self.admin_call(
            f"{family.path}/{resource_id}{link_path}",
            authorization,
            method="POST",
            body=body,
            **self._not_found(family, resource_id),
        )
        return family.transform(response[family.singular])

    async def revoke_api_key(self, api_key_id: str, authorization: Optional[str]) -> Dict[str, Any]:
        self.authorize(authorization)
        self.check_id(api_key_id, API_KEYS.id_prefix, API_KEYS.label)
        response = await self.admin_call(
            f"{API_KEYS.path}/{api_key_id}/revoke",
            authorization,
            method="POST",
            **self._not_found(API_KEYS, api_key_id),
        )
        logger.info(f"Revoked API key {api_key_id}")
        return transform_api_key(response["api_key"])
