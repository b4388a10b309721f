"""
Category Service Business Logic

Product category CRUD against the Medusa admin API plus the public
storefront category tree. Responses keep Medusa's snake_case field names.
"""

import logging
from typing import Optional, Dict, Any

from core.admin_service_base import AdminServiceBase
from core.errors import BadRequestError
from core.payload import normalize_handle, provided_fields

from .models import CATEGORY_ID_PREFIX, CreateCategoryRequest, UpdateCategoryRequest

logger = logging.getLogger(__name__)

NULLABLE_FIELDS = ("description", "parent_category_id", "metadata")


class CategoryService(AdminServiceBase):
    """Category translator"""

    async def list_categories(
        self,
        authorization: Optional[str] = None,
        offset: int = 0,
        limit: int = 50,
        q: Optional[str] = None,
        parent_category_id: Optional[str] = None,
        include_descendants_tree: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """
        List categories.

        Public: with an Authorization header the admin API is used (internal
        and inactive categories included), otherwise the storefront API.
        """
        query = {
            "offset": offset,
            "limit": limit,
            "q": q,
            "parent_category_id": parent_category_id,
            "include_descendants_tree": include_descendants_tree,
        }
        if authorization:
            response = await self.admin_call("/product-categories", authorization, query=query)
        else:
            response = await self.medusa.store_request("/product-categories", query=query)

        categories = response.get("product_categories") or []
        return {
            "categories": [self.transform_category(c) for c in categories],
            "count": response.get("count", len(categories)),
            "offset": response.get("offset", offset),
            "limit": response.get("limit", limit),
        }

    async def get_category_tree(self) -> Dict[str, Any]:
        """Root categories with their descendants (storefront)"""
        response = await self.medusa.store_request(
            "/product-categories",
            query={
                "parent_category_id": "null",
                "include_descendants_tree": True,
                "limit": 100,
            },
        )
        return {
            "categories": [
                self.transform_category(c) for c in response.get("product_categories") or []
            ]
        }

    async def get_category(self, category_id: str, authorization: Optional[str]) -> Dict[str, Any]:
        self.authorize(authorization)
        self.check_id(category_id, CATEGORY_ID_PREFIX, "category")
        response = await self.admin_call(
            f"/product-categories/{category_id}",
            authorization,
            not_found=f"Category with ID {category_id} not found",
            resource_id=category_id,
        )
        return self.transform_category(response["product_category"])

    async def create_category(
        self, request: CreateCategoryRequest, authorization: Optional[str]
    ) -> Dict[str, Any]:
        self.authorize(authorization)
        name = request.name.strip()
        if not name:
            raise BadRequestError("Category name is required")

        body: Dict[str, Any] = {
            "name": name,
            "handle": normalize_handle(request.handle or name),
            "is_active": True if request.is_active is None else request.is_active,
            "is_internal": False if request.is_internal is None else request.is_internal,
        }
        if request.description is not None:
            body["description"] = request.description
        if request.parent_category_id:
            self.check_id(request.parent_category_id, CATEGORY_ID_PREFIX, "parent category")
            body["parent_category_id"] = request.parent_category_id
        if request.metadata is not None:
            body["metadata"] = request.metadata

        response = await self.admin_call(
            "/product-categories", authorization, method="POST", body=body
        )
        category = response["product_category"]
        logger.info(f"Created category {category.get('id')} ({category.get('handle')})")
        return self.transform_category(category)

    async def update_category(
        self, category_id: str, request: UpdateCategoryRequest, authorization: Optional[str]
    ) -> Dict[str, Any]:
        self.authorize(authorization)
        self.check_id(category_id, CATEGORY_ID_PREFIX, "category")
        body = self.build_update_payload(request)
        if body.get("parent_category_id"):
            self.check_id(body["parent_category_id"], CATEGORY_ID_PREFIX, "parent category")

        response = await self.admin_call(
            f"/product-categories/{category_id}",
            authorization,
            not_found=f"Category with ID {category_id} not found",
            resource_id=category_id,
            method="POST",
            body=body,
        )
        return self.transform_category(response["product_category"])

    async def delete_category(self, category_id: str, authorization: Optional[str]) -> Dict[str, Any]:
        self.authorize(authorization)
        self.check_id(category_id, CATEGORY_ID_PREFIX, "category")
        response = await self.admin_call(
            f"/product-categories/{category_id}",
            authorization,
            not_found=f"Category with ID {category_id} not found",
            resource_id=category_id,
            method="DELETE",
        )
        logger.info(f"Deleted category {category_id}")
        return {
            "id": response.get("id", category_id),
            "object": response.get("object", "product_category"),
            "deleted": response.get("deleted", True),
        }

    @staticmethod
    def build_update_payload(request: UpdateCategoryRequest) -> Dict[str, Any]:
        body = provided_fields(request, nullable=NULLABLE_FIELDS)
        if "name" in body:
            body["name"] = body["name"].strip()
        if body.get("handle"):
            body["handle"] = normalize_handle(body["handle"])
        return body

    @staticmethod
    def transform_category(category: Dict[str, Any]) -> Dict[str, Any]:
        parent = category.get("parent_category")
        return {
            "id": category.get("id"),
            "name": category.get("name"),
            "handle": category.get("handle"),
            "description": category.get("description"),
            "is_active": category.get("is_active"),
            "is_internal": category.get("is_internal"),
            "rank": category.get("rank"),
            "parent_category_id": category.get("parent_category_id"),
            "parent_category": {
                "id": parent.get("id"),
                "name": parent.get("name"),
                "handle": parent.get("handle"),
            } if parent else None,
            "category_children": [
                {
                    "id": child.get("id"),
                    "name": child.get("name"),
                    "handle": child.get("handle"),
                    "is_active": child.get("is_active"),
                }
                for child in category.get("category_children") or []
            ],
            "metadata": category.get("metadata"),
            "created_at": category.get("created_at"),
            "updated_at": category.get("updated_at"),
        }
