"""
Collection Service Business Logic
"""

import logging
from typing import Optional, Dict, Any

from core.admin_service_base import AdminServiceBase
from core.errors import BadRequestError
from core.payload import normalize_handle, provided_fields

from .models import (
    COLLECTION_ID_PREFIX,
    CreateCollectionRequest,
    UpdateCollectionRequest,
    CollectionProductsRequest,
)

logger = logging.getLogger(__name__)


class CollectionService(AdminServiceBase):
    """Collection translator (admin)"""

    def _not_found(self, collection_id: str) -> Dict[str, str]:
        return {
            "not_found": f"Collection with ID {collection_id} not found",
            "resource_id": collection_id,
        }

    async def list_collections(
        self,
        authorization: Optional[str],
        offset: int = 0,
        limit: int = 10,
        q: Optional[str] = None,
    ) -> Dict[str, Any]:
        response = await self.admin_call(
            "/collections", authorization, query={"offset": offset, "limit": limit, "q": q}
        )
        collections = response.get("collections") or []
        return {
            "collections": [self.transform_collection(c) for c in collections],
            "count": response.get("count", len(collections)),
            "offset": response.get("offset", offset),
            "limit": response.get("limit", limit),
        }

    async def get_collection(self, collection_id: str, authorization: Optional[str]) -> Dict[str, Any]:
        self.authorize(authorization)
        self.check_id(collection_id, COLLECTION_ID_PREFIX, "collection")
        response = await self.admin_call(
            f"/collections/{collection_id}", authorization, **self._not_found(collection_id)
        )
        return self.transform_collection(response["collection"])

    async def create_collection(
        self, request: CreateCollectionRequest, authorization: Optional[str]
    ) -> Dict[str, Any]:
        self.authorize(authorization)
        title = request.title.strip()
        if not title:
            raise BadRequestError("Collection title is required")

        body: Dict[str, Any] = {"title": title}
        if request.handle:
            body["handle"] = normalize_handle(request.handle)
        if request.metadata is not None:
            body["metadata"] = request.metadata

        response = await self.admin_call("/collections", authorization, method="POST", body=body)
        collection = response["collection"]
        logger.info(f"Created collection {collection.get('id')} ({collection.get('handle')})")
        return self.transform_collection(collection)

    async def update_collection(
        self, collection_id: str, request: UpdateCollectionRequest, authorization: Optional[str]
    ) -> Dict[str, Any]:
        self.authorize(authorization)
        self.check_id(collection_id, COLLECTION_ID_PREFIX, "collection")
        body = provided_fields(request, nullable=("metadata",))
        if body.get("title"):
            body["title"] = body["title"].strip()
        if body.get("handle"):
            body["handle"] = normalize_handle(body["handle"])

        response = await self.admin_call(
            f"/collections/{collection_id}",
            authorization,
            method="POST",
            body=body,
            **self._not_found(collection_id),
        )
        return self.transform_collection(response["collection"])

    async def delete_collection(self, collection_id: str, authorization: Optional[str]) -> Dict[str, Any]:
        self.authorize(authorization)
        self.check_id(collection_id, COLLECTION_ID_PREFIX, "collection")
        response = await self.admin_call(
            f"/collections/{collection_id}",
            authorization,
            method="DELETE",
            **self._not_found(collection_id),
        )
        return {
            "id": response.get("id", collection_id),
            "object": response.get("object", "collection"),
            "deleted": response.get("deleted", True),
        }

    async def update_collection_products(
        self,
        collection_id: str,
        request: CollectionProductsRequest,
        authorization: Optional[str],
    ) -> Dict[str, Any]:
        self.authorize(authorization)
        self.check_id(collection_id, COLLECTION_ID_PREFIX, "collection")
        body: Dict[str, Any] = {}
        if request.add:
            body["add"] = request.add
        if request.remove:
            body["remove"] = request.remove
        if not body:
            raise BadRequestError("Provide product ids to add or remove")

        response = await self.admin_call(
            f"/collections/{collection_id}/products",
            authorization,
            method="POST",
            body=body,
            **self._not_found(collection_id),
        )
        return self.transform_collection(response["collection"])

    @staticmethod
    def transform_collection(collection: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": collection.get("id"),
            "title": collection.get("title"),
            "handle": collection.get("handle"),
            "metadata": collection.get("metadata"),
            "created_at": collection.get("created_at"),
            "updated_at": collection.get("updated_at"),
        }
