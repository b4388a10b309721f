"""
Collection Service Data Models
"""

from typing import Optional, Dict, Any, List
from pydantic import Field

from core.payload import StrictModel

COLLECTION_ID_PREFIX = "pcol_"


class CreateCollectionRequest(StrictModel):
    title: str = Field(..., min_length=1)
    handle: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class UpdateCollectionRequest(StrictModel):
    title: Optional[str] = Field(None, min_length=1)
    handle: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class CollectionProductsRequest(StrictModel):
    """Product ids to attach to / detach from a collection"""
    add: List[str] = Field(default_factory=list)
    remove: List[str] = Field(default_factory=list)
