"""
Category Service Data Models
"""

from typing import Optional, Dict, Any
from pydantic import Field

from core.payload import StrictModel

CATEGORY_ID_PREFIX = "pcat_"


class CreateCategoryRequest(StrictModel):
    name: str = Field(..., min_length=1)
    handle: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None
    is_internal: Optional[bool] = None
    parent_category_id: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class UpdateCategoryRequest(StrictModel):
    """Partial update; only the fields sent are forwarded"""
    name: Optional[str] = Field(None, min_length=1)
    handle: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None
    is_internal: Optional[bool] = None
    parent_category_id: Optional[str] = None
    rank: Optional[int] = Field(None, ge=0)
    metadata: Optional[Dict[str, Any]] = None
