from pydantic import Field, computed_field
from typing import Optional
from datetime import datetime

from fixit.schemas.common import BaseSchema
from fixit.constants.repair import DEFAULT_INVENTORY_CATEGORY, DEFAULT_INVENTORY_UNIT


class InventoryItemIn(BaseSchema):
    id: Optional[str] = Field(None, description="INV-<timestamp> is generated when empty")
    name: str = Field(..., min_length=1)
    category: str = DEFAULT_INVENTORY_CATEGORY
    stock: int = Field(0, ge=0)
    unit: str = DEFAULT_INVENTORY_UNIT
    min_stock: int = Field(5, ge=0)


class InventoryItemOut(BaseSchema):
    id: str
    name: str
    category: Optional[str] = None
    stock: int
    unit: Optional[str] = None
    min_stock: int
    last_updated: Optional[datetime] = None

    @computed_field
    @property
    def low_stock(self) -> bool:
        return self.stock <= self.min_stock
