import time
from datetime import datetime
from typing import List

from sqlalchemy.orm import Session

from fixit.models.models import InventoryItem
from fixit.schemas.inventory_schemas import InventoryItemIn, InventoryItemOut


class InventoryService:
    @staticmethod
    def get_items(db: Session) -> List[InventoryItemOut]:
        items = db.query(InventoryItem).order_by(InventoryItem.name).all()
        return [InventoryItemOut.model_validate(i) for i in items]

    @staticmethod
    def get_low_stock(db: Session) -> List[InventoryItemOut]:
        """Items at or below their minimum stock"""
        items = (
            db.query(InventoryItem)
            .filter(InventoryItem.stock <= InventoryItem.min_stock)
            .order_by(InventoryItem.stock)
            .all()
        )
        return [InventoryItemOut.model_validate(i) for i in items]

    @staticmethod
    def save_item(db: Session, item_in: InventoryItemIn) -> InventoryItemOut:
        """Overwrite the item; a missing id becomes INV-<ms timestamp>"""
        data = item_in.model_dump()
        data["id"] = data.get("id") or f"INV-{int(time.time() * 1000)}"
        data["last_updated"] = datetime.now()
        item = db.merge(InventoryItem(**data))
        db.commit()
        return InventoryItemOut.model_validate(item)

    @staticmethod
    def delete_item(db: Session, item_id: str) -> bool:
        item = db.get(InventoryItem, item_id)
        if item is None:
            return False
        db.delete(item)
        db.commit()
        return True
