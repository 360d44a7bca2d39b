# models package
from fixit.models.models import User, RepairRequest, InventoryItem, MaintenanceTask

__all__ = [
    "User",
    "RepairRequest",
    "InventoryItem",
    "MaintenanceTask",
]
