from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fixit.constants.operation_types import OperationType
from fixit.constants.repair import ROLE_STAFF
from fixit.core.security import require_role
from fixit.db.session import get_db
from fixit.schemas.common import ApiListResponse, ApiResponse, ResponseCode
from fixit.schemas.inventory_schemas import InventoryItemIn
from fixit.schemas.user_schemas import UserOut
from fixit.services.inventory_service import InventoryService
from fixit.utils.log_helper import log_operation

router = APIRouter()


@router.get("", response_model=ApiListResponse, summary="List inventory items")
def read_items(
    db: Session = Depends(get_db),
    current_user: UserOut = Depends(require_role(ROLE_STAFF)),
):
    items = InventoryService.get_items(db)
    return ApiListResponse(code=ResponseCode.SUCCESS, message="OK", data=items, total=len(items))


@router.get("/low-stock", response_model=ApiListResponse, summary="Items at or below minimum stock")
def read_low_stock(
    db: Session = Depends(get_db),
    current_user: UserOut = Depends(require_role(ROLE_STAFF)),
):
    items = InventoryService.get_low_stock(db)
    return ApiListResponse(code=ResponseCode.SUCCESS, message="OK", data=items, total=len(items))


@router.post("", response_model=ApiResponse, summary="Create or overwrite an inventory item")
def save_item(
    item_in: InventoryItemIn,
    db: Session = Depends(get_db),
    current_user: UserOut = Depends(require_role(ROLE_STAFF)),
):
    item = InventoryService.save_item(db, item_in)
    log_operation(OperationType.INVENTORY_SAVE, item.id, current_user.username)
    return ApiResponse(code=ResponseCode.SUCCESS, message="Item saved", data=item)


@router.delete("/{item_id}", response_model=ApiResponse, summary="Delete an inventory item")
def delete_item(
    item_id: str,
    db: Session = Depends(get_db),
    current_user: UserOut = Depends(require_role(ROLE_STAFF)),
):
    if not InventoryService.delete_item(db, item_id):
        return ApiResponse(code=ResponseCode.NOT_FOUND, message=f"Item {item_id} not found")

    log_operation(OperationType.INVENTORY_DELETE, item_id, current_user.username)
    return ApiResponse(code=ResponseCode.SUCCESS, message="Item deleted")
