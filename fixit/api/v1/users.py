from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fixit.constants.operation_types import OperationType, OperationResult
from fixit.constants.repair import BULK_IMPORT_INVALID_MESSAGE, ROLE_STAFF
from fixit.core.security import require_role
from fixit.db.session import get_db
from fixit.schemas.common import ApiListResponse, ApiResponse, ResponseCode
from fixit.schemas.user_schemas import BulkImportRequest, UserCreate, UserOut
from fixit.services.user_service import UserService, parse_bulk_users
from fixit.utils.log_helper import log_operation

router = APIRouter()


@router.get("", response_model=ApiListResponse, summary="List users")
def read_users(
    db: Session = Depends(get_db),
    current_user: UserOut = Depends(require_role(ROLE_STAFF)),
):
    users = [UserOut.model_validate(u) for u in UserService.get_users(db)]
    return ApiListResponse(code=ResponseCode.SUCCESS, message="OK", data=users, total=len(users))


@router.post("", response_model=ApiResponse, summary="Create or overwrite a user")
def save_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    current_user: UserOut = Depends(require_role(ROLE_STAFF)),
):
    db_user = UserService.save_user(db, user_in)
    log_operation(OperationType.USER_SAVE, user_in.username, current_user.username)
    return ApiResponse(code=ResponseCode.SUCCESS, message="User saved", data=UserOut.model_validate(db_user))


@router.post("/bulk", response_model=ApiResponse, summary="Bulk import users")
def bulk_import_users(
    bulk_in: BulkImportRequest,
    db: Session = Depends(get_db),
    current_user: UserOut = Depends(require_role(ROLE_STAFF)),
):
    """JSON array of users, or CSV lines user,pass,name,role,position,dept"""
    try:
        users = parse_bulk_users(bulk_in.content)
    except ValueError as e:
        log_operation(OperationType.USER_BULK_IMPORT, "users", current_user.username,
                      OperationResult.FAILED, remark=str(e))
        return ApiResponse(code=ResponseCode.PARAM_ERROR, message=BULK_IMPORT_INVALID_MESSAGE)

    count = UserService.bulk_add_users(db, users)
    log_operation(OperationType.USER_BULK_IMPORT, "users", current_user.username,
                  remark=f"imported {count} users")
    return ApiResponse(code=ResponseCode.SUCCESS, message=f"Imported {count} users", data={"count": count})


@router.delete("/{username}", response_model=ApiResponse, summary="Delete a user")
def delete_user(
    username: str,
    db: Session = Depends(get_db),
    current_user: UserOut = Depends(require_role(ROLE_STAFF)),
):
    if not UserService.delete_user(db, username):
        return ApiResponse(code=ResponseCode.NOT_FOUND, message=f"User {username} not found")

    log_operation(OperationType.USER_DELETE, username, current_user.username)
    return ApiResponse(code=ResponseCode.SUCCESS, message="User deleted")
