from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from fixit.constants.operation_types import OperationType
from fixit.constants.repair import ROLE_STAFF
from fixit.core.security import require_role
from fixit.db.session import get_db
from fixit.schemas.common import ApiListResponse, ApiResponse, ResponseCode
from fixit.schemas.maintenance_schemas import MaintenanceTaskIn
from fixit.schemas.user_schemas import UserOut
from fixit.services.maintenance_service import MaintenanceService
from fixit.utils.log_helper import log_operation

router = APIRouter()


@router.get("", response_model=ApiListResponse, summary="List preventive maintenance tasks")
def read_tasks(
    status: Optional[str] = Query(None, description="Upcoming/Done/Overdue"),
    db: Session = Depends(get_db),
    current_user: UserOut = Depends(require_role(ROLE_STAFF)),
):
    tasks = MaintenanceService.get_tasks(db, status)
    return ApiListResponse(code=ResponseCode.SUCCESS, message="OK", data=tasks, total=len(tasks))


@router.post("", response_model=ApiResponse, summary="Create or overwrite a maintenance task")
def save_task(
    task_in: MaintenanceTaskIn,
    db: Session = Depends(get_db),
    current_user: UserOut = Depends(require_role(ROLE_STAFF)),
):
    task = MaintenanceService.save_task(db, task_in)
    log_operation(OperationType.MAINTENANCE_SAVE, task.id, current_user.username)
    return ApiResponse(code=ResponseCode.SUCCESS, message="Task saved", data=task)
