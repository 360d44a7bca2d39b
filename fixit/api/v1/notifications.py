"""
Ticket change notifications
Clients poll this list; it is filled by the notification center as the
ticket feed pushes new snapshots.
"""

from fastapi import APIRouter, Depends, Request

from fixit.core.security import get_current_user
from fixit.schemas.common import ApiResponse, ResponseCode
from fixit.schemas.user_schemas import UserOut
from fixit.services.notification_service import NotificationCenter

router = APIRouter()


def get_notification_center(request: Request) -> NotificationCenter:
    return request.app.state.notification_center


@router.get("", response_model=ApiResponse, summary="Notifications, newest first")
def read_notifications(
    center: NotificationCenter = Depends(get_notification_center),
    current_user: UserOut = Depends(get_current_user),
):
    items = center.list()
    return ApiResponse(
        code=ResponseCode.SUCCESS,
        message="OK",
        data={"items": items, "total": len(items), "unread": center.unread_count()},
    )


@router.post("/read", response_model=ApiResponse, summary="Mark all notifications read")
def mark_read(
    center: NotificationCenter = Depends(get_notification_center),
    current_user: UserOut = Depends(get_current_user),
):
    center.mark_all_read()
    return ApiResponse(code=ResponseCode.SUCCESS, message="OK")


@router.delete("", response_model=ApiResponse, summary="Clear notifications")
def clear_notifications(
    center: NotificationCenter = Depends(get_notification_center),
    current_user: UserOut = Depends(get_current_user),
):
    center.clear()
    return ApiResponse(code=ResponseCode.SUCCESS, message="OK")
