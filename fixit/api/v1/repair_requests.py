"""
FixIt - repair ticket API
Submission, staff handling, rating, CSV export and the printable form.
"""

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from fixit.constants.operation_types import OperationType, OperationResult
from fixit.constants.repair import NO_EXPORT_DATA_MESSAGE, ROLE_STAFF, STATUS_COMPLETED
from fixit.core.security import get_current_user, require_role
from fixit.db.session import get_db
from fixit.schemas.common import ApiListResponse, ApiResponse, ResponseCode
from fixit.schemas.repair_request_schemas import (
    RepairRequestCreate,
    RepairRequestOut,
    RepairRequestRating,
    RepairRequestUpdate,
    StatusStats,
    SymptomAssistRequest,
)
from fixit.schemas.user_schemas import UserOut
from fixit.services.export_service import CSV_MEDIA_TYPE, build_requests_csv, export_filename
from fixit.services.print_service import build_print_context
from fixit.services.repair_request_service import RepairRequestService
from fixit.services.symptom_assistant import SymptomAssistantError, refine_symptoms
from fixit.utils.log_helper import log_operation

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[2] / "templates"))


def visible_requests(db: Session, user: UserOut):
    """Staff see every ticket, requesters only their own"""
    if user.role == ROLE_STAFF:
        return RepairRequestService.get_requests(db)
    return RepairRequestService.get_requests_for_user(db, user.username)


def can_view(user: UserOut, ticket: RepairRequestOut) -> bool:
    return user.role == ROLE_STAFF or ticket.requester.username == user.username


# =====================================================
# Queries
# =====================================================

@router.get("", response_model=ApiListResponse, summary="List repair tickets")
def list_requests(
    q: Optional[str] = Query(None, description="search ticket id or requester name"),
    status: Optional[str] = Query(None, description="filter by status"),
    db: Session = Depends(get_db),
    current_user: UserOut = Depends(get_current_user),
):
    """Newest first"""
    tickets = RepairRequestService.search(visible_requests(db, current_user), q)
    if status:
        tickets = [t for t in tickets if t.status == status]
    return ApiListResponse(
        code=ResponseCode.SUCCESS,
        message="OK",
        data=tickets,
        total=len(tickets),
    )


@router.get("/stats", response_model=ApiResponse, summary="Ticket count per status")
def request_stats(
    db: Session = Depends(get_db),
    current_user: UserOut = Depends(get_current_user),
):
    tickets = visible_requests(db, current_user)
    return ApiResponse(
        code=ResponseCode.SUCCESS,
        message="OK",
        data=StatusStats(counts=RepairRequestService.stats_by_status(tickets), total=len(tickets)),
    )


@router.get("/export.csv", summary="Export all tickets as CSV")
def export_requests(
    db: Session = Depends(get_db),
    current_user: UserOut = Depends(require_role(ROLE_STAFF)),
):
    tickets = RepairRequestService.get_requests(db)
    if not tickets:
        return ApiResponse(code=ResponseCode.NOT_FOUND, message=NO_EXPORT_DATA_MESSAGE)

    log_operation(OperationType.TICKET_EXPORT, f"{len(tickets)} tickets", current_user.username)
    return Response(
        content=build_requests_csv(tickets),
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )


# =====================================================
# Requester actions
# =====================================================

@router.post("/assist", response_model=ApiResponse, summary="Rewrite symptoms and suggest a priority")
async def assist_symptoms(
    assist_in: SymptomAssistRequest,
    current_user: UserOut = Depends(get_current_user),
):
    try:
        result = await refine_symptoms(assist_in.symptoms, assist_in.asset_type)
    except SymptomAssistantError as e:
        log_operation(OperationType.TICKET_ASSIST, assist_in.asset_type, current_user.username,
                      OperationResult.FAILED, remark=str(e))
        return ApiResponse(code=ResponseCode.EXTERNAL_API_ERROR, message=str(e))

    log_operation(OperationType.TICKET_ASSIST, assist_in.asset_type, current_user.username)
    return ApiResponse(code=ResponseCode.SUCCESS, message="OK", data=result)


@router.post("", response_model=ApiResponse, summary="Submit a repair ticket")
def create_request(
    request_in: RepairRequestCreate,
    db: Session = Depends(get_db),
    current_user: UserOut = Depends(get_current_user),
):
    ticket = RepairRequestService.create_request(db, current_user, request_in)
    log_operation(OperationType.TICKET_CREATE, ticket.id, current_user.username)
    return ApiResponse(code=ResponseCode.SUCCESS, message="Ticket created", data=ticket)


@router.get("/{ticket_id}", response_model=ApiResponse, summary="Ticket detail")
def get_request(
    ticket_id: str,
    db: Session = Depends(get_db),
    current_user: UserOut = Depends(get_current_user),
):
    ticket = RepairRequestService.get_request(db, ticket_id)
    if ticket is None or not can_view(current_user, ticket):
        return ApiResponse(code=ResponseCode.NOT_FOUND, message=f"Ticket {ticket_id} not found")
    return ApiResponse(code=ResponseCode.SUCCESS, message="OK", data=ticket)


@router.post("/{ticket_id}/rate", response_model=ApiResponse, summary="Rate a completed ticket")
def rate_request(
    ticket_id: str,
    rating_in: RepairRequestRating,
    db: Session = Depends(get_db),
    current_user: UserOut = Depends(get_current_user),
):
    ticket = RepairRequestService.get_request(db, ticket_id)
    if ticket is None:
        return ApiResponse(code=ResponseCode.NOT_FOUND, message=f"Ticket {ticket_id} not found")
    if ticket.requester.username != current_user.username:
        return ApiResponse(code=ResponseCode.PERMISSION_DENIED, message="Only the requester can rate a ticket")
    if ticket.status != STATUS_COMPLETED:
        return ApiResponse(code=ResponseCode.PARAM_ERROR, message="Only completed tickets can be rated")

    rated = RepairRequestService.rate_request(db, ticket, rating_in)
    log_operation(OperationType.TICKET_RATE, ticket_id, current_user.username)
    return ApiResponse(code=ResponseCode.SUCCESS, message="Rating saved", data=rated)


@router.get("/{ticket_id}/print", response_class=HTMLResponse, summary="Printable repair form")
def print_request(
    ticket_id: str,
    request: Request,
    db: Session = Depends(get_db),
    current_user: UserOut = Depends(get_current_user),
):
    ticket = RepairRequestService.get_request(db, ticket_id)
    if ticket is None or not can_view(current_user, ticket):
        raise HTTPException(status_code=404, detail=f"Ticket {ticket_id} not found")

    log_operation(OperationType.TICKET_PRINT, ticket_id, current_user.username)
    return templates.TemplateResponse(request, "print_form.html", build_print_context(ticket))


# =====================================================
# Staff actions
# =====================================================

@router.put("/{ticket_id}", response_model=ApiResponse, summary="Overwrite a ticket record")
def save_request(
    ticket_id: str,
    record: RepairRequestOut,
    db: Session = Depends(get_db),
    current_user: UserOut = Depends(require_role(ROLE_STAFF)),
):
    if record.id != ticket_id:
        return ApiResponse(code=ResponseCode.PARAM_ERROR, message="Ticket id in path and body differ")
    saved = RepairRequestService.save_request(db, record)
    log_operation(OperationType.TICKET_UPDATE, ticket_id, current_user.username)
    return ApiResponse(code=ResponseCode.SUCCESS, message="Ticket saved", data=saved)


@router.patch("/{ticket_id}", response_model=ApiResponse, summary="Update status, cost or staff action")
def update_request(
    ticket_id: str,
    updates: RepairRequestUpdate,
    db: Session = Depends(get_db),
    current_user: UserOut = Depends(require_role(ROLE_STAFF)),
):
    updated = RepairRequestService.update_request(db, ticket_id, updates)
    if updated is None:
        log_operation(OperationType.TICKET_UPDATE, ticket_id, current_user.username, OperationResult.FAILED)
        return ApiResponse(code=ResponseCode.NOT_FOUND, message=f"Ticket {ticket_id} not found")

    log_operation(OperationType.TICKET_UPDATE, ticket_id, current_user.username)
    return ApiResponse(code=ResponseCode.SUCCESS, message="Ticket updated", data=updated)


@router.delete("/{ticket_id}", response_model=ApiResponse, summary="Delete a ticket")
def delete_request(
    ticket_id: str,
    db: Session = Depends(get_db),
    current_user: UserOut = Depends(require_role(ROLE_STAFF)),
):
    if not RepairRequestService.delete_request(db, ticket_id):
        return ApiResponse(code=ResponseCode.NOT_FOUND, message=f"Ticket {ticket_id} not found")

    log_operation(OperationType.TICKET_DELETE, ticket_id, current_user.username)
    return ApiResponse(code=ResponseCode.SUCCESS, message="Ticket deleted")
