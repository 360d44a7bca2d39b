"""
Repair ticket service
Reads and writes the repair_requests collection and publishes every change
to the ticket feed.
"""

from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from fixit.constants.repair import REPAIR_STATUSES, STATUS_PENDING
from fixit.models.models import RepairRequest
from fixit.schemas.repair_request_schemas import (
    RepairRequestCreate,
    RepairRequestOut,
    RepairRequestRating,
    RepairRequestUpdate,
    Requester,
)
from fixit.schemas.user_schemas import UserOut
from fixit.services.request_feed import request_feed

TICKET_SUFFIX_SPACE = 10000

# Unset or null leaves the stored value alone for these
NON_NULLABLE_UPDATES = ("priority", "status", "symptoms", "asset")


def generate_ticket_id(db: Session, now: Optional[datetime] = None) -> str:
    """RE-<year>-<last 4 digits of the millisecond timestamp>, skipping taken ids"""
    now = now or datetime.now()
    millis = int(now.timestamp() * 1000)
    for offset in range(TICKET_SUFFIX_SPACE):
        ticket_id = f"RE-{now.year}-{str(millis + offset)[-4:]}"
        if db.get(RepairRequest, ticket_id) is None:
            return ticket_id
    raise RuntimeError(f"no free ticket id left for {now.year}")


def to_out(ticket: RepairRequest) -> RepairRequestOut:
    return RepairRequestOut.model_validate(ticket)


class RepairRequestService:
    @staticmethod
    def get_requests(db: Session) -> List[RepairRequestOut]:
        """All tickets, newest first"""
        tickets = db.query(RepairRequest).order_by(RepairRequest.created_at.desc()).all()
        return [to_out(t) for t in tickets]

    @staticmethod
    def get_requests_for_user(db: Session, username: str) -> List[RepairRequestOut]:
        tickets = (
            db.query(RepairRequest)
            .filter(RepairRequest.requester_username == username)
            .order_by(RepairRequest.created_at.desc())
            .all()
        )
        return [to_out(t) for t in tickets]

    @staticmethod
    def get_request(db: Session, ticket_id: str) -> Optional[RepairRequestOut]:
        ticket = db.get(RepairRequest, ticket_id)
        return to_out(ticket) if ticket else None

    @staticmethod
    def search(requests: List[RepairRequestOut], term: Optional[str]) -> List[RepairRequestOut]:
        """Case-insensitive match on ticket id or requester name"""
        if not term:
            return requests
        needle = term.lower()
        return [
            r for r in requests
            if needle in r.id.lower() or needle in r.requester.name.lower()
        ]

    @staticmethod
    def stats_by_status(requests: List[RepairRequestOut]) -> Dict[str, int]:
        counts = {status: 0 for status in REPAIR_STATUSES}
        for r in requests:
            counts[r.status] = counts.get(r.status, 0) + 1
        return counts

    @staticmethod
    def create_request(db: Session, user: UserOut, request_in: RepairRequestCreate) -> RepairRequestOut:
        now = datetime.now()
        record = RepairRequestOut(
            id=generate_ticket_id(db, now),
            created_at=now,
            priority=request_in.priority,
            status=STATUS_PENDING,
            requester=Requester(
                name=user.name,
                position=user.position or "",
                department=user.dept or "",
                phone=request_in.phone,
                username=user.username,
            ),
            asset=request_in.asset,
            symptoms=request_in.symptoms,
            preferred_date=f"{request_in.preferred_date} {request_in.preferred_time}".strip(),
        )
        return RepairRequestService.save_request(db, record)

    @staticmethod
    def save_request(db: Session, record: RepairRequestOut) -> RepairRequestOut:
        """Overwrite the whole ticket record"""
        data = record.model_dump(mode="json")
        ticket = RepairRequest(
            id=record.id,
            created_at=record.created_at,
            priority=record.priority,
            status=record.status,
            requester=data["requester"],
            requester_username=record.requester.username,
            asset=data["asset"],
            symptoms=record.symptoms,
            preferred_date=record.preferred_date,
            cost=record.cost,
            staff_action=data["staff_action"],
            rating=record.rating,
            feedback=record.feedback,
        )
        db.merge(ticket)
        db.commit()
        RepairRequestService.publish(db)
        return record

    @staticmethod
    def update_request(db: Session, ticket_id: str, updates: RepairRequestUpdate) -> Optional[RepairRequestOut]:
        """Find the stored ticket, merge the updates into it and save the result"""
        existing = RepairRequestService.get_request(db, ticket_id)
        if existing is None:
            return None

        changes = {
            field: value for field, value in updates.model_dump(exclude_unset=True).items()
            if value is not None or field not in NON_NULLABLE_UPDATES
        }
        staff_changes = changes.pop("staff_action", None)
        merged = existing.model_dump()
        merged.update(changes)
        if staff_changes is not None:
            merged["staff_action"] = {**(merged.get("staff_action") or {}), **staff_changes}

        return RepairRequestService.save_request(db, RepairRequestOut.model_validate(merged))

    @staticmethod
    def rate_request(db: Session, ticket: RepairRequestOut, rating_in: RepairRequestRating) -> RepairRequestOut:
        rated = ticket.model_copy(update={"rating": rating_in.rating, "feedback": rating_in.feedback})
        return RepairRequestService.save_request(db, rated)

    @staticmethod
    def delete_request(db: Session, ticket_id: str) -> bool:
        ticket = db.get(RepairRequest, ticket_id)
        if ticket is None:
            return False
        db.delete(ticket)
        db.commit()
        RepairRequestService.publish(db)
        return True

    @staticmethod
    def publish(db: Session) -> None:
        request_feed.publish(RepairRequestService.get_requests(db))
