"""
Repair ticket schemas
"""

from pydantic import Field, field_validator
from typing import Optional, Literal, Dict
from datetime import datetime

from fixit.schemas.common import BaseSchema

PriorityLevel = Literal["Normal", "Urgent", "Critical"]
RepairStatus = Literal["Pending", "In Progress", "Vendor Contacted", "Completed"]


class Requester(BaseSchema):
    name: str = Field(..., description="requester full name")
    position: str = Field("", description="job title")
    department: str = Field("", description="department")
    phone: str = Field("", description="contact phone")
    username: str = Field(..., description="login name of the requester")


class AssetInfo(BaseSchema):
    type: str = Field(..., min_length=1, description="asset type")
    other_type: Optional[str] = Field(None, description="free text when type is 'other'")
    id_number: str = Field("", description="asset number")
    room: str = Field("", description="room / location")


class StaffAction(BaseSchema):
    vendor_name: Optional[str] = None
    contact_date: Optional[str] = None
    contact_time: Optional[str] = None
    service_date: Optional[str] = None
    service_time: Optional[str] = None
    notes: Optional[str] = None
    pickup_person: Optional[str] = None
    pickup_date: Optional[str] = None


class RepairRequestCreate(BaseSchema):
    """Submission from the repair form; the requester comes from the session"""
    priority: PriorityLevel = "Normal"
    phone: str = Field("", description="contact phone")
    asset: AssetInfo
    symptoms: str = Field(..., min_length=1, description="symptom description")
    preferred_date: str = Field("", description="preferred service date")
    preferred_time: str = Field("", description="preferred service time")


class RepairRequestUpdate(BaseSchema):
    """Partial staff edit, merged into the stored ticket"""
    priority: Optional[PriorityLevel] = None
    status: Optional[RepairStatus] = None
    cost: Optional[float] = Field(None, ge=0)
    symptoms: Optional[str] = None
    asset: Optional[AssetInfo] = None
    staff_action: Optional[StaffAction] = None


class RepairRequestRating(BaseSchema):
    rating: int = Field(..., ge=1, le=5)
    feedback: Optional[str] = None


class RepairRequestOut(BaseSchema):
    """Full ticket record; also the body of a full-record save"""
    id: str
    created_at: datetime
    priority: PriorityLevel
    status: RepairStatus
    requester: Requester
    asset: AssetInfo
    symptoms: str
    preferred_date: Optional[str] = ""
    cost: Optional[float] = None
    staff_action: Optional[StaffAction] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    feedback: Optional[str] = None

    @field_validator("preferred_date", mode="before")
    def empty_preferred_date(cls, v):
        return v or ""


class StatusStats(BaseSchema):
    """Ticket count per status"""
    counts: Dict[str, int]
    total: int


class SymptomAssistRequest(BaseSchema):
    symptoms: str = Field(..., min_length=5, description="at least 5 characters")
    asset_type: str = Field(..., min_length=1)


class SymptomAssistResult(BaseSchema):
    refined_symptoms: str
    suggested_priority: Optional[PriorityLevel] = None
    reason: str = ""
