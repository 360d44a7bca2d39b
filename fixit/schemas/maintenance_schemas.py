from pydantic import Field
from typing import Literal, Optional

from fixit.schemas.common import BaseSchema


class MaintenanceTaskIn(BaseSchema):
    id: Optional[str] = Field(None, description="PM-<timestamp> is generated when empty")
    title: str = Field(..., min_length=1)
    asset_name: str = ""
    location: str = ""
    next_date: str = Field("", description="YYYY-MM-DD")
    period: Literal["Monthly", "Quarterly", "Yearly"] = "Monthly"
    status: Literal["Upcoming", "Done", "Overdue"] = "Upcoming"


class MaintenanceTaskOut(MaintenanceTaskIn):
    id: str
