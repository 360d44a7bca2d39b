from pydantic import Field
from datetime import datetime

from fixit.schemas.common import BaseSchema


class AppNotification(BaseSchema):
    """Derived from ticket snapshot diffs; never stored in the database"""
    id: str
    message: str
    ticket_id: str
    timestamp: datetime = Field(default_factory=datetime.now)
    read: bool = False
