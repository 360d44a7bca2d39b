"""
Printable repair-request form
Builds the template context for one ticket; empty staff fields print as
dotted placeholders to be filled in by hand.
"""

from typing import Any, Dict, List, Tuple

from fixit.constants.repair import ASSET_TYPES, OTHER_ASSET_TYPE
from fixit.schemas.repair_request_schemas import RepairRequestOut, StaffAction

LONG_BLANK = "." * 55
SHORT_BLANK = "." * 23

SCHOOL_NAME = "โรงเรียน Appfreeman"


def is_asset_type(ticket: RepairRequestOut, asset_type: str) -> bool:
    """Unknown asset types tick the "other" box."""
    if asset_type == OTHER_ASSET_TYPE:
        return ticket.asset.type not in ASSET_TYPES or ticket.asset.type == OTHER_ASSET_TYPE
    return ticket.asset.type == asset_type


def split_preferred_date(preferred_date: str) -> Tuple[str, str]:
    parts = (preferred_date or "").split(" ", 1)
    date_part = parts[0]
    time_part = parts[1] if len(parts) > 1 else ""
    return date_part, time_part


def build_print_context(ticket: RepairRequestOut) -> Dict[str, Any]:
    staff = ticket.staff_action or StaffAction()
    checkboxes: List[Dict[str, Any]] = [
        {"label": t, "checked": is_asset_type(ticket, t)} for t in ASSET_TYPES[:5]
    ]
    other_checked = is_asset_type(ticket, OTHER_ASSET_TYPE)
    preferred_day, preferred_time = split_preferred_date(ticket.preferred_date)

    return {
        "school_name": SCHOOL_NAME,
        "ticket": ticket,
        "asset_checkboxes": checkboxes,
        "other_checked": other_checked,
        "other_type": (ticket.asset.other_type or "") if other_checked else "",
        "preferred_day": preferred_day,
        "preferred_time": preferred_time,
        "staff": {
            "vendor_name": staff.vendor_name or LONG_BLANK,
            "contact_date": staff.contact_date or SHORT_BLANK,
            "contact_time": staff.contact_time or SHORT_BLANK,
            "receiver": LONG_BLANK,
            "service_date": staff.service_date or SHORT_BLANK,
            "service_time": staff.service_time or SHORT_BLANK,
            "notes": staff.notes or LONG_BLANK,
            "pickup_person": staff.pickup_person or LONG_BLANK,
            "pickup_date": staff.pickup_date or SHORT_BLANK,
        },
    }
