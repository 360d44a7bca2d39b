"""
CSV export of repair tickets

UTF-8 with BOM, every field double-quoted (embedded quotes doubled), fixed
column order, one header row.
"""

import csv
import io
from datetime import date, datetime
from typing import List, Optional

import pandas as pd

from fixit.constants.repair import PRIORITY_LABELS, STATUS_LABELS
from fixit.schemas.repair_request_schemas import RepairRequestOut

CSV_COLUMNS = [
    "Ticket ID",
    "วันที่แจ้ง",
    "ความเร่งด่วน",
    "ผู้แจ้ง",
    "หน่วยงาน",
    "เบอร์โทร",
    "ประเภทครุภัณฑ์",
    "หมายเลขครุภัณฑ์",
    "ห้อง/สถานที่",
    "อาการ",
    "สถานะ",
    "ค่าใช้จ่าย",
]

CSV_MEDIA_TYPE = "text/csv; charset=utf-8"

BUDDHIST_ERA_OFFSET = 543


def format_cost(cost) -> str:
    if not cost:
        return "0"
    return str(int(cost)) if float(cost).is_integer() else str(cost)


def format_thai_datetime(value: datetime) -> str:
    """d/m/yyyy HH:MM:SS with the Buddhist-era year, as th-TH locales print it"""
    return f"{value.day}/{value.month}/{value.year + BUDDHIST_ERA_OFFSET} {value:%H:%M:%S}"


def ticket_row(r: RepairRequestOut) -> List[str]:
    return [
        r.id,
        format_thai_datetime(r.created_at),
        PRIORITY_LABELS.get(r.priority, r.priority),
        r.requester.name,
        r.requester.department,
        r.requester.phone,
        r.asset.type,
        r.asset.id_number,
        r.asset.room,
        r.symptoms,
        STATUS_LABELS.get(r.status, r.status),
        format_cost(r.cost),
    ]


def build_requests_csv(requests: List[RepairRequestOut]) -> bytes:
    """Render tickets as CSV bytes, BOM included."""
    df = pd.DataFrame([ticket_row(r) for r in requests], columns=CSV_COLUMNS, dtype=str)
    output = io.StringIO()
    df.to_csv(output, index=False, quoting=csv.QUOTE_ALL, lineterminator="\n")
    return ("\ufeff" + output.getvalue()).encode("utf-8")


def export_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"fixit_export_{today.isoformat()}.csv"
