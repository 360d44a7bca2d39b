import csv
import io
from datetime import date

from conftest import make_ticket
from fixit.schemas.repair_request_schemas import AssetInfo
from fixit.services.export_service import CSV_COLUMNS, build_requests_csv, export_filename


def read_csv(payload: bytes):
    assert payload.startswith(b"\xef\xbb\xbf")
    return list(csv.reader(io.StringIO(payload.decode("utf-8-sig"))))


def test_header_and_one_row_per_ticket():
    tickets = [make_ticket("RE-2025-0001"), make_ticket("RE-2025-0002", status="Completed", cost=1500)]
    rows = read_csv(build_requests_csv(tickets))

    assert rows[0] == CSV_COLUMNS
    assert len(rows) == 3
    assert rows[1] == [
        "RE-2025-0001",
        "10/1/2568 09:30:00",
        "ปกติ",
        "ครูสมชาย ใจดี",
        "หมวดวิทย์",
        "0812345678",
        "คอมพิวเตอร์ (Computer)",
        "7440-001-0001",
        "ห้อง 301",
        "เปิดไม่ติด",
        "รอรับเรื่อง",
        "0",
    ]
    assert rows[2][10] == "ซ่อมเสร็จแล้ว"
    assert rows[2][11] == "1500"


def test_every_field_is_quoted():
    text = build_requests_csv([make_ticket("RE-2025-0001")]).decode("utf-8-sig")
    header, row = text.rstrip("\n").split("\n")
    assert header.startswith('"Ticket ID","วันที่แจ้ง"')
    assert row.startswith('"RE-2025-0001",')
    assert row.endswith('"0"')


def test_commas_and_quotes_survive_escaping():
    symptoms = 'จอขึ้นว่า "No Signal", เปิดใหม่แล้วก็ไม่หาย'
    ticket = make_ticket(
        "RE-2025-0003",
        symptoms=symptoms,
        asset=AssetInfo(type="อื่น ๆ", other_type="ไมค์", id_number="A,B", room='ห้อง "ดนตรี"'),
    )
    payload = build_requests_csv([ticket])

    assert '"จอขึ้นว่า ""No Signal"", เปิดใหม่แล้วก็ไม่หาย"' in payload.decode("utf-8")
    row = read_csv(payload)[1]
    assert row[9] == symptoms
    assert row[7] == "A,B"
    assert row[8] == 'ห้อง "ดนตรี"'


def test_export_filename():
    assert export_filename(date(2025, 3, 7)) == "fixit_export_2025-03-07.csv"
    assert export_filename() == f"fixit_export_{date.today():%Y-%m-%d}.csv"


def test_created_at_uses_buddhist_era_year():
    from datetime import datetime

    from fixit.services.export_service import format_thai_datetime

    assert format_thai_datetime(datetime(2024, 12, 31, 23, 5, 9)) == "31/12/2567 23:05:09"
