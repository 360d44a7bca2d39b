import os
import tempfile

# Point settings at a throwaway SQLite database before anything imports fixit
_tmp_dir = tempfile.mkdtemp(prefix="fixit-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_tmp_dir}/fixit_test.db"
os.environ["LOG_DIR"] = os.path.join(_tmp_dir, "logs")
os.environ["ASSIST_API_URL"] = ""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from fixit.db.session import Base, engine
from fixit.main import app
from fixit.schemas.repair_request_schemas import AssetInfo, RepairRequestOut, Requester


@pytest.fixture
def client():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    with TestClient(app) as c:
        yield c


def login(client, username, password):
    response = client.post("/api/v1/auth/login", json={"username": username, "password": password})
    body = response.json()
    assert body["code"] == 0, body
    return {"Authorization": f"Bearer {body['data']['access_token']}"}


@pytest.fixture
def staff_headers(client):
    return login(client, "admin", "1111")


@pytest.fixture
def user_headers(client):
    return login(client, "teacher01", "2222")


def make_ticket(ticket_id, status="Pending", asset_type="คอมพิวเตอร์ (Computer)", **kwargs):
    data = dict(
        id=ticket_id,
        created_at=datetime(2025, 1, 10, 9, 30, 0),
        priority="Normal",
        status=status,
        requester=Requester(name="ครูสมชาย ใจดี", position="ครูชำนาญการ", department="หมวดวิทย์",
                            phone="0812345678", username="teacher01"),
        asset=AssetInfo(type=asset_type, id_number="7440-001-0001", room="ห้อง 301"),
        symptoms="เปิดไม่ติด",
        preferred_date="2025-01-12 10:00",
    )
    data.update(kwargs)
    return RepairRequestOut(**data)
