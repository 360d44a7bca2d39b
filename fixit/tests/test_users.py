import pytest

from conftest import login
from fixit.services.user_service import parse_bulk_users


def test_initial_users_are_seeded(client, staff_headers):
    body = client.get("/api/v1/users", headers=staff_headers).json()
    assert body["code"] == 0
    assert {u["username"] for u in body["data"]} == {"admin", "teacher01"}
    assert all("password" not in u for u in body["data"])


def test_create_user(client, staff_headers):
    body = client.post("/api/v1/users", headers=staff_headers, json={
        "username": "testuser",
        "password": "testpassword",
        "name": "Test User",
        "position": "ครูผู้ช่วย",
        "dept": "หมวดคณิต",
    }).json()
    assert body["code"] == 0
    assert body["data"]["username"] == "testuser"
    assert body["data"]["role"] == "user"

    assert login(client, "testuser", "testpassword")


def test_save_overwrites_existing_user(client, staff_headers):
    client.post("/api/v1/users", headers=staff_headers, json={
        "user": "teacher01", "pass": "9999", "name": "ครูสมชาย (แก้ไข)", "role": "user",
    })
    body = client.post("/api/v1/auth/login", json={"username": "teacher01", "password": "2222"}).json()
    assert body["code"] == 1005
    assert login(client, "teacher01", "9999")


def test_users_endpoints_are_staff_only(client, user_headers):
    assert client.get("/api/v1/users", headers=user_headers).json()["code"] == 1004
    assert client.delete("/api/v1/users/admin", headers=user_headers).json()["code"] == 1004


def test_bulk_import_json(client, staff_headers):
    content = '[{"user": "t1", "pass": "p1", "name": "ครูหนึ่ง"}, {"user": "t2", "pass": "p2", "name": "ครูสอง", "role": "staff"}]'
    body = client.post("/api/v1/users/bulk", json={"content": content}, headers=staff_headers).json()
    assert body["code"] == 0
    assert body["data"]["count"] == 2

    users = {u["username"]: u for u in client.get("/api/v1/users", headers=staff_headers).json()["data"]}
    assert users["t2"]["role"] == "staff"


def test_bulk_import_csv_lines(client, staff_headers):
    content = "t3,p3,ครูสาม,,ครูอัตราจ้าง,หมวดภาษาไทย\nt4,p4,ครูสี่,staff"
    body = client.post("/api/v1/users/bulk", json={"content": content}, headers=staff_headers).json()
    assert body["data"]["count"] == 2

    users = {u["username"]: u for u in client.get("/api/v1/users", headers=staff_headers).json()["data"]}
    assert users["t3"]["role"] == "user"
    assert users["t3"]["dept"] == "หมวดภาษาไทย"
    assert users["t4"]["role"] == "staff"


def test_bulk_import_malformed(client, staff_headers):
    body = client.post("/api/v1/users/bulk", json={"content": '{"user": "t5"}'}, headers=staff_headers).json()
    assert body["code"] == 1001
    assert body["message"] == "รูปแบบข้อมูลไม่ถูกต้อง กรุณาตรวจสอบข้อมูลอีกครั้ง"


def test_parse_bulk_skips_entries_without_username():
    users = parse_bulk_users('[{"name": "ไม่มีชื่อผู้ใช้"}, {"user": "t6", "pass": "p6", "name": "ครูหก"}]')
    assert [u.username for u in users] == ["t6"]


def test_parse_bulk_rejects_incomplete_csv_line():
    with pytest.raises(ValueError):
        parse_bulk_users("t7,p7")


def test_delete_user(client, staff_headers):
    assert client.delete("/api/v1/users/teacher01", headers=staff_headers).json()["code"] == 0
    assert client.delete("/api/v1/users/teacher01", headers=staff_headers).json()["code"] == 1002
    body = client.post("/api/v1/auth/login", json={"username": "teacher01", "password": "2222"}).json()
    assert body["code"] == 1005
