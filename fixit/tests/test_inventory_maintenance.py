import re


def test_save_item_generates_id_and_defaults(client, staff_headers):
    body = client.post("/api/v1/inventory", json={"name": "เมาส์ USB", "stock": 10}, headers=staff_headers).json()
    assert body["code"] == 0
    item = body["data"]
    assert re.fullmatch(r"INV-\d+", item["id"])
    assert item["category"] == "อะไหล่คอมพิวเตอร์"
    assert item["unit"] == "ชิ้น"
    assert item["min_stock"] == 5
    assert item["low_stock"] is False
    assert item["last_updated"]


def test_save_item_overwrites_by_id(client, staff_headers):
    client.post("/api/v1/inventory", json={"id": "INV-1", "name": "สาย LAN", "stock": 20}, headers=staff_headers)
    client.post("/api/v1/inventory", json={"id": "INV-1", "name": "สาย LAN", "stock": 3}, headers=staff_headers)

    body = client.get("/api/v1/inventory", headers=staff_headers).json()
    assert body["total"] == 1
    assert body["data"][0]["stock"] == 3
    assert body["data"][0]["low_stock"] is True


def test_low_stock_listing(client, staff_headers):
    for item in [
        {"id": "INV-1", "name": "หมึกพิมพ์", "stock": 1, "min_stock": 2},
        {"id": "INV-2", "name": "ถ่าน AA", "stock": 5, "min_stock": 5},
        {"id": "INV-3", "name": "เมาส์", "stock": 9, "min_stock": 5},
    ]:
        client.post("/api/v1/inventory", json=item, headers=staff_headers)

    body = client.get("/api/v1/inventory/low-stock", headers=staff_headers).json()
    assert [i["id"] for i in body["data"]] == ["INV-1", "INV-2"]


def test_delete_item(client, staff_headers):
    client.post("/api/v1/inventory", json={"id": "INV-1", "name": "สาย HDMI"}, headers=staff_headers)
    assert client.delete("/api/v1/inventory/INV-1", headers=staff_headers).json()["code"] == 0
    assert client.delete("/api/v1/inventory/INV-1", headers=staff_headers).json()["code"] == 1002


def test_inventory_rejects_negative_stock(client, staff_headers):
    body = client.post("/api/v1/inventory", json={"name": "เมาส์", "stock": -1}, headers=staff_headers).json()
    assert body["code"] == 1001


def test_inventory_is_staff_only(client, user_headers):
    assert client.get("/api/v1/inventory", headers=user_headers).json()["code"] == 1004


def test_save_maintenance_task(client, staff_headers):
    body = client.post("/api/v1/maintenance", headers=staff_headers, json={
        "title": "ล้างแอร์ห้องประชุม",
        "asset_name": "แอร์ (Air Condition)",
        "location": "ห้องประชุม 1",
        "next_date": "2025-02-01",
        "period": "Quarterly",
    }).json()
    assert body["code"] == 0
    task = body["data"]
    assert re.fullmatch(r"PM-\d+", task["id"])
    assert task["status"] == "Upcoming"

    task["status"] = "Done"
    client.post("/api/v1/maintenance", json=task, headers=staff_headers)

    listed = client.get("/api/v1/maintenance", headers=staff_headers).json()
    assert listed["total"] == 1
    assert listed["data"][0]["status"] == "Done"

    upcoming = client.get("/api/v1/maintenance", params={"status": "Upcoming"}, headers=staff_headers).json()
    assert upcoming["total"] == 0


def test_maintenance_rejects_unknown_period(client, staff_headers):
    body = client.post("/api/v1/maintenance", json={"title": "x", "period": "Weekly"}, headers=staff_headers).json()
    assert body["code"] == 1001
