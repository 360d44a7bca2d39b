import pytest

from fixit.api.v1 import repair_requests
from fixit.schemas.repair_request_schemas import SymptomAssistResult
from fixit.services.symptom_assistant import SymptomAssistantError, parse_assistant_reply


def test_parse_reply():
    result = parse_assistant_reply(
        '{"refinedSymptoms": "เครื่องไม่สามารถเปิดได้", "suggestedPriority": "Urgent", "reason": "ใช้สอนทุกวัน"}'
    )
    assert result.refined_symptoms == "เครื่องไม่สามารถเปิดได้"
    assert result.suggested_priority == "Urgent"
    assert result.reason == "ใช้สอนทุกวัน"


def test_parse_reply_in_code_fence():
    result = parse_assistant_reply('```json\n{"refinedSymptoms": "จอไม่แสดงผล", "suggestedPriority": "Normal"}\n```')
    assert result.refined_symptoms == "จอไม่แสดงผล"
    assert result.suggested_priority == "Normal"


def test_unknown_priority_is_ignored():
    result = parse_assistant_reply('{"refinedSymptoms": "เสียงไม่ออก", "suggestedPriority": "ASAP"}')
    assert result.suggested_priority is None


@pytest.mark.parametrize("reply", ["not json", "[]", '{"reason": "no symptoms"}'])
def test_unusable_reply(reply):
    with pytest.raises(SymptomAssistantError):
        parse_assistant_reply(reply)


def test_assist_without_endpoint(client, user_headers):
    body = client.post("/api/v1/repair-requests/assist", headers=user_headers,
                       json={"symptoms": "เปิดไม่ติดเลย", "asset_type": "คอมพิวเตอร์ (Computer)"}).json()
    assert body["code"] == 5002


def test_assist_needs_five_characters(client, user_headers):
    body = client.post("/api/v1/repair-requests/assist", headers=user_headers,
                       json={"symptoms": "เสีย", "asset_type": "คอมพิวเตอร์ (Computer)"}).json()
    assert body["code"] == 1001


def test_assist_success(client, user_headers, monkeypatch):
    async def fake_refine(symptoms, asset_type):
        return SymptomAssistResult(refined_symptoms=f"{asset_type}: {symptoms}", suggested_priority="Critical")

    monkeypatch.setattr(repair_requests, "refine_symptoms", fake_refine)
    body = client.post("/api/v1/repair-requests/assist", headers=user_headers,
                       json={"symptoms": "มีควันออกมา", "asset_type": "แอร์ (Air Condition)"}).json()
    assert body["code"] == 0
    assert body["data"]["refined_symptoms"] == "แอร์ (Air Condition): มีควันออกมา"
    assert body["data"]["suggested_priority"] == "Critical"
