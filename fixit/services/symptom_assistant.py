"""
Symptom assistant

Sends the requester's rough symptom text to an OpenAI-compatible chat
completion endpoint and asks for a formal rewrite plus a suggested priority.
The caller keeps the user's own text whenever this raises.
"""

import json
from typing import Optional

import httpx

from fixit.constants.repair import PRIORITY_LEVELS
from fixit.core.config import settings
from fixit.core.logging_config import get_logger
from fixit.schemas.repair_request_schemas import SymptomAssistResult

logger = get_logger(__name__)

PROMPT_TEMPLATE = """คุณคือผู้เชี่ยวชาญด้านการซ่อมบำรุงครุภัณฑ์ในโรงเรียน
ผู้ใช้งานแจ้งอาการเสียมาว่า: "{symptoms}"
สำหรับอุปกรณ์ประเภท: "{asset_type}"

งานของคุณคือ:
1. เรียบเรียงคำอธิบายอาการเสียให้เป็นภาษาระบบซ่อมที่เป็นทางการและชัดเจนสำหรับช่าง
2. แนะนำระดับความเร่งด่วน (Normal, Urgent, หรือ Critical) พร้อมเหตุผลสั้นๆ

ตอบกลับในรูปแบบ JSON เท่านั้น:
{{
  "refinedSymptoms": "คำอธิบายที่เรียบเรียงใหม่",
  "suggestedPriority": "Priority Level",
  "reason": "เหตุผลสั้นๆ"
}}"""


class SymptomAssistantError(Exception):
    """The assistant is not configured, unreachable or answered nonsense"""


def parse_assistant_reply(content: str) -> SymptomAssistResult:
    """Parse the model's JSON answer; unknown priorities are dropped."""
    text = content.strip()
    if text.startswith("```"):
        text = text.strip("`")
        if text.startswith("json"):
            text = text[len("json"):]
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SymptomAssistantError(f"assistant reply is not JSON: {e}") from e
    if not isinstance(data, dict) or not data.get("refinedSymptoms"):
        raise SymptomAssistantError("assistant reply has no refinedSymptoms")

    priority: Optional[str] = data.get("suggestedPriority")
    return SymptomAssistResult(
        refined_symptoms=str(data["refinedSymptoms"]),
        suggested_priority=priority if priority in PRIORITY_LEVELS else None,
        reason=str(data.get("reason") or ""),
    )


async def refine_symptoms(symptoms: str, asset_type: str) -> SymptomAssistResult:
    if not settings.ASSIST_API_URL:
        raise SymptomAssistantError("symptom assistant is not configured")

    headers = {"Content-Type": "application/json"}
    if settings.ASSIST_API_KEY:
        headers["Authorization"] = f"Bearer {settings.ASSIST_API_KEY}"
    payload = {
        "model": settings.ASSIST_MODEL,
        "messages": [
            {"role": "user", "content": PROMPT_TEMPLATE.format(symptoms=symptoms, asset_type=asset_type)}
        ],
        "temperature": 0.2,
        "response_format": {"type": "json_object"},
        "stream": False,
    }

    try:
        timeout = httpx.Timeout(settings.ASSIST_TIMEOUT, connect=10.0)
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.post(settings.ASSIST_API_URL, headers=headers, json=payload)
            response.raise_for_status()
            result = response.json()
        content = result["choices"][0]["message"]["content"]
    except httpx.HTTPStatusError as e:
        logger.error("Assistant returned %s: %s", e.response.status_code, e.response.text)
        raise SymptomAssistantError(f"assistant returned HTTP {e.response.status_code}") from e
    except httpx.RequestError as e:
        logger.error("Assistant request failed: %s", e)
        raise SymptomAssistantError(f"assistant unreachable: {e}") from e
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise SymptomAssistantError(f"unexpected assistant response format: {e}") from e

    return parse_assistant_reply(content)
