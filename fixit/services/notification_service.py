"""
Ticket notifications

The notification center keeps the last ticket snapshot it has seen. Each new
snapshot pushed by the ticket feed is diffed against it: tickets that were not
there before are reported as new, tickets whose status differs are reported as
status changes. The list holds at most `limit` entries, newest first.
"""

import json
import threading
import uuid
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import ValidationError

from fixit.constants.repair import STATUS_LABELS
from fixit.core.logging_config import get_logger
from fixit.schemas.notification_schemas import AppNotification
from fixit.schemas.repair_request_schemas import RepairRequestOut

logger = get_logger(__name__)

DEFAULT_LIMIT = 50


def snapshot_statuses(snapshot: List[RepairRequestOut]) -> Dict[str, str]:
    return {ticket.id: ticket.status for ticket in snapshot}


def detect_changes(
    previous: Dict[str, str],
    current: List[RepairRequestOut],
    now: Optional[datetime] = None,
) -> List[AppNotification]:
    """
    Compare the previous {ticket id -> status} map with the new snapshot.
    Returns one notification per new ticket and per changed status, in
    snapshot order. Removed tickets produce nothing.
    """
    now = now or datetime.now()
    notifications: List[AppNotification] = []
    for ticket in current:
        old_status = previous.get(ticket.id)
        if old_status is None:
            message = f"แจ้งซ่อมใหม่: {ticket.id} ({ticket.asset.type})"
        elif old_status != ticket.status:
            label = STATUS_LABELS.get(ticket.status, ticket.status)
            message = f"{ticket.id} เปลี่ยนสถานะเป็น {label}"
        else:
            continue
        notifications.append(AppNotification(
            id=f"N-{uuid.uuid4().hex[:12]}",
            message=message,
            ticket_id=ticket.id,
            timestamp=now,
        ))
    return notifications


def load_notifications(path: Path) -> List[AppNotification]:
    """Read the cached list; a missing or unreadable cache gives an empty list."""
    if not path.exists():
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        logger.warning("Ignoring unreadable notification cache: %s", path)
        return []
    if not isinstance(data, list):
        return []
    notifications: List[AppNotification] = []
    for item in data:
        try:
            notifications.append(AppNotification.model_validate(item))
        except ValidationError:
            continue
    return notifications


def save_notifications(notifications: List[AppNotification], path: Path) -> None:
    data = [n.model_dump(mode="json") for n in notifications]
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
    except OSError as e:
        logger.warning("Failed to write notification cache %s: %s", path, e)


class NotificationCenter:
    """
    - State:
        _previous: {ticket id -> status} of the last snapshot, None until primed
        _notifications: newest first, at most _limit entries
        _lock: guards both; feed callbacks arrive on request threads
    """

    def __init__(self, limit: int = DEFAULT_LIMIT, cache_file: Optional[Path] = None) -> None:
        self._lock = threading.Lock()
        self._limit = limit
        self._cache_file = cache_file
        self._previous: Optional[Dict[str, str]] = None
        self._notifications: List[AppNotification] = []
        if cache_file is not None:
            self._notifications = load_notifications(cache_file)[:limit]

    def prime(self, snapshot: List[RepairRequestOut]) -> None:
        """Remember the snapshot without emitting anything for it."""
        with self._lock:
            self._previous = snapshot_statuses(snapshot)

    def handle_snapshot(self, snapshot: List[RepairRequestOut]) -> List[AppNotification]:
        """Feed callback. The first snapshot only primes the previous state."""
        with self._lock:
            if self._previous is None:
                self._previous = snapshot_statuses(snapshot)
                return []
            fresh = detect_changes(self._previous, snapshot)
            self._previous = snapshot_statuses(snapshot)
            if not fresh:
                return []
            self._notifications = (fresh + self._notifications)[:self._limit]
            current = list(self._notifications)
        if self._cache_file is not None:
            save_notifications(current, self._cache_file)
        for n in fresh:
            logger.info(n.message, extra={"operationObject": n.ticket_id, "operationType": "notification.emit"})
        return fresh

    def list(self) -> List[AppNotification]:
        with self._lock:
            return list(self._notifications)

    def unread_count(self) -> int:
        with self._lock:
            return sum(1 for n in self._notifications if not n.read)

    def mark_all_read(self) -> None:
        with self._lock:
            self._notifications = [n.model_copy(update={"read": True}) for n in self._notifications]
            current = list(self._notifications)
        if self._cache_file is not None:
            save_notifications(current, self._cache_file)

    def clear(self) -> None:
        with self._lock:
            self._notifications = []
        if self._cache_file is not None:
            save_notifications([], self._cache_file)
