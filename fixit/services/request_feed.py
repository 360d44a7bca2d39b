"""
Ticket feed

Pushes the full ticket snapshot to every subscriber after each ticket write,
the way a realtime database value listener does.
"""

import threading
from typing import Callable, Dict, List

from fixit.core.logging_config import get_logger
from fixit.schemas.repair_request_schemas import RepairRequestOut

logger = get_logger(__name__)

Snapshot = List[RepairRequestOut]
Subscriber = Callable[[Snapshot], None]


class RequestFeed:
    """
    - State:
        _subscribers: {token -> callback}
        _lock: guards the subscriber table; callbacks run outside the lock
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subscribers: Dict[int, Subscriber] = {}
        self._next_token = 0

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback; returns the matching unsubscribe function."""
        with self._lock:
            token = self._next_token
            self._next_token += 1
            self._subscribers[token] = callback

        def unsubscribe() -> None:
            with self._lock:
                self._subscribers.pop(token, None)

        return unsubscribe

    def publish(self, snapshot: Snapshot) -> None:
        with self._lock:
            callbacks = list(self._subscribers.values())
        for callback in callbacks:
            try:
                callback(snapshot)
            except Exception:
                logger.exception("Ticket feed subscriber failed")

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)


request_feed = RequestFeed()
