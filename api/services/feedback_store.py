"""
In-memory store for route feedback.
"""

import logging
import threading
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class FeedbackStore:
    """Keeps feedback for the lifetime of the process only."""

    def __init__(self):
        self._items: List[Dict[str, Any]] = []
        self._lock = threading.Lock()

    def add(self, rating: float, flags: Optional[List[str]] = None,
            comment: Optional[str] = None, route_id: Optional[str] = None) -> Dict[str, Any]:
        """Record one feedback entry and return it."""
        feedback = {
            "id": str(time.time_ns() // 1_000_000),
            "rating": rating,
            "flags": list(flags) if flags else [],
            "comment": comment or "",
            "route_id": route_id,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        with self._lock:
            self._items.append(feedback)

        logger.info(f"Feedback received (rating={rating}, route={route_id})")
        return feedback

    def list(self) -> List[Dict[str, Any]]:
        with self._lock:
            return list(self._items)
