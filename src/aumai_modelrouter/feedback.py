"""Thread-safe store for user feedback on routing decisions."""

from __future__ import annotations

import threading

from aumai_modelrouter.models import FeedbackRecord

__all__ = ["FeedbackStore", "feedback_key"]

_TASK_KEY_LENGTH = 50


def feedback_key(role: str, task: str) -> str:
    """Group feedback by role and the first 50 characters of the task."""
    return f"{role}:{task[:_TASK_KEY_LENGTH]}"


class FeedbackStore:
    """Accumulates :class:`~aumai_modelrouter.models.FeedbackRecord` entries.

    The store is safe to share between threads.  Nothing reads it back into
    scoring yet; it only records.
    """

    def __init__(self) -> None:
        self._records: dict[str, list[FeedbackRecord]] = {}
        self._lock = threading.Lock()

    def record(self, role: str, task: str, selected_model: str, satisfaction: float) -> None:
        entry = FeedbackRecord(selected_model=selected_model, satisfaction=satisfaction)
        key = feedback_key(role, task)
        with self._lock:
            self._records.setdefault(key, []).append(entry)

    def history(self, role: str, task: str) -> list[FeedbackRecord]:
        """Return a copy of the records stored for *role* and *task*."""
        with self._lock:
            return list(self._records.get(feedback_key(role, task), []))

    def __len__(self) -> int:
        with self._lock:
            return sum(len(records) for records in self._records.values())
