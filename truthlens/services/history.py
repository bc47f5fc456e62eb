import datetime as dt
import threading
import time
from collections import deque

from truthlens.config import HISTORY_CAPACITY
from truthlens.models import AnalysisRequest, AnalysisResult, HistoryEntry


class AnalysisHistory:
    """Most-recent-first buffer of past analyses. The scoring engine never reads it."""

    def __init__(self, capacity: int = HISTORY_CAPACITY) -> None:
        self.capacity = max(1, capacity)
        self._lock = threading.Lock()
        self._entries: deque[HistoryEntry] = deque(maxlen=self.capacity)
        self._last_id = 0

    def _next_id(self) -> int:
        # Millisecond ids, bumped when two records land in the same millisecond.
        candidate = int(time.time() * 1000)
        self._last_id = max(candidate, self._last_id + 1)
        return self._last_id

    def record(self, request: AnalysisRequest, result: AnalysisResult) -> HistoryEntry:
        with self._lock:
            entry = HistoryEntry(
                id=self._next_id(),
                query=request,
                timestamp=dt.datetime.now(dt.timezone.utc).isoformat(),
                result=result,
            )
            self._entries.appendleft(entry)
        return entry

    def recent(self) -> list[HistoryEntry]:
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
