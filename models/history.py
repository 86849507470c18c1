"""
Bounded, newest-first history of detections for a single UI session.
"""
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator, List

import config
from models.detection import DetectionResult, Verdict


@dataclass
class HistoryEntry:
    """One past detection, as shown in the history list."""
    input_preview: str
    verdict: Verdict
    score: float
    timestamp: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_result(cls, input_text: str, result: DetectionResult) -> "HistoryEntry":
        limit = config.HISTORY_PREVIEW_CHARS
        preview = input_text[:limit] + ("..." if len(input_text) > limit else "")
        return cls(input_preview=preview, verdict=result.verdict, score=result.score)


class DetectionHistory:
    """
    FIFO-evicting history capped at `limit` entries.
    The newest entry is first; adding past the cap drops the oldest.
    """

    def __init__(self, limit: int = config.HISTORY_LIMIT):
        if limit < 1:
            raise ValueError("history limit must be at least 1")
        self.limit = limit
        self._entries = deque(maxlen=limit)

    def add(self, input_text: str, result: DetectionResult) -> HistoryEntry:
        entry = HistoryEntry.from_result(input_text, result)
        self._entries.appendleft(entry)
        return entry

    @property
    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def clear(self):
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(list(self._entries))
