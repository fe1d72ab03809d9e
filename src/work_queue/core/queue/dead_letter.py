"""
목적: dead-letter 저장소를 제공한다.
설명: 재시도 후에도 실패한 아이템을 최근 N건까지 메모리에 보관한다.
디자인 패턴: 저장소 패턴
참조: src/work_queue/core/queue/context.py
"""

from __future__ import annotations

from collections import deque
from datetime import datetime, timezone
from typing import Deque

from pydantic import BaseModel, Field

from work_queue.shared.runtime.queue import WorkItem


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DeadLetterEntry(BaseModel):
    """dead-letter 항목 모델이다.

    Args:
        item: 실패한 작업 아이템.
        error_code: 실패 에러 코드.
        cause: 실패 원인.
        failed_at: 실패 확정 시각.
    """

    item: WorkItem
    error_code: str
    cause: str | None = None
    failed_at: datetime = Field(default_factory=_utc_now)


class DeadLetterStore:
    """최근 실패 아이템 보관소."""

    def __init__(self, limit: int = 100) -> None:
        self._entries: Deque[DeadLetterEntry] = deque(maxlen=max(1, int(limit)))

    def add(self, entry: DeadLetterEntry) -> None:
        self._entries.append(entry)

    def list(self) -> list[DeadLetterEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
