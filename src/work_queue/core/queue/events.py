"""
목적: 큐 상태 변화 이벤트 모델을 정의한다.
설명: 관찰자에게 전달되는 `{type, ...payload}` 구조와 타입별 생성 함수를 제공한다.
디자인 패턴: 데이터 전송 객체(DTO), 팩토리 함수
참조: src/work_queue/core/queue/context.py, src/work_queue/api/queue/services/queue_service.py
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class QueueEventType(str, Enum):
    """큐 이벤트 타입."""

    INIT = "init"
    QUEUED = "queued"
    PROCESSED = "processed"
    BACKPRESSURE = "backpressure"
    FAILED = "failed"
    STOPPED = "stopped"


class QueueEvent(BaseModel):
    """관찰자에게 전달되는 큐 이벤트 모델이다.

    Args:
        type: 이벤트 타입.
        payload: 타입별 본문.
    """

    type: QueueEventType
    payload: dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """`{type, ...payload}` 형태의 사전으로 변환한다."""

        return {"type": self.type.value, **self.payload}


def init_event(produced: int, consumed: int, failed: int, queue_size: int) -> QueueEvent:
    return QueueEvent(
        type=QueueEventType.INIT,
        payload={
            "produced": produced,
            "consumed": consumed,
            "failed": failed,
            "queue_size": queue_size,
        },
    )


def queued_event(item_id: int, queue_size: int) -> QueueEvent:
    return QueueEvent(type=QueueEventType.QUEUED, payload={"id": item_id, "queue_size": queue_size})


def backpressure_event(queue_size: int) -> QueueEvent:
    return QueueEvent(type=QueueEventType.BACKPRESSURE, payload={"queue_size": queue_size})


def processed_event(item_id: int, latency_ms: float, queue_size: int) -> QueueEvent:
    return QueueEvent(
        type=QueueEventType.PROCESSED,
        payload={"id": item_id, "latency_ms": round(latency_ms, 3), "queue_size": queue_size},
    )


def failed_event(item_id: int, error: str, action: str, queue_size: int) -> QueueEvent:
    return QueueEvent(
        type=QueueEventType.FAILED,
        payload={"id": item_id, "error": error, "action": action, "queue_size": queue_size},
    )


def stopped_event(produced: int, consumed: int, failed: int, queue_size: int) -> QueueEvent:
    return QueueEvent(
        type=QueueEventType.STOPPED,
        payload={
            "produced": produced,
            "consumed": consumed,
            "failed": failed,
            "queue_size": queue_size,
        },
    )
