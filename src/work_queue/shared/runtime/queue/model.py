"""
목적: 런타임 큐 모델을 정의한다.
설명: 유계 큐 설정과 작업 아이템 구조를 Pydantic으로 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/work_queue/shared/runtime/queue/bounded_queue.py
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class QueueConfig(BaseModel):
    """유계 큐 설정 모델이다.

    Args:
        capacity: 큐 최대 적재 개수. 생성 이후 변경되지 않는다.
    """

    capacity: int = Field(default=20, ge=1)


def _utc_now() -> datetime:
    """UTC 기준의 timezone-aware 시간을 반환한다."""

    return datetime.now(timezone.utc)


class WorkItem(BaseModel):
    """작업 아이템 모델이다.

    Args:
        item_id: 적재 시점에 부여되는 단조 증가 식별자.
        enqueued_at: 적재 시각(주입된 시계 기준 초). 지연 시간 계산에 사용한다.
        created_at: 표시용 UTC 생성 시각.
        attempts: 지금까지 재적재된 횟수.
    """

    item_id: int = Field(..., ge=1)
    enqueued_at: float
    created_at: datetime = Field(default_factory=_utc_now)
    attempts: int = Field(default=0, ge=0)
