"""
목적: 프로세스 단위 큐 카운터 모델을 정의한다.
설명: produced/consumed/failed 단조 증가 카운터를 보관한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/work_queue/core/queue/producer.py, src/work_queue/core/queue/context.py
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class QueueCounters(BaseModel):
    """큐 카운터 모델이다.

    Args:
        produced: 적재에 성공한 아이템 수. 다음 아이템 식별자의 기준이 된다.
        consumed: 처리를 마친 아이템 수.
        failed: 재시도 후에도 실패해 큐를 떠난 아이템 수.
    """

    produced: int = Field(default=0, ge=0)
    consumed: int = Field(default=0, ge=0)
    failed: int = Field(default=0, ge=0)

    def next_item_id(self) -> int:
        """다음에 적재될 아이템 식별자를 반환한다."""

        return self.produced + 1
