"""
목적: 작업 큐 API 모델을 정의한다.
설명: 적재/제어/헬스/dead-letter 응답 모델을 Pydantic으로 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/work_queue/api/queue/services/queue_service.py
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class EnqueueRequest(BaseModel):
    """적재 요청 모델. 본문 해석은 관대하게 처리하므로 문서화 용도로만 쓴다."""

    count: int = Field(default=1, description="적재할 아이템 개수. 1 미만이면 1로 보정된다.")


class EnqueueResponse(BaseModel):
    """적재 응답 모델."""

    accepted: int
    rejected: int
    queue_size: int
    produced: int


class ControlResponse(BaseModel):
    """제어 응답 모델."""

    running: bool
    consume_poll_ms: float


class HealthResponse(BaseModel):
    """헬스 응답 모델."""

    ok: bool = True
    subscribers: int
    running: bool
    state: str
    produced: int
    consumed: int
    failed: int
    queue_size: int
    capacity: int
    consume_poll_ms: float
    dead_letters: int


class DeadLetterResponse(BaseModel):
    """dead-letter 항목 응답 모델."""

    id: int
    attempts: int
    error_code: str
    cause: Optional[str] = None
    failed_at: datetime


class DeadLetterListResponse(BaseModel):
    """dead-letter 목록 응답 모델."""

    items: list[DeadLetterResponse] = Field(default_factory=list)
