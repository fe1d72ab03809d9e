"""
목적: 작업 큐 API 모델 공개 API를 제공한다.
설명: 요청/응답 DTO를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/work_queue/api/queue/models/queue.py
"""

from work_queue.api.queue.models.queue import (
    ControlResponse,
    DeadLetterListResponse,
    DeadLetterResponse,
    EnqueueRequest,
    EnqueueResponse,
    HealthResponse,
)

__all__ = [
    "EnqueueRequest",
    "EnqueueResponse",
    "ControlResponse",
    "HealthResponse",
    "DeadLetterResponse",
    "DeadLetterListResponse",
]
