"""
목적: 워커 설정 및 상태 모델을 정의한다.
설명: 소비 루프 실행 파라미터와 상태 값을 Pydantic으로 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/work_queue/shared/runtime/worker/worker.py
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class WorkerState(str, Enum):
    """워커 상태 열거형."""

    IDLE = "IDLE"
    DRAINING = "DRAINING"
    IDLE_POLLING = "IDLE_POLLING"
    PAUSED = "PAUSED"
    STOPPED = "STOPPED"


class WorkerConfig(BaseModel):
    """워커 설정 모델이다.

    Args:
        name: 워커 이름.
        poll_interval_ms: 큐가 비었을 때 재확인까지 대기하는 시간(ms).
        max_retries: 처리 실패 시 재시도 횟수.
    """

    name: str = Field(default="worker")
    poll_interval_ms: float = Field(default=50, ge=1)
    max_retries: int = Field(default=0, ge=0)
