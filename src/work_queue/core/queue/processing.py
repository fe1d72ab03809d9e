"""
목적: 모의 작업 처리 정책을 제공한다.
설명: 아이템당 처리 시간 생성기와 실패 주입 훅의 타입 및 기본 구현을 정의한다.
디자인 패턴: 전략 패턴
참조: src/work_queue/core/queue/context.py
"""

from __future__ import annotations

import random
from typing import Callable, Optional

from work_queue.shared.exceptions import ProcessingError
from work_queue.shared.runtime.queue import WorkItem

DurationPolicy = Callable[[], float]
FailureInjector = Callable[[WorkItem], Optional[ProcessingError]]


def jittered_duration(
    base_ms: float = 50.0,
    jitter_ms: float = 150.0,
    rng: Optional[random.Random] = None,
) -> DurationPolicy:
    """고정 지연에 [0, jitter_ms) 구간의 무작위 지연을 더하는 정책을 만든다.

    Returns:
        호출할 때마다 처리 시간(초)을 반환하는 함수.
    """

    source = rng or random.Random()
    base = max(0.0, float(base_ms))
    jitter = max(0.0, float(jitter_ms))

    def _next() -> float:
        return (base + source.random() * jitter) / 1000.0

    return _next


def fixed_duration(duration_ms: float = 0.0) -> DurationPolicy:
    """항상 같은 처리 시간(초)을 반환하는 정책을 만든다."""

    seconds = max(0.0, float(duration_ms)) / 1000.0
    return lambda: seconds


def never_fail(item: WorkItem) -> Optional[ProcessingError]:
    """모든 아이템을 성공으로 처리한다."""

    del item
    return None


def fail_every(nth: int, cause: str = "injected failure") -> FailureInjector:
    """n번째 처리 시도마다 실패를 반환하는 주입 훅을 만든다."""

    if nth < 1:
        raise ValueError("nth는 1 이상이어야 합니다.")
    attempts = 0

    def _inject(item: WorkItem) -> Optional[ProcessingError]:
        nonlocal attempts
        attempts += 1
        if attempts % nth == 0:
            return ProcessingError(item.item_id, cause)
        return None

    return _inject
