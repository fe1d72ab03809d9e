"""
목적: 소비 루프가 사용하는 시계 추상화를 제공한다.
설명: 현재 시각 조회와 비동기 대기를 하나의 Protocol로 묶고 실제 시계 구현을 제공한다.
디자인 패턴: 포트-어댑터(Port/Protocol)
참조: src/work_queue/shared/runtime/clock/virtual_clock.py, src/work_queue/shared/runtime/worker/worker.py
"""

from __future__ import annotations

import asyncio
import time
from typing import Protocol


class Clock(Protocol):
    """시각 조회와 대기를 제공하는 시계 포트."""

    def now(self) -> float:
        """단조 증가하는 현재 시각(초)을 반환한다."""

    async def sleep(self, seconds: float) -> None:
        """지정한 시간(초) 동안 협력적으로 대기한다."""


class SystemClock:
    """`time.monotonic`과 `asyncio.sleep` 기반 실제 시계."""

    def now(self) -> float:
        return time.monotonic()

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(max(0.0, seconds))
