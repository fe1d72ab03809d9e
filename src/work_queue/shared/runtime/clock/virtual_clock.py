"""
목적: 결정적 테스트용 가상 시계를 제공한다.
설명: sleep 호출을 마감 시각별로 보관했다가 advance 호출 시 순서대로 깨운다.
디자인 패턴: 테스트 더블(Fake)
참조: src/work_queue/shared/runtime/clock/clock.py
"""

from __future__ import annotations

import asyncio
import heapq
import itertools


class VirtualClock:
    """수동으로 시간을 전진시키는 가상 시계.

    `sleep()`은 가상 시각이 마감 시각에 도달할 때까지 호출자를 멈춰 두고,
    `advance()`는 마감 시각 순서대로 대기자를 깨우면서 이벤트 루프에 양보해
    깨어난 태스크가 다음 sleep을 등록할 기회를 준다.
    """

    _YIELDS_PER_WAKEUP = 5

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)
        self._sleepers: list[tuple[float, int, asyncio.Future]] = []
        self._sequence = itertools.count()

    def now(self) -> float:
        return self._now

    async def sleep(self, seconds: float) -> None:
        if seconds <= 0:
            await asyncio.sleep(0)
            return
        future = asyncio.get_running_loop().create_future()
        heapq.heappush(self._sleepers, (self._now + seconds, next(self._sequence), future))
        await future

    def pending_sleepers(self) -> int:
        """아직 깨어나지 않은 대기자 수를 반환한다."""

        return sum(1 for _, _, future in self._sleepers if not future.done())

    async def advance(self, seconds: float) -> None:
        """가상 시간을 전진시키며 마감된 대기자를 깨운다."""

        target = self._now + max(0.0, seconds)
        await self._settle()
        while self._sleepers and self._sleepers[0][0] <= target:
            deadline, _, future = heapq.heappop(self._sleepers)
            self._now = max(self._now, deadline)
            if not future.done():
                future.set_result(None)
            await self._settle()
        self._now = target
        await self._settle()

    async def _settle(self) -> None:
        for _ in range(self._YIELDS_PER_WAKEUP):
            await asyncio.sleep(0)
