"""
목적: 작업 생산자 로직을 제공한다.
설명: 요청된 개수만큼 적재를 시도하고 첫 거절에서 배치를 멈추며 백프레셔 이벤트를 방출한다.
디자인 패턴: 서비스 레이어
참조: src/work_queue/shared/runtime/queue/bounded_queue.py, src/work_queue/core/queue/events.py
"""

from __future__ import annotations

from typing import Callable, Optional

from pydantic import BaseModel

from work_queue.core.queue.counters import QueueCounters
from work_queue.core.queue.events import QueueEvent, backpressure_event, queued_event
from work_queue.shared.logging import Logger, create_default_logger
from work_queue.shared.runtime.clock import Clock
from work_queue.shared.runtime.queue import BoundedQueue, WorkItem

EventEmitter = Callable[[QueueEvent], int]


class EnqueueResult(BaseModel):
    """배치 적재 결과 모델이다.

    Args:
        accepted: 적재된 아이템 수.
        rejected: 거절된 시도 수(배치가 멈추므로 0 또는 1).
        queue_size: 배치 처리 후 큐 크기.
        produced: 누적 produced 카운터.
    """

    accepted: int
    rejected: int
    queue_size: int
    produced: int


class Producer:
    """유계 큐에 아이템을 적재하는 생산자."""

    def __init__(
        self,
        queue: BoundedQueue,
        counters: QueueCounters,
        emit: EventEmitter,
        clock: Clock,
        logger: Optional[Logger] = None,
    ) -> None:
        self._queue = queue
        self._counters = counters
        self._emit = emit
        self._clock = clock
        self._logger = logger or create_default_logger("Producer")

    def enqueue_batch(self, count: int) -> EnqueueResult:
        """최대 count개를 적재한다. count는 최소 1로 보정한다."""

        requested = max(1, int(count))
        accepted = 0
        rejected = 0
        for _ in range(requested):
            item = WorkItem(item_id=self._counters.next_item_id(), enqueued_at=self._clock.now())
            if not self._queue.enqueue(item):
                rejected += 1
                self._emit(backpressure_event(queue_size=self._queue.size()))
                self._logger.warning(
                    f"queue.producer.backpressure: requested={requested}, accepted={accepted}, queue_size={self._queue.size()}"
                )
                break
            self._counters.produced = item.item_id
            accepted += 1
            self._emit(queued_event(item_id=item.item_id, queue_size=self._queue.size()))
            self._logger.debug(f"queue.producer.queued: id={item.item_id}")
        return EnqueueResult(
            accepted=accepted,
            rejected=rejected,
            queue_size=self._queue.size(),
            produced=self._counters.produced,
        )
