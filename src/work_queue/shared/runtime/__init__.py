"""
목적: 런타임 모듈 공개 API를 제공한다.
설명: 시계/유계 큐/구독자 버퍼/워커 구성 요소를 노출한다.
디자인 패턴: 퍼사드
참조: src/work_queue/shared/runtime/clock, src/work_queue/shared/runtime/queue, src/work_queue/shared/runtime/buffer, src/work_queue/shared/runtime/worker
"""

from work_queue.shared.runtime.buffer import (
    ChannelClosed,
    ChannelConfig,
    EventFanout,
    SendResult,
    SubscriberChannel,
)
from work_queue.shared.runtime.clock import Clock, SystemClock, VirtualClock
from work_queue.shared.runtime.queue import BoundedQueue, QueueConfig, WorkItem
from work_queue.shared.runtime.worker import Worker, WorkerConfig, WorkerState

__all__ = [
    "Clock",
    "SystemClock",
    "VirtualClock",
    "QueueConfig",
    "WorkItem",
    "BoundedQueue",
    "ChannelClosed",
    "ChannelConfig",
    "SendResult",
    "SubscriberChannel",
    "EventFanout",
    "WorkerConfig",
    "WorkerState",
    "Worker",
]
