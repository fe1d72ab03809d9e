"""
목적: 작업 큐 도메인 모듈 공개 API를 제공한다.
설명: 이벤트 모델, 카운터, 처리 정책, 생산자, 제어 표면, 실행 컨텍스트를 노출한다.
디자인 패턴: 퍼사드
참조: src/work_queue/core/queue/context.py
"""

from work_queue.core.queue.context import HealthSnapshot, QueueContext
from work_queue.core.queue.control import ControlAction, ControlState, ControlSurface
from work_queue.core.queue.counters import QueueCounters
from work_queue.core.queue.dead_letter import DeadLetterEntry, DeadLetterStore
from work_queue.core.queue.events import QueueEvent, QueueEventType
from work_queue.core.queue.processing import (
    DurationPolicy,
    FailureInjector,
    fail_every,
    fixed_duration,
    jittered_duration,
    never_fail,
)
from work_queue.core.queue.producer import EnqueueResult, Producer

__all__ = [
    "QueueContext",
    "HealthSnapshot",
    "ControlAction",
    "ControlState",
    "ControlSurface",
    "QueueCounters",
    "DeadLetterEntry",
    "DeadLetterStore",
    "QueueEvent",
    "QueueEventType",
    "DurationPolicy",
    "FailureInjector",
    "fail_every",
    "fixed_duration",
    "jittered_duration",
    "never_fail",
    "EnqueueResult",
    "Producer",
]
