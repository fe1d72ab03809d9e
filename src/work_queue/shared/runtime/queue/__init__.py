"""
목적: 런타임 큐 모듈 공개 API를 제공한다.
설명: 유계 큐 구현과 모델을 노출한다.
디자인 패턴: 퍼사드
참조: src/work_queue/shared/runtime/queue/model.py, src/work_queue/shared/runtime/queue/bounded_queue.py
"""

from work_queue.shared.runtime.queue.bounded_queue import BoundedQueue
from work_queue.shared.runtime.queue.model import QueueConfig, WorkItem

__all__ = ["QueueConfig", "WorkItem", "BoundedQueue"]
