"""
목적: API 상수 공개 API를 제공한다.
설명: 작업 큐/헬스 라우팅 상수를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/work_queue/api/const/queue.py
"""

from work_queue.api.const.queue import (
    HEALTH_API_PATH,
    QUEUE_API_CONTROL_PATH,
    QUEUE_API_DEAD_LETTERS_PATH,
    QUEUE_API_ENQUEUE_PATH,
    QUEUE_API_EVENTS_PATH,
    QUEUE_API_PREFIX,
    QUEUE_API_TAG,
)

__all__ = [
    "HEALTH_API_PATH",
    "QUEUE_API_PREFIX",
    "QUEUE_API_TAG",
    "QUEUE_API_ENQUEUE_PATH",
    "QUEUE_API_CONTROL_PATH",
    "QUEUE_API_EVENTS_PATH",
    "QUEUE_API_DEAD_LETTERS_PATH",
]
