"""
목적: 작업 큐 API 서비스 공개 API를 제공한다.
설명: 서비스 싱글턴 접근 함수와 종료 함수를 외부에 노출한다.
디자인 패턴: 싱글턴 패턴
참조: src/work_queue/api/queue/services/queue_service.py
"""

from __future__ import annotations

import threading
from typing import Optional

from work_queue.api.queue.services.queue_service import QueueAPIService

_queue_service: Optional[QueueAPIService] = None
_queue_service_lock = threading.RLock()


def get_queue_service() -> QueueAPIService:
    """작업 큐 API 서비스 싱글턴을 반환한다."""

    global _queue_service
    if _queue_service is not None:
        return _queue_service
    with _queue_service_lock:
        if _queue_service is None:
            _queue_service = QueueAPIService()
    return _queue_service


async def shutdown_queue_service() -> None:
    """작업 큐 API 서비스 싱글턴을 종료한다."""

    global _queue_service
    with _queue_service_lock:
        service = _queue_service
        _queue_service = None
    if service is None:
        return
    await service.close()


__all__ = [
    "QueueAPIService",
    "get_queue_service",
    "shutdown_queue_service",
]
