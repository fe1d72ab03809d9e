"""
목적: 작업 큐 API 라우터 집계를 제공한다.
설명: 엔드포인트별 분리 라우터를 하나의 큐 라우터로 묶는다.
디자인 패턴: 컴포지트 패턴
참조: src/work_queue/api/queue/routers/*.py
"""

from __future__ import annotations

from fastapi import APIRouter

from work_queue.api.const import QUEUE_API_PREFIX, QUEUE_API_TAG
from work_queue.api.queue.routers.control_consumer import router as control_consumer_router
from work_queue.api.queue.routers.dead_letters import router as dead_letters_router
from work_queue.api.queue.routers.enqueue_items import router as enqueue_items_router
from work_queue.api.queue.routers.stream_events import router as stream_events_router

router = APIRouter(prefix=QUEUE_API_PREFIX, tags=[QUEUE_API_TAG])
router.include_router(enqueue_items_router)
router.include_router(control_consumer_router)
router.include_router(stream_events_router)
router.include_router(dead_letters_router)
