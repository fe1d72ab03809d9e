"""
목적: 큐 이벤트 스트림 라우터를 제공한다.
설명: 구독자 채널을 소비해 SSE를 중계한다.
디자인 패턴: 라우터 패턴
참조: src/work_queue/api/queue/services/queue_service.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from work_queue.api.const import QUEUE_API_EVENTS_PATH
from work_queue.api.queue.routers.common import to_http_exception
from work_queue.api.queue.services import QueueAPIService, get_queue_service
from work_queue.shared.exceptions import BaseAppException

router = APIRouter()


@router.get(
    QUEUE_API_EVENTS_PATH,
    summary="큐 상태 변화 이벤트를 구독합니다.",
)
async def stream_events(
    service: QueueAPIService = Depends(get_queue_service),
) -> StreamingResponse:
    """init 프레임 이후 큐 이벤트를 SSE로 반환한다."""

    try:
        iterator = service.stream_events()
    except BaseAppException as error:
        raise to_http_exception(error) from error
    return StreamingResponse(
        iterator,
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
