"""
목적: 소비 루프 제어 라우터를 제공한다.
설명: pause/resume/set 액션과 폴링 주기 변경을 처리한다.
디자인 패턴: 라우터 패턴
참조: src/work_queue/core/queue/control.py
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from work_queue.api.const import QUEUE_API_CONTROL_PATH
from work_queue.api.queue.models import ControlResponse
from work_queue.api.queue.routers.common import to_http_exception
from work_queue.api.queue.services import QueueAPIService, get_queue_service
from work_queue.api.queue.utils import parse_consume_ms
from work_queue.shared.exceptions import BaseAppException

router = APIRouter()


@router.get(
    QUEUE_API_CONTROL_PATH,
    response_model=ControlResponse,
    summary="소비 루프를 일시정지/재개하거나 폴링 주기를 변경합니다.",
)
async def control_consumer(
    action: Optional[str] = None,
    consume_ms: Optional[str] = None,
    consume_ms_alias: Optional[str] = Query(default=None, alias="consumeMs"),
    service: QueueAPIService = Depends(get_queue_service),
) -> ControlResponse:
    """알 수 없는 액션과 잘못된 폴링 주기는 무시하고 현재 상태를 반환한다."""

    raw_ms = consume_ms if consume_ms is not None else consume_ms_alias
    try:
        return service.control(action=action, consume_ms=parse_consume_ms(raw_ms))
    except BaseAppException as error:
        raise to_http_exception(error) from error
