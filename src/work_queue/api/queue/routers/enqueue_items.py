"""
목적: 작업 적재 라우터를 제공한다.
설명: GET 쿼리 또는 POST JSON 본문으로 받은 개수만큼 작업을 적재한다.
디자인 패턴: 라우터 패턴
참조: src/work_queue/api/queue/services/queue_service.py
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Request

from work_queue.api.const import QUEUE_API_ENQUEUE_PATH
from work_queue.api.queue.models import EnqueueRequest, EnqueueResponse
from work_queue.api.queue.routers.common import to_http_exception
from work_queue.api.queue.services import QueueAPIService, get_queue_service
from work_queue.api.queue.utils import parse_count, parse_count_body
from work_queue.shared.exceptions import BaseAppException

router = APIRouter()


@router.get(
    QUEUE_API_ENQUEUE_PATH,
    response_model=EnqueueResponse,
    summary="쿼리 문자열의 개수만큼 작업을 적재합니다.",
)
async def enqueue_items(
    count: Optional[str] = None,
    service: QueueAPIService = Depends(get_queue_service),
) -> EnqueueResponse:
    """`?count=N` 개수만큼 작업을 적재한다."""

    try:
        return service.enqueue(parse_count(count))
    except BaseAppException as error:
        raise to_http_exception(error) from error


@router.post(
    QUEUE_API_ENQUEUE_PATH,
    response_model=EnqueueResponse,
    summary="JSON 본문의 개수만큼 작업을 적재합니다.",
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": EnqueueRequest.model_json_schema()}}}},
)
async def enqueue_items_from_body(
    request: Request,
    service: QueueAPIService = Depends(get_queue_service),
) -> EnqueueResponse:
    """`{"count": N}` 본문 개수만큼 작업을 적재한다. 본문이 잘못되면 1개로 처리한다."""

    count = parse_count_body(await request.body())
    try:
        return service.enqueue(count)
    except BaseAppException as error:
        raise to_http_exception(error) from error
