"""
목적: dead-letter 조회 라우터를 제공한다.
설명: 재시도 후에도 실패해 보관된 아이템 목록을 반환한다.
디자인 패턴: 라우터 패턴
참조: src/work_queue/core/queue/dead_letter.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from work_queue.api.const import QUEUE_API_DEAD_LETTERS_PATH
from work_queue.api.queue.models import DeadLetterListResponse
from work_queue.api.queue.services import QueueAPIService, get_queue_service

router = APIRouter()


@router.get(
    QUEUE_API_DEAD_LETTERS_PATH,
    response_model=DeadLetterListResponse,
    summary="dead-letter 아이템 목록을 조회합니다.",
)
async def list_dead_letters(
    service: QueueAPIService = Depends(get_queue_service),
) -> DeadLetterListResponse:
    return service.dead_letters()
