"""
목적: 헬스체크 라우터 제공
설명: 서비스와 작업 큐 상태 확인용 엔드포인트를 정의한다
디자인 패턴: 라우터 패턴
참조: src/work_queue/api/main.py
"""
from fastapi import APIRouter, Depends

from work_queue.api.const import HEALTH_API_PATH
from work_queue.api.queue.models import HealthResponse
from work_queue.api.queue.services import QueueAPIService, get_queue_service

router = APIRouter()


@router.get(HEALTH_API_PATH, response_model=HealthResponse, summary="서버와 작업 큐의 상태를 조회합니다.")
async def health_check(service: QueueAPIService = Depends(get_queue_service)) -> HealthResponse:
    """구독자 수, 실행 여부, 카운터, 큐 길이를 반환합니다."""
    return service.health()
