"""
목적: 작업 큐 라우터 공통 유틸을 제공한다.
설명: 도메인 예외를 HTTP 예외로 변환하는 헬퍼를 제공한다.
디자인 패턴: 유틸리티 모듈
참조: src/work_queue/api/queue/routers/router.py, src/work_queue/shared/exceptions/base.py
"""

from __future__ import annotations

from fastapi import HTTPException, status

from work_queue.shared.exceptions import BaseAppException, QueueShutDownError, SubscriberExistsError

_STATUS_BY_CODE = {
    QueueShutDownError.CODE: status.HTTP_503_SERVICE_UNAVAILABLE,
    SubscriberExistsError.CODE: status.HTTP_409_CONFLICT,
}


def to_http_exception(error: BaseAppException) -> HTTPException:
    """도메인 예외를 HTTP 예외로 변환한다. 매핑되지 않은 코드는 500이다."""

    status_code = _STATUS_BY_CODE.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(status_code=status_code, detail=error.to_dict())
