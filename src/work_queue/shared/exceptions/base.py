"""
목적: 작업 큐 예외 계층을 제공한다.
설명: 에러 코드 기반 베이스 예외와 처리 실패/종료 이후 호출/구독자 중복 예외를 정의한다.
디자인 패턴: 도메인 예외 객체
참조: src/work_queue/shared/exceptions/models.py, src/work_queue/api/queue/routers/common.py
"""

from __future__ import annotations

from typing import Any, Optional

from work_queue.shared.exceptions.models import ExceptionDetail


class BaseAppException(Exception):
    """애플리케이션 공통 예외 클래스이다.

    HTTP 계층은 `detail.code`만 보고 상태 코드를 고른다.

    Args:
        message: 사용자 또는 시스템에 전달할 메시지.
        detail: 예외 상세 정보 모델.
        original: 원본 예외 객체.
    """

    def __init__(
        self,
        message: str,
        detail: ExceptionDetail,
        original: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self._message = message
        self._detail = detail
        self._original = original

    @property
    def message(self) -> str:
        return self._message

    @property
    def detail(self) -> ExceptionDetail:
        return self._detail

    @property
    def code(self) -> str:
        """에러 코드를 반환한다."""

        return self._detail.code

    @property
    def original(self) -> Optional[Exception]:
        return self._original

    def to_dict(self) -> dict[str, Any]:
        """HTTP 응답 본문용 사전으로 변환한다."""

        return {
            "message": self._message,
            "detail": self._detail.model_dump(),
            "original": repr(self._original) if self._original else None,
        }


class ProcessingError(BaseAppException):
    """작업 아이템 처리 실패를 나타내는 예외이다.

    실패 주입 훅이 반환하거나 워커 핸들러가 발생시키며,
    워커는 재시도 후 실패 정책(drop/requeue/dead_letter)에 넘긴다.

    Args:
        item_id: 실패한 작업 아이템 식별자.
        cause: 실패 원인 설명.
        original: 원본 예외 객체.
    """

    CODE = "QUEUE_PROCESSING_FAILED"

    def __init__(
        self,
        item_id: int,
        cause: str,
        original: Optional[Exception] = None,
    ) -> None:
        detail = ExceptionDetail(
            code=self.CODE,
            cause=cause,
            metadata={"item_id": item_id},
        )
        super().__init__("작업 아이템 처리에 실패했습니다.", detail, original)
        self._item_id = item_id

    @property
    def item_id(self) -> int:
        return self._item_id


class QueueShutDownError(BaseAppException):
    """종료된 큐에 적재/구독/제어를 요청했을 때 발생한다."""

    CODE = "QUEUE_SHUT_DOWN"

    def __init__(self, operation: str) -> None:
        detail = ExceptionDetail(
            code=self.CODE,
            cause=f"operation={operation}",
            hint="서버를 다시 기동한 뒤 요청하세요.",
        )
        super().__init__("작업 큐가 이미 종료되었습니다.", detail)


class SubscriberExistsError(BaseAppException):
    """이미 등록된 구독자 식별자로 구독을 요청했을 때 발생한다."""

    CODE = "QUEUE_SUBSCRIBER_EXISTS"

    def __init__(self, subscriber_id: str) -> None:
        detail = ExceptionDetail(
            code=self.CODE,
            cause=f"subscriber_id={subscriber_id}",
            metadata={"subscriber_id": subscriber_id},
        )
        super().__init__("이미 등록된 구독자입니다.", detail)
