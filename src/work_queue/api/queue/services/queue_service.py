"""
목적: 작업 큐 API 서비스 레이어를 제공한다.
설명: 큐 실행 컨텍스트를 HTTP DTO와 SSE 프레임으로 연결한다.
디자인 패턴: 서비스 레이어
참조: src/work_queue/core/queue/context.py, src/work_queue/api/queue/models
"""

from __future__ import annotations

import json
from typing import Any, AsyncIterator, Optional

from work_queue.api.queue.models import (
    ControlResponse,
    DeadLetterListResponse,
    DeadLetterResponse,
    EnqueueResponse,
    HealthResponse,
)
from work_queue.core.queue import QueueContext, QueueEvent, QueueEventType
from work_queue.shared.exceptions import BaseAppException, QueueShutDownError, SubscriberExistsError
from work_queue.shared.logging import Logger, create_default_logger
from work_queue.shared.runtime.buffer import ChannelClosed

_HEARTBEAT_FRAME = ": heartbeat\n\n"


class QueueAPIService:
    """작업 큐 API 전용 서비스."""

    def __init__(
        self,
        context: Optional[QueueContext] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._logger = logger or create_default_logger("QueueAPIService")
        self._context = context or QueueContext.create(logger=self._logger)

    @property
    def context(self) -> QueueContext:
        return self._context

    def start(self) -> bool:
        """소비 루프를 기동한다."""

        return self._context.start()

    async def close(self) -> None:
        """컨텍스트를 종료한다."""

        await self._context.shutdown()

    def enqueue(self, count: int) -> EnqueueResponse:
        result = self._context.enqueue(count)
        return EnqueueResponse.model_validate(result.model_dump())

    def control(self, action: Optional[str], consume_ms: Optional[float]) -> ControlResponse:
        state = self._context.apply_control(action=action, consume_ms=consume_ms)
        return ControlResponse.model_validate(state.model_dump())

    def health(self) -> HealthResponse:
        return HealthResponse.model_validate(self._context.health().model_dump())

    def dead_letters(self) -> DeadLetterListResponse:
        items = [
            DeadLetterResponse(
                id=entry.item.item_id,
                attempts=entry.item.attempts,
                error_code=entry.error_code,
                cause=entry.cause,
                failed_at=entry.failed_at,
            )
            for entry in self._context.dead_letters()
        ]
        return DeadLetterListResponse(items=items)

    def stream_events(self, subscriber_id: Optional[str] = None) -> AsyncIterator[str]:
        """SSE 프레임 이터레이터를 반환한다.

        종료/중복 오류는 응답 시작 전에 발생시키고, 구독 등록은 첫 프레임을
        요청할 때 수행한다. 시작되지 않고 버려진 응답은 구독을 남기지 않는다.
        """

        if self._context.is_shut_down():
            raise QueueShutDownError("subscribe")
        if subscriber_id is not None and self._context.fanout.is_registered(subscriber_id):
            raise SubscriberExistsError(subscriber_id)
        return self._iterate(subscriber_id)

    async def _iterate(self, subscriber_id: Optional[str]) -> AsyncIterator[str]:
        try:
            channel = self._context.subscribe(subscriber_id=subscriber_id)
        except BaseAppException as error:
            self._logger.warning(f"queue.sse.rejected: code={error.code}")
            return
        heartbeat = self._context.settings.heartbeat_seconds
        try:
            while True:
                try:
                    event = await channel.receive(timeout=heartbeat)
                except ChannelClosed:
                    return
                if event is None:
                    yield _HEARTBEAT_FRAME
                    continue
                yield self._build_frame(event)
        finally:
            self._context.unsubscribe(channel.subscriber_id)
            self._logger.info(f"queue.sse.closed: subscriber_id={channel.subscriber_id}")

    def _build_frame(self, event: QueueEvent) -> str:
        name = "init" if event.type is QueueEventType.INIT else "message"
        return self._build_sse(name, event.to_dict())

    def _build_sse(self, event: str, payload: dict[str, Any]) -> str:
        body = json.dumps(payload, ensure_ascii=True)
        return f"event: {event}\ndata: {body}\n\n"
