"""
목적: 구독자 단위 이벤트 채널을 제공한다.
설명: 관찰자 1명당 FIFO 버퍼를 두고 send 결과를 명시적으로 반환한다.
디자인 패턴: 어댑터 패턴
참조: src/work_queue/shared/runtime/buffer/model.py
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional
from uuid import uuid4

from work_queue.shared.runtime.buffer.model import ChannelClosed, ChannelConfig, SendResult


class SubscriberChannel:
    """관찰자 1명에게 이벤트를 전달하는 채널."""

    _END_OF_STREAM = object()

    def __init__(
        self,
        subscriber_id: Optional[str] = None,
        config: Optional[ChannelConfig] = None,
    ) -> None:
        self._subscriber_id = subscriber_id or str(uuid4())
        self._config = config or ChannelConfig()
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=self._config.max_size)
        self._closed = False

    @property
    def subscriber_id(self) -> str:
        """구독자 식별자를 반환한다."""

        return self._subscriber_id

    def is_closed(self) -> bool:
        """채널이 닫혔는지 여부를 반환한다."""

        return self._closed

    def pending(self) -> int:
        """아직 읽히지 않은 이벤트 수를 반환한다."""

        return self._queue.qsize()

    def send(self, event: Any) -> SendResult:
        """이벤트를 버퍼에 넣고 전송 결과를 반환한다."""

        if self._closed:
            return SendResult.CLOSED
        try:
            self._queue.put_nowait(event)
        except asyncio.QueueFull:
            return SendResult.OVERFLOW
        return SendResult.DELIVERED

    def close(self) -> None:
        """채널을 닫고 종료 표식을 넣는다."""

        if self._closed:
            return
        self._closed = True
        if self._queue.full():
            # 종료 표식이 반드시 들어가도록 가장 오래된 이벤트를 버린다.
            self._queue.get_nowait()
        self._queue.put_nowait(self._END_OF_STREAM)

    async def receive(self, timeout: Optional[float] = None) -> Any:
        """다음 이벤트를 반환한다.

        Args:
            timeout: 최대 대기 시간(초). None이면 무기한 대기한다.

        Returns:
            이벤트 객체. 대기 시간이 지나면 None.

        Raises:
            ChannelClosed: 종료 표식까지 모두 읽은 경우.
        """

        try:
            if timeout is None:
                event = await self._queue.get()
            else:
                event = await asyncio.wait_for(self._queue.get(), timeout=timeout)
        except asyncio.TimeoutError:
            return None
        if event is self._END_OF_STREAM:
            self._queue.put_nowait(self._END_OF_STREAM)
            raise ChannelClosed(self._subscriber_id)
        return event
