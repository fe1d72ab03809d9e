"""
목적: 이벤트 팬아웃 허브를 제공한다.
설명: 구독자 채널 집합에 이벤트를 방출 순서대로 전달하고, 전송 실패 채널은 구독 해제로 처리한다.
디자인 패턴: 옵저버 패턴
참조: src/work_queue/shared/runtime/buffer/subscriber_channel.py, src/work_queue/core/queue/context.py
"""

from __future__ import annotations

from typing import Any, Optional

from work_queue.shared.logging import Logger, create_default_logger
from work_queue.shared.runtime.buffer.model import SendResult
from work_queue.shared.runtime.buffer.subscriber_channel import SubscriberChannel


class EventFanout:
    """구독자 집합에 이벤트를 브로드캐스트하는 허브."""

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger or create_default_logger("EventFanout")
        self._channels: dict[str, SubscriberChannel] = {}

    def subscriber_count(self) -> int:
        """현재 구독자 수를 반환한다."""

        return len(self._channels)

    def is_registered(self, subscriber_id: str) -> bool:
        """구독자 등록 여부를 반환한다."""

        return subscriber_id in self._channels

    def register(self, channel: SubscriberChannel, initial_event: Any) -> bool:
        """초기 상태 이벤트를 먼저 보낸 뒤 채널을 등록한다.

        이미 등록된 구독자면 아무 것도 하지 않고 False를 반환한다.
        """

        if channel.subscriber_id in self._channels:
            return False
        result = channel.send(initial_event)
        if result is not SendResult.DELIVERED:
            self._logger.warning(
                f"queue.fanout.register_failed: subscriber_id={channel.subscriber_id}, result={result.value}"
            )
            return False
        self._channels[channel.subscriber_id] = channel
        self._logger.info(
            f"queue.fanout.registered: subscriber_id={channel.subscriber_id}, total={len(self._channels)}"
        )
        return True

    def unregister(self, subscriber_id: str) -> None:
        """구독자를 제거한다. 없는 구독자면 무시한다."""

        if self._channels.pop(subscriber_id, None) is None:
            return
        self._logger.info(
            f"queue.fanout.unregistered: subscriber_id={subscriber_id}, total={len(self._channels)}"
        )

    def broadcast(self, event: Any) -> int:
        """모든 구독자에게 이벤트를 전달하고 전달 성공 수를 반환한다."""

        delivered = 0
        for subscriber_id, channel in list(self._channels.items()):
            result = channel.send(event)
            if result is SendResult.DELIVERED:
                delivered += 1
                continue
            self._channels.pop(subscriber_id, None)
            channel.close()
            self._logger.warning(
                f"queue.fanout.dropped: subscriber_id={subscriber_id}, result={result.value}"
            )
        return delivered

    def close_all(self, final_event: Any) -> int:
        """마지막 이벤트를 전달한 뒤 모든 채널을 닫고 비운다."""

        delivered = self.broadcast(final_event)
        for channel in self._channels.values():
            channel.close()
        closed = len(self._channels)
        self._channels.clear()
        self._logger.info(f"queue.fanout.closed: delivered={delivered}, closed={closed}")
        return delivered
