"""
목적: 고정 용량 FIFO 작업 큐를 제공한다.
설명: 가득 차면 예외 대신 False를 반환해 백프레셔 신호로 쓰고, 비어 있으면 None을 반환한다.
디자인 패턴: 어댑터 패턴
참조: src/work_queue/shared/runtime/queue/model.py
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Optional

from work_queue.shared.logging import Logger, create_default_logger
from work_queue.shared.runtime.queue.model import QueueConfig, WorkItem


class BoundedQueue:
    """논블로킹 유계 큐 구현체.

    단일 이벤트 루프에서만 변경된다는 전제로 잠금을 두지 않는다.
    """

    def __init__(
        self,
        config: Optional[QueueConfig] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._config = config or QueueConfig()
        self._items: Deque[WorkItem] = deque()
        self._logger = logger or create_default_logger("BoundedQueue")

    @property
    def config(self) -> QueueConfig:
        """큐 설정을 반환한다."""

        return self._config

    @property
    def capacity(self) -> int:
        """큐 최대 적재 개수를 반환한다."""

        return self._config.capacity

    def enqueue(self, item: WorkItem) -> bool:
        """용량이 남아 있으면 꼬리에 추가하고 True를 반환한다."""

        if len(self._items) >= self._config.capacity:
            self._logger.debug(f"queue.full: capacity={self._config.capacity}, item_id={item.item_id}")
            return False
        self._items.append(item)
        return True

    def dequeue(self) -> Optional[WorkItem]:
        """머리 아이템을 꺼내 반환한다. 비어 있으면 None이다."""

        if not self._items:
            return None
        return self._items.popleft()

    def size(self) -> int:
        """현재 적재 개수를 반환한다."""

        return len(self._items)

    def is_full(self) -> bool:
        """큐가 가득 찼는지 여부를 반환한다."""

        return len(self._items) >= self._config.capacity

    def snapshot(self) -> list[int]:
        """적재된 아이템 식별자를 FIFO 순서로 반환한다."""

        return [item.item_id for item in self._items]
