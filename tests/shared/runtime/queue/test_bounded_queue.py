"""
목적: 유계 큐의 용량/순서 불변식을 검증한다.
설명: 가득 찬 큐의 거절, FIFO 순서, 빈 큐 dequeue 동작을 확인한다.
디자인 패턴: 단위 테스트
참조: src/work_queue/shared/runtime/queue/bounded_queue.py
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from work_queue.shared.runtime.queue import BoundedQueue, QueueConfig, WorkItem


def _item(item_id: int) -> WorkItem:
    return WorkItem(item_id=item_id, enqueued_at=0.0)


def test_enqueue_rejects_when_full() -> None:
    """용량을 넘는 적재는 False로 거절되고 길이가 변하지 않는지 검증한다."""

    queue = BoundedQueue(config=QueueConfig(capacity=2))

    assert queue.enqueue(_item(1)) is True
    assert queue.enqueue(_item(2)) is True
    assert queue.is_full() is True
    assert queue.enqueue(_item(3)) is False
    assert queue.size() == 2
    assert queue.snapshot() == [1, 2]


def test_dequeue_is_fifo_and_none_when_empty() -> None:
    """FIFO 순서로 꺼내고 비면 None을 반환하는지 검증한다."""

    queue = BoundedQueue(config=QueueConfig(capacity=3))
    for item_id in (1, 2, 3):
        queue.enqueue(_item(item_id))

    drained = [queue.dequeue().item_id for _ in range(3)]

    assert drained == [1, 2, 3]
    assert queue.dequeue() is None
    assert queue.size() == 0


def test_capacity_must_be_positive() -> None:
    """용량 0 설정은 검증 오류인지 확인한다."""

    with pytest.raises(ValidationError):
        QueueConfig(capacity=0)
