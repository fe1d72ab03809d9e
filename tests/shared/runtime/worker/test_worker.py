"""
목적: 협력형 워커의 상태 전이와 재시도를 검증한다.
설명: 가상 시계로 Draining/Idle-Polling 전환, 일시정지 후 재개, 폴링 주기 변경, 실패 핸들러 호출을 확인한다.
디자인 패턴: 단위 테스트
참조: src/work_queue/shared/runtime/worker/worker.py
"""

from __future__ import annotations

import pytest

from work_queue.shared.exceptions import ProcessingError
from work_queue.shared.runtime.clock import VirtualClock
from work_queue.shared.runtime.queue import BoundedQueue, QueueConfig, WorkItem
from work_queue.shared.runtime.worker import Worker, WorkerConfig, WorkerState


def _queue_with(*item_ids: int) -> BoundedQueue:
    queue = BoundedQueue(config=QueueConfig(capacity=10))
    for item_id in item_ids:
        queue.enqueue(WorkItem(item_id=item_id, enqueued_at=0.0))
    return queue


@pytest.mark.asyncio
async def test_worker_drains_then_polls() -> None:
    """아이템을 연속 처리한 뒤 비면 폴링 상태로 전환하는지 검증한다."""

    clock = VirtualClock()
    queue = _queue_with(1, 2, 3)
    worker = Worker(queue, clock=clock, config=WorkerConfig(poll_interval_ms=50))
    processed: list[tuple[int, float]] = []

    @worker
    async def handle(item: WorkItem) -> None:
        await clock.sleep(0.1)
        processed.append((item.item_id, clock.now()))

    worker.start()
    await clock.advance(0.32)

    assert [item_id for item_id, _ in processed] == [1, 2, 3]
    assert [at for _, at in processed] == pytest.approx([0.1, 0.2, 0.3])
    assert worker.state is WorkerState.IDLE_POLLING
    await worker.stop(timeout=0)
    assert worker.state is WorkerState.STOPPED


@pytest.mark.asyncio
async def test_pause_finishes_in_flight_item_only() -> None:
    """일시정지 후에는 처리 중인 아이템만 끝내고 새 아이템을 꺼내지 않는지 검증한다."""

    clock = VirtualClock()
    queue = _queue_with(1, 2, 3)
    worker = Worker(queue, clock=clock)
    processed: list[int] = []

    @worker
    async def handle(item: WorkItem) -> None:
        await clock.sleep(0.1)
        processed.append(item.item_id)

    worker.start()
    await clock.advance(0.05)
    assert worker.in_flight is not None
    worker.pause()
    await clock.advance(1.0)

    assert processed == [1]
    assert queue.size() == 2
    assert worker.state is WorkerState.PAUSED

    assert worker.resume() is True
    await clock.advance(0.25)
    assert processed == [1, 2, 3]
    await worker.stop(timeout=0)


@pytest.mark.asyncio
async def test_resume_while_running_is_noop() -> None:
    """실행 중 재개 요청은 새 루프를 만들지 않는지 검증한다."""

    clock = VirtualClock()
    worker = Worker(_queue_with(), clock=clock)

    @worker
    async def handle(item: WorkItem) -> None:
        return None

    assert worker.start() is True
    assert worker.resume() is False
    assert worker.is_running is True
    await worker.stop(timeout=0)


@pytest.mark.asyncio
async def test_set_poll_interval_clamps_to_minimum() -> None:
    """폴링 주기는 최소 1ms로 보정되는지 검증한다."""

    worker = Worker(_queue_with(), clock=VirtualClock())

    assert worker.set_poll_interval(0) == 1.0
    assert worker.set_poll_interval(250) == 250.0
    assert worker.poll_interval_ms == 250.0


@pytest.mark.asyncio
async def test_poll_interval_change_applies_to_next_idle_wait() -> None:
    """폴링 주기 변경은 진행 중인 대기에 소급되지 않고 다음 대기부터 적용되는지 검증한다."""

    clock = VirtualClock()
    queue = _queue_with()
    worker = Worker(queue, clock=clock, config=WorkerConfig(poll_interval_ms=50))
    picked: list[tuple[int, float]] = []

    @worker
    async def handle(item: WorkItem) -> None:
        picked.append((item.item_id, clock.now()))

    worker.start()
    await clock.advance(0.02)
    assert worker.state is WorkerState.IDLE_POLLING

    worker.set_poll_interval(500)
    queue.enqueue(WorkItem(item_id=1, enqueued_at=clock.now()))
    await clock.advance(0.04)

    assert picked == [(1, pytest.approx(0.05))]
    assert worker.state is WorkerState.IDLE_POLLING
    assert clock.pending_sleepers() == 1

    queue.enqueue(WorkItem(item_id=2, enqueued_at=clock.now()))
    await clock.advance(0.45)
    assert [item_id for item_id, _ in picked] == [1]

    await clock.advance(0.05)
    assert picked[-1] == (2, pytest.approx(0.55))
    await worker.stop(timeout=0)


@pytest.mark.asyncio
async def test_pause_during_idle_wait_stops_after_wait_ends() -> None:
    """폴링 대기 중 일시정지하면 대기가 끝난 뒤 재예약 없이 PAUSED가 되는지 검증한다."""

    clock = VirtualClock()
    queue = _queue_with()
    worker = Worker(queue, clock=clock, config=WorkerConfig(poll_interval_ms=50))
    picked: list[int] = []

    @worker
    async def handle(item: WorkItem) -> None:
        picked.append(item.item_id)

    worker.start()
    await clock.advance(0.02)
    assert clock.pending_sleepers() == 1

    worker.pause()
    queue.enqueue(WorkItem(item_id=1, enqueued_at=clock.now()))
    assert worker.state is WorkerState.IDLE_POLLING

    await clock.advance(0.04)

    assert clock.pending_sleepers() == 0
    assert worker.state is WorkerState.PAUSED
    assert picked == []
    assert queue.size() == 1

    assert worker.resume() is True
    await clock.advance(0)
    assert picked == [1]
    await worker.stop(timeout=0)


@pytest.mark.asyncio
async def test_retries_then_notifies_failure_handler() -> None:
    """재시도 횟수를 넘긴 실패만 실패 핸들러로 전달되는지 검증한다."""

    worker = Worker(_queue_with(1, 2), clock=VirtualClock(), config=WorkerConfig(max_retries=1))
    calls: dict[int, int] = {}
    failures: list[tuple[int, str]] = []

    @worker
    async def handle(item: WorkItem) -> None:
        calls[item.item_id] = calls.get(item.item_id, 0) + 1
        if item.item_id == 1 and calls[item.item_id] == 1:
            raise ProcessingError(item.item_id, "first attempt")
        if item.item_id == 2:
            raise RuntimeError("always")

    @worker.on_failure
    def handle_failure(item: WorkItem, error: ProcessingError) -> None:
        failures.append((item.item_id, error.detail.cause))

    assert await worker.step() is True
    assert await worker.step() is True
    assert await worker.step() is False

    assert calls == {1: 2, 2: 2}
    assert failures == [(2, "always")]


@pytest.mark.asyncio
async def test_start_requires_handler_and_not_stopped() -> None:
    """핸들러가 없거나 이미 중지된 워커는 기동할 수 없는지 검증한다."""

    worker = Worker(_queue_with(), clock=VirtualClock())
    with pytest.raises(ValueError):
        worker.start()

    @worker
    async def handle(item: WorkItem) -> None:
        return None

    await worker.stop(timeout=0)
    with pytest.raises(RuntimeError):
        worker.start()
