"""
목적: 작업 큐 실행 컨텍스트의 종단 흐름을 검증한다.
설명: 적재-처리 이벤트 순서, 카운터 보존 관계, 일시정지 정확성, 실패 정책, 종료 이벤트를 가상 시계로 확인한다.
디자인 패턴: 통합 단위 테스트
참조: src/work_queue/core/queue/context.py
"""

from __future__ import annotations

import random
from typing import Optional

import pytest

from work_queue.core.queue import QueueContext, fail_every
from work_queue.shared.config import FailurePolicy, WorkQueueSettings
from work_queue.shared.exceptions import ProcessingError, QueueShutDownError, SubscriberExistsError
from work_queue.shared.runtime.buffer import ChannelClosed, SubscriberChannel
from work_queue.shared.runtime.clock import VirtualClock
from work_queue.shared.runtime.queue import WorkItem


async def _drain(channel: SubscriberChannel) -> list[dict]:
    """버퍼에 쌓인 이벤트를 모두 읽어 사전 목록으로 반환한다."""

    events: list[dict] = []
    while channel.pending():
        try:
            event = await channel.receive()
        except ChannelClosed:
            break
        events.append(event.to_dict())
    return events


def _assert_conserved(context: QueueContext) -> None:
    counters = context.counters
    assert counters.produced - counters.consumed - counters.failed == context.queue.size()


@pytest.mark.asyncio
async def test_steps_emit_processed_in_fifo_order(make_context) -> None:
    """3개 적재 후 3번 처리하면 consumed=3, processed 이벤트가 순서대로 나오는지 검증한다."""

    context = make_context()
    channel = context.subscribe()

    context.enqueue(3)
    for _ in range(3):
        assert await context.worker.step() is True

    events = await _drain(channel)
    assert events[0] == {"type": "init", "produced": 0, "consumed": 0, "failed": 0, "queue_size": 0}
    processed = [event for event in events if event["type"] == "processed"]
    assert [event["id"] for event in processed] == [1, 2, 3]
    assert [event["queue_size"] for event in processed] == [2, 1, 0]
    assert context.counters.consumed == 3
    _assert_conserved(context)


@pytest.mark.asyncio
async def test_running_consumer_reports_latency(make_context, virtual_clock) -> None:
    """실행 중인 소비 루프가 처리 지연을 가상 시계 기준으로 보고하는지 검증한다."""

    context = make_context(duration_ms=100, autostart=True)
    channel = context.subscribe()
    context.enqueue(3)

    assert context.start() is True
    await virtual_clock.advance(0.32)

    processed = [event for event in await _drain(channel) if event["type"] == "processed"]
    assert [event["id"] for event in processed] == [1, 2, 3]
    assert [event["latency_ms"] for event in processed] == pytest.approx([100.0, 200.0, 300.0])
    assert context.health().state == "IDLE_POLLING"
    await context.shutdown()


@pytest.mark.asyncio
async def test_pause_stops_new_dequeues(make_context, virtual_clock) -> None:
    """일시정지 이후에는 적재된 아이템이 더 처리되지 않는지 검증한다."""

    context = make_context(duration_ms=100, autostart=True)
    context.enqueue(5)
    context.start()
    await virtual_clock.advance(0.15)

    state = context.apply_control("pause")
    assert state.running is False
    await virtual_clock.advance(2.0)

    # 처리 중이던 2번만 끝나고 나머지는 큐에 남는다.
    assert context.counters.consumed == 2
    assert context.queue.snapshot() == [3, 4, 5]
    _assert_conserved(context)

    context.enqueue(1)
    await virtual_clock.advance(2.0)
    assert context.counters.consumed == 2

    assert context.apply_control("resume").running is True
    await virtual_clock.advance(0.45)
    assert context.counters.consumed == 6
    _assert_conserved(context)
    await context.shutdown()


@pytest.mark.asyncio
async def test_control_set_and_unknown_action(make_context) -> None:
    """set 액션은 폴링 주기만 바꾸고, 알 수 없는 액션은 무시되는지 검증한다."""

    context = make_context()

    state = context.apply_control("set", consume_ms=200)
    assert state.consume_poll_ms == 200.0
    assert state.running is False

    state = context.apply_control("explode", consume_ms=None)
    assert state.consume_poll_ms == 200.0
    assert context.health().consume_poll_ms == 200.0


@pytest.mark.asyncio
async def test_backpressure_event_and_health(make_context) -> None:
    """용량 초과 시 백프레셔 이벤트와 헬스 스냅샷이 일관되는지 검증한다."""

    context = make_context(capacity=5)
    channel = context.subscribe()

    result = context.enqueue(7)

    assert (result.accepted, result.rejected) == (5, 1)
    events = await _drain(channel)
    assert [event["type"] for event in events].count("backpressure") == 1
    health = context.health()
    assert health.ok is True
    assert (health.produced, health.consumed, health.queue_size, health.capacity) == (5, 0, 5, 5)
    assert health.subscribers == 1
    assert health.running is False


@pytest.mark.asyncio
async def test_drop_policy_counts_failure(make_context) -> None:
    """drop 정책은 실패 아이템을 버리고 failed 카운터를 올리는지 검증한다."""

    context = make_context(failure_injector=fail_every(2, cause="boom"))
    channel = context.subscribe()
    context.enqueue(3)

    while await context.worker.step():
        pass

    failed = [event for event in await _drain(channel) if event["type"] == "failed"]
    assert failed == [{"type": "failed", "id": 2, "error": "boom", "action": "drop", "queue_size": 1}]
    assert (context.counters.consumed, context.counters.failed) == (2, 1)
    assert context.dead_letters() == []
    _assert_conserved(context)


@pytest.mark.asyncio
async def test_dead_letter_policy_keeps_failed_items(make_context) -> None:
    """dead_letter 정책은 실패 아이템을 보관하는지 검증한다."""

    context = make_context(
        failure_injector=fail_every(2, cause="boom"),
        failure_policy=FailurePolicy.DEAD_LETTER,
    )
    context.enqueue(4)

    while await context.worker.step():
        pass

    entries = context.dead_letters()
    assert [entry.item.item_id for entry in entries] == [2, 4]
    assert entries[0].error_code == "QUEUE_PROCESSING_FAILED"
    assert context.health().dead_letters == 2
    _assert_conserved(context)


@pytest.mark.asyncio
async def test_requeue_policy_retries_at_tail(make_context) -> None:
    """requeue 정책은 실패 아이템을 꼬리에 다시 넣고 failed를 올리지 않는지 검증한다."""

    def fail_first_attempt(item: WorkItem) -> Optional[ProcessingError]:
        if item.item_id == 1 and item.attempts == 0:
            return ProcessingError(item.item_id, "transient")
        return None

    context = make_context(failure_injector=fail_first_attempt, failure_policy=FailurePolicy.REQUEUE)
    channel = context.subscribe()
    context.enqueue(2)

    assert await context.worker.step() is True
    assert context.queue.snapshot() == [2, 1]
    while await context.worker.step():
        pass

    events = await _drain(channel)
    assert [event["action"] for event in events if event["type"] == "failed"] == ["requeue"]
    processed = [event["id"] for event in events if event["type"] == "processed"]
    assert processed == [2, 1]
    assert (context.counters.consumed, context.counters.failed) == (2, 0)
    _assert_conserved(context)


@pytest.mark.asyncio
async def test_max_retries_recovers_transient_failure(make_context) -> None:
    """재시도 안에 성공하면 실패로 집계되지 않는지 검증한다."""

    context = make_context(failure_injector=fail_every(2), max_retries=1)
    context.enqueue(2)

    while await context.worker.step():
        pass

    assert (context.counters.consumed, context.counters.failed) == (2, 0)


@pytest.mark.asyncio
async def test_slow_subscriber_is_dropped(make_context) -> None:
    """버퍼를 넘긴 구독자는 제거되고 다른 구독자는 유지되는지 검증한다."""

    context = make_context(subscriber_buffer_size=2)
    slow = context.subscribe("slow")
    fast = context.subscribe("fast")

    context.enqueue(1)
    await _drain(fast)
    context.enqueue(1)

    assert context.fanout.is_registered("slow") is False
    assert context.fanout.is_registered("fast") is True
    assert slow.is_closed() is True


@pytest.mark.asyncio
async def test_duplicate_subscriber_is_rejected(make_context) -> None:
    """이미 등록된 구독자 식별자는 거절되는지 검증한다."""

    context = make_context()
    context.subscribe("dup")

    with pytest.raises(SubscriberExistsError) as error:
        context.subscribe("dup")

    assert error.value.detail.code == "QUEUE_SUBSCRIBER_EXISTS"
    context.unsubscribe("dup")
    assert context.health().subscribers == 0


@pytest.mark.asyncio
async def test_shutdown_emits_stopped_and_closes(make_context) -> None:
    """종료 시 stopped 이벤트를 보내고 이후 적재/구독을 거절하는지 검증한다."""

    context = make_context()
    channel = context.subscribe()
    context.enqueue(2)

    await context.shutdown()
    await context.shutdown()

    events = await _drain(channel)
    assert events[-1] == {"type": "stopped", "produced": 2, "consumed": 0, "failed": 0, "queue_size": 2}
    with pytest.raises(ChannelClosed):
        await channel.receive()
    assert context.health().subscribers == 0
    assert context.health().state == "STOPPED"
    for action in (lambda: context.enqueue(1), lambda: context.subscribe()):
        with pytest.raises(QueueShutDownError) as error:
            action()
        assert error.value.detail.code == "QUEUE_SHUT_DOWN"


@pytest.mark.asyncio
async def test_create_uses_seeded_rng() -> None:
    """같은 시드로 만든 컨텍스트는 같은 처리 지연으로 아이템을 처리하는지 검증한다."""

    settings = WorkQueueSettings(shutdown_timeout_seconds=0.0)

    async def processed_latencies(seed: int) -> list[float]:
        clock = VirtualClock()
        context = QueueContext.create(settings=settings, clock=clock, rng=random.Random(seed))
        channel = context.subscribe()
        context.enqueue(3)
        context.start()
        await clock.advance(1.0)
        await context.shutdown()
        events = await _drain(channel)
        return [event["latency_ms"] for event in events if event["type"] == "processed"]

    first = await processed_latencies(3)
    second = await processed_latencies(3)

    assert len(first) == 3
    assert first == pytest.approx(second)
    assert 50.0 <= first[0] < 200.0
