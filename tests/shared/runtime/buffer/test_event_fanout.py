"""
목적: 이벤트 팬아웃 허브를 검증한다.
설명: 초기 이벤트 우선 전달, 구독자 집합 의미, 전송 실패 구독자 제거, 종료 이벤트를 확인한다.
디자인 패턴: 단위 테스트
참조: src/work_queue/shared/runtime/buffer/fanout.py
"""

from __future__ import annotations

import pytest

from work_queue.shared.runtime.buffer import ChannelClosed, ChannelConfig, EventFanout, SubscriberChannel


async def _drain(channel: SubscriberChannel) -> list:
    events = []
    while channel.pending():
        try:
            events.append(await channel.receive())
        except ChannelClosed:
            break
    return events


@pytest.mark.asyncio
async def test_register_sends_initial_event_first() -> None:
    """등록 시 초기 이벤트가 이후 브로드캐스트보다 먼저 도착하는지 검증한다."""

    fanout = EventFanout()
    channel = SubscriberChannel(subscriber_id="a")

    assert fanout.register(channel, "init") is True
    fanout.broadcast("queued-1")
    fanout.broadcast("queued-2")

    assert await _drain(channel) == ["init", "queued-1", "queued-2"]


def test_register_is_idempotent_per_subscriber() -> None:
    """같은 구독자 재등록은 무시되고, 제거는 여러 번 해도 안전한지 검증한다."""

    fanout = EventFanout()
    channel = SubscriberChannel(subscriber_id="a")

    assert fanout.register(channel, "init") is True
    assert fanout.register(channel, "init") is False
    assert fanout.subscriber_count() == 1

    fanout.unregister("a")
    fanout.unregister("a")
    assert fanout.subscriber_count() == 0


@pytest.mark.asyncio
async def test_broadcast_drops_failed_subscriber_only() -> None:
    """전송 실패 구독자만 제거되고 나머지는 계속 받는지 검증한다."""

    fanout = EventFanout()
    healthy = SubscriberChannel(subscriber_id="healthy")
    slow = SubscriberChannel(subscriber_id="slow", config=ChannelConfig(max_size=1))
    fanout.register(healthy, "init")
    fanout.register(slow, "init")

    delivered = fanout.broadcast("queued-1")

    assert delivered == 1
    assert fanout.is_registered("healthy") is True
    assert fanout.is_registered("slow") is False
    assert slow.is_closed() is True
    assert await _drain(healthy) == ["init", "queued-1"]


@pytest.mark.asyncio
async def test_close_all_sends_final_event_and_closes() -> None:
    """종료 시 마지막 이벤트 전달 후 모든 채널을 닫는지 검증한다."""

    fanout = EventFanout()
    channel = SubscriberChannel(subscriber_id="a")
    fanout.register(channel, "init")

    fanout.close_all("stopped")

    assert fanout.subscriber_count() == 0
    assert channel.is_closed() is True
    events = await _drain(channel)
    assert events == ["init", "stopped"]
