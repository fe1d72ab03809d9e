"""
목적: 작업 큐 실행 컨텍스트를 제공한다.
설명: 유계 큐, 카운터, 팬아웃, 소비 워커, 생산자, 제어 표면을 한 객체로 조립하고 처리/실패/종료 흐름을 연결한다.
디자인 패턴: 오케스트레이터 패턴
참조: src/work_queue/shared/runtime, src/work_queue/core/queue/producer.py, src/work_queue/core/queue/control.py
"""

from __future__ import annotations

import random
from typing import Optional

from pydantic import BaseModel

from work_queue.core.queue.control import ControlState, ControlSurface
from work_queue.core.queue.counters import QueueCounters
from work_queue.core.queue.dead_letter import DeadLetterEntry, DeadLetterStore
from work_queue.core.queue.events import (
    QueueEvent,
    failed_event,
    init_event,
    processed_event,
    stopped_event,
)
from work_queue.core.queue.processing import (
    DurationPolicy,
    FailureInjector,
    jittered_duration,
    never_fail,
)
from work_queue.core.queue.producer import EnqueueResult, Producer
from work_queue.shared.config import FailurePolicy, WorkQueueSettings, load_settings
from work_queue.shared.exceptions import ProcessingError, QueueShutDownError, SubscriberExistsError
from work_queue.shared.logging import Logger, create_default_logger
from work_queue.shared.runtime.buffer import ChannelConfig, EventFanout, SubscriberChannel
from work_queue.shared.runtime.clock import Clock, SystemClock
from work_queue.shared.runtime.queue import BoundedQueue, QueueConfig, WorkItem
from work_queue.shared.runtime.worker import Worker, WorkerConfig


class HealthSnapshot(BaseModel):
    """큐 상태 스냅샷 모델."""

    ok: bool = True
    subscribers: int
    running: bool
    state: str
    produced: int
    consumed: int
    failed: int
    queue_size: int
    capacity: int
    consume_poll_ms: float
    dead_letters: int


class QueueContext:
    """프로세스당 하나 생성되는 작업 큐 컨텍스트.

    모든 변경은 단일 이벤트 루프에서 일어나므로 잠금 없이 직렬화된다.
    """

    def __init__(
        self,
        settings: Optional[WorkQueueSettings] = None,
        clock: Optional[Clock] = None,
        duration_policy: Optional[DurationPolicy] = None,
        failure_injector: Optional[FailureInjector] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._settings = settings or WorkQueueSettings()
        self._logger = logger or create_default_logger("QueueContext")
        self._clock = clock or SystemClock()
        self._duration_policy = duration_policy or jittered_duration(
            base_ms=self._settings.process_base_ms,
            jitter_ms=self._settings.process_jitter_ms,
        )
        self._failure_injector = failure_injector or never_fail
        self._counters = QueueCounters()
        self._queue = BoundedQueue(
            config=QueueConfig(capacity=self._settings.capacity),
            logger=self._logger,
        )
        self._fanout = EventFanout(logger=self._logger)
        self._dead_letters = DeadLetterStore(limit=self._settings.dead_letter_limit)
        self._worker = Worker(
            self._queue,
            clock=self._clock,
            config=WorkerConfig(
                name="queue-consumer",
                poll_interval_ms=self._settings.consume_poll_ms,
                max_retries=self._settings.max_retries,
            ),
            logger=self._logger,
        )
        self._worker(self._handle_item)
        self._worker.on_failure(self._handle_failure)
        self._producer = Producer(
            self._queue,
            self._counters,
            emit=self._fanout.broadcast,
            clock=self._clock,
            logger=self._logger,
        )
        self._control = ControlSurface(self._worker, logger=self._logger)
        self._shut_down = False

    @classmethod
    def create(
        cls,
        settings: Optional[WorkQueueSettings] = None,
        clock: Optional[Clock] = None,
        duration_policy: Optional[DurationPolicy] = None,
        failure_injector: Optional[FailureInjector] = None,
        rng: Optional[random.Random] = None,
        logger: Optional[Logger] = None,
    ) -> "QueueContext":
        """설정과 난수원으로 컨텍스트를 생성한다.

        duration_policy가 없으면 설정의 처리 시간 구간과 rng로 지연 정책을 만든다.
        """

        settings = settings or load_settings()
        if duration_policy is None:
            duration_policy = jittered_duration(
                base_ms=settings.process_base_ms,
                jitter_ms=settings.process_jitter_ms,
                rng=rng,
            )
        return cls(
            settings=settings,
            clock=clock,
            duration_policy=duration_policy,
            failure_injector=failure_injector,
            logger=logger,
        )

    @property
    def settings(self) -> WorkQueueSettings:
        return self._settings

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def queue(self) -> BoundedQueue:
        return self._queue

    @property
    def counters(self) -> QueueCounters:
        return self._counters

    @property
    def fanout(self) -> EventFanout:
        return self._fanout

    @property
    def worker(self) -> Worker:
        return self._worker

    @property
    def control(self) -> ControlSurface:
        return self._control

    def is_shut_down(self) -> bool:
        """종료 여부를 반환한다."""

        return self._shut_down

    def start(self) -> bool:
        """autostart 설정이 켜져 있으면 소비 루프를 기동한다."""

        self._ensure_open("start")
        if not self._settings.autostart:
            self._logger.info("queue.context.autostart_disabled")
            return False
        return self._worker.start()

    def enqueue(self, count: int) -> EnqueueResult:
        """배치 적재를 수행한다."""

        self._ensure_open("enqueue")
        return self._producer.enqueue_batch(count)

    def apply_control(self, action: Optional[str], consume_ms: Optional[float] = None) -> ControlState:
        """제어 액션을 적용한다."""

        self._ensure_open("control")
        return self._control.apply(action=action, consume_ms=consume_ms)

    def health(self) -> HealthSnapshot:
        """현재 상태 스냅샷을 반환한다."""

        return HealthSnapshot(
            subscribers=self._fanout.subscriber_count(),
            running=self._worker.is_running,
            state=self._worker.state.value,
            produced=self._counters.produced,
            consumed=self._counters.consumed,
            failed=self._counters.failed,
            queue_size=self._queue.size(),
            capacity=self._queue.capacity,
            consume_poll_ms=self._worker.poll_interval_ms,
            dead_letters=len(self._dead_letters),
        )

    def snapshot_event(self) -> QueueEvent:
        """신규 구독자에게 보낼 현재 상태 이벤트를 만든다."""

        return init_event(
            produced=self._counters.produced,
            consumed=self._counters.consumed,
            failed=self._counters.failed,
            queue_size=self._queue.size(),
        )

    def subscribe(self, subscriber_id: Optional[str] = None) -> SubscriberChannel:
        """새 구독자 채널을 등록하고 반환한다."""

        self._ensure_open("subscribe")
        channel = SubscriberChannel(
            subscriber_id=subscriber_id,
            config=ChannelConfig(max_size=self._settings.subscriber_buffer_size),
        )
        if self._fanout.is_registered(channel.subscriber_id):
            raise SubscriberExistsError(channel.subscriber_id)
        self._fanout.register(channel, self.snapshot_event())
        return channel

    def unsubscribe(self, subscriber_id: str) -> None:
        """구독자를 제거한다."""

        self._fanout.unregister(subscriber_id)

    def dead_letters(self) -> list[DeadLetterEntry]:
        """dead-letter 항목 목록을 반환한다."""

        return self._dead_letters.list()

    async def shutdown(self) -> None:
        """소비 루프를 멈추고 마지막 stopped 이벤트를 보낸 뒤 모든 채널을 닫는다."""

        if self._shut_down:
            return
        self._shut_down = True
        await self._worker.stop(timeout=self._settings.shutdown_timeout_seconds)
        final = stopped_event(
            produced=self._counters.produced,
            consumed=self._counters.consumed,
            failed=self._counters.failed,
            queue_size=self._queue.size(),
        )
        self._fanout.close_all(final)
        self._logger.info(
            f"queue.context.stopped: produced={self._counters.produced}, consumed={self._counters.consumed}, failed={self._counters.failed}"
        )

    async def _handle_item(self, item: WorkItem) -> None:
        await self._clock.sleep(self._duration_policy())
        error = self._failure_injector(item)
        if error is not None:
            raise error
        self._counters.consumed += 1
        latency_ms = (self._clock.now() - item.enqueued_at) * 1000.0
        queue_size = self._queue.size()
        self._fanout.broadcast(
            processed_event(item_id=item.item_id, latency_ms=latency_ms, queue_size=queue_size)
        )
        self._logger.info(
            f"queue.consumer.processed: id={item.item_id}, latency_ms={latency_ms:.1f}, queue_size={queue_size}"
        )

    def _handle_failure(self, item: WorkItem, error: ProcessingError) -> None:
        cause = error.detail.cause or error.message
        policy = self._settings.failure_policy
        if policy is FailurePolicy.REQUEUE:
            retry_item = item.model_copy(update={"attempts": item.attempts + 1})
            if self._queue.enqueue(retry_item):
                self._fanout.broadcast(
                    failed_event(item.item_id, cause, FailurePolicy.REQUEUE.value, self._queue.size())
                )
                self._logger.warning(f"queue.consumer.requeued: id={item.item_id}, attempts={retry_item.attempts}")
                return
            # 재적재 자리가 없으면 버린다.
            policy = FailurePolicy.DROP
        if policy is FailurePolicy.DEAD_LETTER:
            self._dead_letters.add(
                DeadLetterEntry(item=item, error_code=error.detail.code, cause=cause)
            )
        self._counters.failed += 1
        self._fanout.broadcast(failed_event(item.item_id, cause, policy.value, self._queue.size()))
        self._logger.error(f"queue.consumer.failed: id={item.item_id}, action={policy.value}, cause={cause}")

    def _ensure_open(self, operation: str) -> None:
        if self._shut_down:
            raise QueueShutDownError(operation)
