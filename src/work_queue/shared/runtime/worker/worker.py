"""
목적: 유계 큐를 소비하는 협력형 워커를 제공한다.
설명: 단일 이벤트 루프 태스크로 Draining/Idle-Polling 두 상태를 오가며, 일시정지/재개/폴링 주기 변경과 재시도를 지원한다.
디자인 패턴: 템플릿 메서드, 커맨드 패턴
참조: src/work_queue/shared/runtime/queue/bounded_queue.py, src/work_queue/shared/runtime/worker/model.py, src/work_queue/shared/runtime/clock/clock.py
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional

from work_queue.shared.exceptions import ProcessingError
from work_queue.shared.logging import Logger, create_default_logger
from work_queue.shared.runtime.clock import Clock, SystemClock
from work_queue.shared.runtime.queue import BoundedQueue, WorkItem
from work_queue.shared.runtime.worker.model import WorkerConfig, WorkerState

Handler = Callable[[WorkItem], Awaitable[None]]
FailureHandler = Callable[[WorkItem, ProcessingError], None]


class Worker:
    """큐를 소비하는 협력형 워커 구현체.

    실행 플래그가 꺼지면 현재 대기(처리 지연 또는 폴링)가 끝난 뒤 더 이상
    아이템을 꺼내지 않고 스스로 재예약하지 않는다. 이미 꺼낸 아이템은 항상
    끝까지 처리한다.
    """

    def __init__(
        self,
        queue: BoundedQueue,
        clock: Optional[Clock] = None,
        config: Optional[WorkerConfig] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._queue = queue
        self._clock = clock or SystemClock()
        self._config = config or WorkerConfig()
        self._logger = logger or create_default_logger(self._config.name)
        self._handler: Optional[Handler] = None
        self._failure_handler: Optional[FailureHandler] = None
        self._task: Optional[asyncio.Task] = None
        self._running = False
        self._stopped = False
        self._in_flight: Optional[WorkItem] = None
        self._poll_interval_ms = float(self._config.poll_interval_ms)
        self._state = WorkerState.IDLE

    @property
    def state(self) -> WorkerState:
        """현재 워커 상태를 반환한다."""

        return self._state

    @property
    def is_running(self) -> bool:
        """실행 플래그를 반환한다."""

        return self._running

    @property
    def poll_interval_ms(self) -> float:
        """현재 폴링 주기(ms)를 반환한다."""

        return self._poll_interval_ms

    @property
    def in_flight(self) -> Optional[WorkItem]:
        """처리 중인 아이템을 반환한다."""

        return self._in_flight

    def __call__(self, handler: Handler) -> Handler:
        """데코레이터로 처리 핸들러를 등록한다."""

        self._handler = handler
        return handler

    def on_failure(self, handler: FailureHandler) -> FailureHandler:
        """데코레이터로 최종 실패 핸들러를 등록한다."""

        self._failure_handler = handler
        return handler

    def start(self) -> bool:
        """실행 플래그를 켜고 루프 태스크를 기동한다.

        Returns:
            새 루프 태스크를 만들었는지 여부.
        """

        if self._handler is None:
            raise ValueError("워커 핸들러가 등록되지 않았습니다.")
        if self._stopped:
            raise RuntimeError("이미 중지된 워커입니다.")
        self._running = True
        started = self._ensure_task()
        if started:
            self._logger.info(f"queue.worker.started: poll_interval_ms={self._poll_interval_ms}")
        return started

    def pause(self) -> None:
        """실행 플래그를 끈다. 진행 중인 대기는 끝까지 진행된다."""

        if not self._running:
            return
        self._running = False
        self._logger.info("queue.worker.paused")

    def resume(self) -> bool:
        """실행 플래그를 켜고, 루프가 완전히 멈춰 있었으면 다시 기동한다."""

        if self._running:
            return False
        return self.start()

    def set_poll_interval(self, interval_ms: float) -> float:
        """폴링 주기를 변경한다. 최소 1ms로 보정하며 다음 폴링부터 적용된다."""

        self._poll_interval_ms = max(1.0, float(interval_ms))
        self._logger.info(f"queue.worker.poll_interval: poll_interval_ms={self._poll_interval_ms}")
        return self._poll_interval_ms

    async def step(self) -> bool:
        """아이템 1건을 꺼내 처리한다. 큐가 비어 있으면 False를 반환한다."""

        if self._handler is None:
            raise ValueError("워커 핸들러가 등록되지 않았습니다.")
        item = self._queue.dequeue()
        if item is None:
            return False
        self._state = WorkerState.DRAINING
        self._in_flight = item
        try:
            await self._process_item(item)
        finally:
            self._in_flight = None
        return True

    async def stop(self, timeout: float = 1.0) -> None:
        """워커를 중지한다. 처리 중인 아이템은 timeout까지 기다린다."""

        self._running = False
        self._stopped = True
        task = self._task
        if task is not None and not task.done():
            if self._in_flight is not None:
                await asyncio.wait({task}, timeout=max(0.0, timeout))
            if not task.done():
                task.cancel()
                try:
                    await task
                except asyncio.CancelledError:
                    pass
        self._task = None
        self._state = WorkerState.STOPPED
        self._logger.info("queue.worker.stopped")

    def _ensure_task(self) -> bool:
        if self._task is not None and not self._task.done():
            return False
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run(), name=f"{self._config.name}-loop")
        return True

    async def _run(self) -> None:
        try:
            while self._running:
                if await self.step():
                    continue
                self._state = WorkerState.IDLE_POLLING
                await self._clock.sleep(self._poll_interval_ms / 1000.0)
        finally:
            self._state = WorkerState.STOPPED if self._stopped else WorkerState.PAUSED

    async def _process_item(self, item: WorkItem) -> None:
        attempts = 0
        while True:
            try:
                await self._handler(item)
                return
            except ProcessingError as error:
                failure = error
            except Exception as error:  # noqa: BLE001 - 워커 루프 보호
                failure = ProcessingError(item.item_id, str(error), original=error)
            attempts += 1
            self._logger.warning(
                f"queue.worker.attempt_failed: item_id={item.item_id}, attempt={attempts}, cause={failure.detail.cause}"
            )
            if attempts > self._config.max_retries:
                self._notify_failure(item, failure)
                return

    def _notify_failure(self, item: WorkItem, failure: ProcessingError) -> None:
        if self._failure_handler is None:
            self._logger.error(f"queue.worker.failed: item_id={item.item_id}, cause={failure.detail.cause}")
            return
        try:
            self._failure_handler(item, failure)
        except Exception as error:  # noqa: BLE001 - 워커 루프 보호
            self._logger.error(f"queue.worker.failure_handler_error: item_id={item.item_id}, error={error}")
