"""
목적: 서버 종료 신호를 가로채 작업 큐 종료를 먼저 예약하는 훅을 제공한다.
설명: uvicorn은 SIGINT/SIGTERM을 받으면 열린 응답이 모두 끝날 때까지 기다린 뒤 lifespan 종료를 실행한다.
      SSE 응답은 큐가 종료되어야 끝나므로, 기존 신호 핸들러를 호출하기 전에 종료 코루틴을 이벤트 루프에 예약한다.
디자인 패턴: 데코레이터(핸들러 체이닝)
참조: src/work_queue/api/main.py, src/work_queue/api/queue/services/__init__.py
"""

from __future__ import annotations

import asyncio
import signal
import threading
from types import FrameType
from typing import Any, Awaitable, Callable, Optional

from work_queue.shared.logging import Logger, create_default_logger

EXIT_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class ExitSignalHook:
    """종료 신호 수신 시 한 번만 종료 코루틴을 실행하고 기존 핸들러로 넘긴다.

    신호 핸들러는 메인 스레드에서만 등록할 수 있으므로, 다른 스레드의
    이벤트 루프(예: TestClient)에서는 설치를 건너뛴다.

    Args:
        on_exit: 종료 신호를 받으면 실행할 코루틴 함수.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        on_exit: Callable[[], Awaitable[None]],
        logger: Optional[Logger] = None,
    ) -> None:
        self._on_exit = on_exit
        self._logger = logger or create_default_logger("ExitSignalHook")
        self._previous: dict[int, Any] = {}
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._task: Optional[asyncio.Task] = None
        self._triggered = False

    @property
    def triggered(self) -> bool:
        return self._triggered

    def install(self) -> bool:
        """현재 실행 중인 루프 기준으로 종료 신호 핸들러를 등록한다."""

        if threading.current_thread() is not threading.main_thread():
            self._logger.debug("queue.exit_signal.skip: reason=not_main_thread")
            return False
        self._loop = asyncio.get_running_loop()
        for sig in EXIT_SIGNALS:
            self._previous[sig] = signal.getsignal(sig)
            signal.signal(sig, self._handle)
        return True

    def uninstall(self) -> None:
        """이 훅이 등록한 핸들러만 이전 핸들러로 되돌린다."""

        for sig, previous in self._previous.items():
            if signal.getsignal(sig) == self._handle:
                signal.signal(sig, previous)
        self._previous.clear()

    async def wait(self) -> None:
        """예약된 종료 코루틴이 있으면 끝날 때까지 기다린다."""

        if self._task is not None:
            await self._task

    def _handle(self, sig: int, frame: Optional[FrameType]) -> None:
        if not self._triggered and self._loop is not None and not self._loop.is_closed():
            self._triggered = True
            self._loop.call_soon_threadsafe(self._schedule, sig)
        previous = self._previous.get(sig)
        if callable(previous):
            previous(sig, frame)
        elif previous == signal.SIG_DFL:
            signal.signal(sig, signal.SIG_DFL)
            signal.raise_signal(sig)

    def _schedule(self, sig: int) -> None:
        self._logger.info(f"queue.exit_signal.received: signal={signal.Signals(sig).name}")
        self._task = self._loop.create_task(self._on_exit())
