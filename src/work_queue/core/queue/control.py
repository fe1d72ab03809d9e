"""
목적: 소비 루프 제어 표면을 제공한다.
설명: 일시정지/재개/폴링 주기 변경과 문자열 액션 해석을 담당한다.
디자인 패턴: 퍼사드
참조: src/work_queue/shared/runtime/worker/worker.py
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from work_queue.shared.logging import Logger, create_default_logger
from work_queue.shared.runtime.worker import Worker


class ControlAction(str, Enum):
    """제어 액션."""

    PAUSE = "pause"
    RESUME = "resume"
    SET = "set"


class ControlState(BaseModel):
    """제어 상태 응답 모델."""

    running: bool
    consume_poll_ms: float


class ControlSurface:
    """소비 루프 제어 구현체."""

    def __init__(self, worker: Worker, logger: Optional[Logger] = None) -> None:
        self._worker = worker
        self._logger = logger or create_default_logger("ControlSurface")

    def pause(self) -> ControlState:
        self._worker.pause()
        return self.state()

    def resume(self) -> ControlState:
        """실행을 재개하고, 루프가 멈춰 있었다면 다시 기동한다."""

        self._worker.resume()
        return self.state()

    def set_poll_interval(self, interval_ms: float) -> ControlState:
        self._worker.set_poll_interval(interval_ms)
        return self.state()

    def state(self) -> ControlState:
        return ControlState(
            running=self._worker.is_running,
            consume_poll_ms=self._worker.poll_interval_ms,
        )

    def apply(self, action: Optional[str], consume_ms: Optional[float] = None) -> ControlState:
        """문자열 액션과 폴링 주기를 적용한다. 알 수 없는 액션은 무시한다."""

        resolved = self._resolve_action(action)
        if resolved is ControlAction.PAUSE:
            self.pause()
        elif resolved is ControlAction.RESUME:
            self.resume()
        elif resolved is None and action:
            self._logger.warning(f"queue.control.unknown_action: action={action}")
        if consume_ms is not None:
            self.set_poll_interval(consume_ms)
        return self.state()

    def _resolve_action(self, action: Optional[str]) -> Optional[ControlAction]:
        normalized = (action or "").strip().lower()
        if not normalized:
            return None
        try:
            return ControlAction(normalized)
        except ValueError:
            return None
