"""
목적: pytest 공통 로깅 훅과 작업 큐 픽스처를 제공한다.
설명: 테스트 시작/종료와 결과를 로깅하고, 가상 시계 기반 결정적 큐 컨텍스트를 만든다.
디자인 패턴: 테스트 훅, 팩토리 픽스처
참조: pyproject.toml, src/work_queue/core/queue/context.py
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

import pytest
from dotenv import load_dotenv

from work_queue.core.queue import QueueContext, fixed_duration
from work_queue.shared.config import WorkQueueSettings
from work_queue.shared.runtime.clock import VirtualClock

_LOGGER = logging.getLogger("tests")


def _load_env_files() -> None:
    """프로젝트 루트 `.env`가 있으면 로딩한다."""

    root = Path(__file__).resolve().parents[1]
    env_path = root / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=False)


_load_env_files()


@pytest.fixture
def virtual_clock() -> VirtualClock:
    """0초에서 시작하는 가상 시계를 반환한다."""

    return VirtualClock()


@pytest.fixture
def make_settings() -> Callable[..., WorkQueueSettings]:
    """테스트 기본값(즉시 종료, 자동 기동 끔)을 깐 설정 팩토리를 반환한다."""

    def _factory(**overrides: Any) -> WorkQueueSettings:
        values: dict[str, Any] = {
            "shutdown_timeout_seconds": 0.0,
            "autostart": False,
        }
        values.update(overrides)
        return WorkQueueSettings(**values)

    return _factory


@pytest.fixture
def make_context(
    virtual_clock: VirtualClock,
    make_settings: Callable[..., WorkQueueSettings],
) -> Callable[..., QueueContext]:
    """가상 시계와 즉시 처리 정책을 쓰는 큐 컨텍스트 팩토리를 반환한다."""

    def _factory(duration_ms: float = 0.0, failure_injector=None, **overrides: Any) -> QueueContext:
        return QueueContext(
            settings=make_settings(**overrides),
            clock=virtual_clock,
            duration_policy=fixed_duration(duration_ms),
            failure_injector=failure_injector,
        )

    return _factory


def pytest_sessionstart(session) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 시작을 로깅한다."""

    _LOGGER.info("테스트 세션 시작")


def pytest_sessionfinish(session, exitstatus: int) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 종료를 로깅한다."""

    _LOGGER.info("테스트 세션 종료 (exitstatus=%s)", exitstatus)


def pytest_runtest_logstart(nodeid: str, location) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """각 테스트 시작을 로깅한다."""

    _LOGGER.info("테스트 시작: %s", nodeid)


def pytest_runtest_logreport(report) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 결과를 로깅한다."""

    if report.when != "call":
        return
    if report.passed:
        _LOGGER.info("테스트 완료: %s", report.nodeid)
        return
    if report.skipped:
        _LOGGER.warning("테스트 스킵: %s", report.nodeid)
        return
    _LOGGER.error("테스트 실패: %s", report.nodeid)
