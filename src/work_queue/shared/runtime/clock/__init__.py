"""
목적: 시계 모듈 공개 API를 제공한다.
설명: 시계 포트와 실제/가상 시계 구현을 노출한다.
디자인 패턴: 퍼사드
참조: src/work_queue/shared/runtime/clock/clock.py, src/work_queue/shared/runtime/clock/virtual_clock.py
"""

from work_queue.shared.runtime.clock.clock import Clock, SystemClock
from work_queue.shared.runtime.clock.virtual_clock import VirtualClock

__all__ = ["Clock", "SystemClock", "VirtualClock"]
