"""
목적: 워커 모듈 공개 API를 제공한다.
설명: 워커 설정/상태 모델과 협력형 워커 구현체를 노출한다.
디자인 패턴: 퍼사드
참조: src/work_queue/shared/runtime/worker/model.py, src/work_queue/shared/runtime/worker/worker.py
"""

from work_queue.shared.runtime.worker.model import WorkerConfig, WorkerState
from work_queue.shared.runtime.worker.worker import FailureHandler, Handler, Worker

__all__ = ["WorkerConfig", "WorkerState", "Worker", "Handler", "FailureHandler"]
