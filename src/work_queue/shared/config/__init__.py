"""
목적: 설정 모듈 공개 API를 제공한다.
설명: 설정 병합 로더, 런타임 환경 로더, 작업 큐 설정 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/work_queue/shared/config/loader.py, src/work_queue/shared/config/runtime_env_loader.py, src/work_queue/shared/config/settings.py
"""

from work_queue.shared.config.loader import ConfigLoader, parse_value
from work_queue.shared.config.runtime_env_loader import RuntimeEnvironmentLoader
from work_queue.shared.config.settings import FailurePolicy, WorkQueueSettings, load_settings

__all__ = [
    "ConfigLoader",
    "parse_value",
    "RuntimeEnvironmentLoader",
    "FailurePolicy",
    "WorkQueueSettings",
    "load_settings",
]
