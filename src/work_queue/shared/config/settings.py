"""
목적: 작업 큐 서비스 설정 모델을 제공한다.
설명: `WORK_QUEUE_*` 환경 변수를 ConfigLoader로 병합해 검증된 설정 객체를 만든다.
디자인 패턴: 데이터 전송 객체(DTO), 팩토리 함수
참조: src/work_queue/shared/config/loader.py, src/work_queue/core/queue/context.py
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from work_queue.shared.config.loader import ConfigLoader
from work_queue.shared.const import SharedConst
from work_queue.shared.logging import Logger, create_default_logger


class FailurePolicy(str, Enum):
    """재시도까지 실패한 작업 아이템의 처리 정책."""

    DROP = "drop"
    REQUEUE = "requeue"
    DEAD_LETTER = "dead_letter"


class WorkQueueSettings(BaseModel):
    """작업 큐 서비스 설정 모델이다.

    Args:
        capacity: 큐 최대 적재 개수.
        consume_poll_ms: 큐가 비었을 때 소비 루프의 재확인 주기(ms).
        process_base_ms: 아이템당 모의 처리 시간의 고정 부분(ms).
        process_jitter_ms: 모의 처리 시간에 더해지는 무작위 구간 폭(ms).
        max_retries: 처리 실패 시 재시도 횟수.
        failure_policy: 재시도 후에도 실패한 아이템의 처리 정책.
        dead_letter_limit: dead-letter 보관 최대 건수.
        subscriber_buffer_size: 구독자별 이벤트 버퍼 크기. 0이면 무제한.
        heartbeat_seconds: SSE 무응답 구간에 heartbeat를 보내는 주기(초).
        shutdown_timeout_seconds: 종료 시 처리 중인 아이템을 기다리는 최대 시간(초).
        autostart: 서비스 시작 시 소비 루프를 바로 기동할지 여부.
        cors_origins: 허용할 CORS origin 목록.
    """

    capacity: int = Field(default=20, ge=1)
    consume_poll_ms: float = Field(default=50, ge=1)
    process_base_ms: float = Field(default=50, ge=0)
    process_jitter_ms: float = Field(default=150, ge=0)
    max_retries: int = Field(default=0, ge=0)
    failure_policy: FailurePolicy = Field(default=FailurePolicy.DROP)
    dead_letter_limit: int = Field(default=100, ge=1)
    subscriber_buffer_size: int = Field(default=1000, ge=0)
    heartbeat_seconds: float = Field(default=15.0, gt=0)
    shutdown_timeout_seconds: float = Field(default=1.0, ge=0)
    autostart: bool = Field(default=True)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: Any) -> Any:
        # 환경 변수에서는 `a,b` 형태의 쉼표 구분 문자열도 허용한다.
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


def load_settings(
    overrides: Optional[Mapping[str, Any]] = None,
    loader: Optional[ConfigLoader] = None,
    logger: Optional[Logger] = None,
) -> WorkQueueSettings:
    """`WORK_QUEUE_*` 환경 변수와 오버라이드를 병합해 설정을 생성한다.

    loader에 미리 추가한 소스(dict/JSON/dotenv)는 환경 변수보다 먼저 적용된다.
    """

    logger = logger or create_default_logger("WorkQueueSettings")
    loader = loader or ConfigLoader(logger=logger)
    merged = loader.add_env(prefix=SharedConst.ENV_PREFIX).build(overrides=overrides)
    settings = WorkQueueSettings.model_validate(merged)
    sources = ", ".join(f"{key}={name}" for key, name in sorted(loader.provenance().items()))
    logger.debug(f"config.settings.loaded: capacity={settings.capacity}, sources=[{sources}]")
    return settings
