"""
목적: 구독자 이벤트 버퍼 모델을 정의한다.
설명: 전송 결과 열거형, 채널 설정, 채널 종료 신호 예외를 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/work_queue/shared/runtime/buffer/subscriber_channel.py, src/work_queue/shared/runtime/buffer/fanout.py
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class SendResult(str, Enum):
    """구독자 채널 전송 결과."""

    DELIVERED = "DELIVERED"
    CLOSED = "CLOSED"
    OVERFLOW = "OVERFLOW"


class ChannelConfig(BaseModel):
    """구독자 채널 설정 모델이다.

    Args:
        max_size: 채널 버퍼 최대 크기. 0이면 무제한.
    """

    max_size: int = Field(default=0, ge=0)


class ChannelClosed(Exception):
    """닫힌 채널에서 더 읽을 이벤트가 없음을 알린다."""
