"""
목적: 작업 큐 API 입력 파서를 제공한다.
설명: 쿼리 문자열/JSON 본문의 개수와 폴링 주기를 관대하게 해석한다. 잘못된 값은 기본값으로 대체한다.
디자인 패턴: 유틸리티 모듈
참조: src/work_queue/api/queue/routers/enqueue_items.py, src/work_queue/api/queue/routers/control_consumer.py
"""

from __future__ import annotations

import json
from typing import Any, Optional


def parse_count(raw: Any, default: int = 1) -> int:
    """적재 개수를 정수로 해석하고 1 이상으로 보정한다.

    숫자로 읽을 수 없으면 default를 쓴다. 소수는 버림한다.
    """

    if isinstance(raw, bool):
        value = default
    elif isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(float(str(raw).strip()))
        except (TypeError, ValueError, OverflowError):
            value = default
    return max(1, value)


def parse_count_body(body: bytes, default: int = 1) -> int:
    """JSON 본문 `{"count": N}`에서 적재 개수를 읽는다."""

    if not body:
        return parse_count(None, default)
    try:
        payload = json.loads(body)
    except (ValueError, UnicodeDecodeError):
        return parse_count(None, default)
    if not isinstance(payload, dict):
        return parse_count(None, default)
    return parse_count(payload.get("count"), default)


def parse_consume_ms(raw: Optional[str]) -> Optional[float]:
    """폴링 주기(ms)를 해석한다. 비었거나 숫자가 아니면 None."""

    if raw is None:
        return None
    text = str(raw).strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if value != value or value in (float("inf"), float("-inf")):
        return None
    return value
