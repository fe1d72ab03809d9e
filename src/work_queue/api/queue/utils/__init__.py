"""
목적: 작업 큐 API 유틸 공개 API를 제공한다.
설명: 입력 파서를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/work_queue/api/queue/utils/parsers.py
"""

from work_queue.api.queue.utils.parsers import parse_consume_ms, parse_count, parse_count_body

__all__ = ["parse_count", "parse_count_body", "parse_consume_ms"]
