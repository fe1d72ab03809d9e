"""
목적: 공통 상수를 제공한다.
설명: 설정 로딩과 로깅에서 함께 쓰는 기본값을 한곳에 모은다.
디자인 패턴: 상수 집합
참조: src/work_queue/shared/config/loader.py, src/work_queue/shared/config/settings.py
"""


class SharedConst:
    """공통 상수 집합이다.

    Attributes:
        DEFAULT_ENCODING: 기본 파일 인코딩.
        ENV_PREFIX: 작업 큐 설정 환경 변수 접두사.
        DEFAULT_LOG_RECORD_LIMIT: 인메모리 로그 저장소 최대 보관 건수.
    """

    DEFAULT_ENCODING = "utf-8"
    ENV_PREFIX = "WORK_QUEUE_"
    DEFAULT_LOG_RECORD_LIMIT = 5000


__all__ = ["SharedConst"]
