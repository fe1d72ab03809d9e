"""
목적: 공통 모듈 패키지를 정의한다.
설명: 로깅/예외/설정/런타임 구성 요소를 하위 패키지로 제공한다.
디자인 패턴: 패키지 루트
참조: src/work_queue/shared/runtime, src/work_queue/shared/logging
"""
