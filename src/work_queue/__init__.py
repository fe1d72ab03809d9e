"""
목적: work_queue 패키지 루트를 정의한다.
설명: 유계 작업 큐, 협력형 소비 루프, 실시간 이벤트 팬아웃 데모 서비스를 묶는다.
디자인 패턴: 패키지 루트
참조: src/work_queue/core/queue, src/work_queue/api/main.py
"""

__version__ = "0.1.0"
