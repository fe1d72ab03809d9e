"""
목적: 도메인 코어 패키지를 정의한다.
설명: 작업 큐 도메인 조립(이벤트, 생산자, 제어, 컨텍스트)을 하위 패키지로 제공한다.
디자인 패턴: 패키지 루트
참조: src/work_queue/core/queue
"""
