"""
목적: 작업 큐 API 패키지를 정의한다.
설명: 큐 라우터, 서비스, DTO, 파서를 묶는다.
디자인 패턴: 패키지 모듈
참조: src/work_queue/api/queue/routers/router.py
"""
