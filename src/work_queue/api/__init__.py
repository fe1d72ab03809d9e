"""
목적: 작업 큐 HTTP API 패키지를 정의한다.
설명: FastAPI 앱 엔트리와 큐/헬스 라우터를 포함한다.
디자인 패턴: 패키지 모듈
참조: src/work_queue/api/main.py
"""
