"""
목적: 헬스체크 라우터 공개 API를 제공한다.
설명: 헬스 라우터 인스턴스를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/work_queue/api/health/routers/server.py
"""

from work_queue.api.health.routers.server import router

__all__ = ["router"]
