"""
목적: 작업 큐 라우터 공개 API를 제공한다.
설명: 큐 라우터 인스턴스를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/work_queue/api/queue/routers/router.py
"""

from work_queue.api.queue.routers.router import router

__all__ = ["router"]
