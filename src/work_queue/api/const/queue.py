"""
목적: 작업 큐 API 라우팅 상수를 정의한다.
설명: 라우터 prefix, 태그, 엔드포인트 경로를 한 곳에서 관리한다.
디자인 패턴: 상수 모듈
참조: src/work_queue/api/queue/routers/router.py
"""

QUEUE_API_PREFIX = "/queue"
QUEUE_API_TAG = "queue"
QUEUE_API_ENQUEUE_PATH = "/enqueue"
QUEUE_API_CONTROL_PATH = "/control"
QUEUE_API_EVENTS_PATH = "/events"
QUEUE_API_DEAD_LETTERS_PATH = "/dead-letters"
HEALTH_API_PATH = "/health"
