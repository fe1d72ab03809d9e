"""
목적: 작업 큐 서비스 실행/조작 CLI를 제공한다.
설명: serve로 API 서버를 기동하고, enqueue/health로 실행 중인 서버를 호출한다.
디자인 패턴: 커맨드 패턴
참조: src/work_queue/api/main.py, src/work_queue/api/const/queue.py
"""

from __future__ import annotations

import argparse
import json
from typing import Optional, Sequence

import httpx
import uvicorn

from work_queue.api.const import HEALTH_API_PATH, QUEUE_API_ENQUEUE_PATH, QUEUE_API_PREFIX

DEFAULT_BASE_URL = "http://127.0.0.1:8000"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="work-queue", description="인메모리 작업 큐 서비스")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="API 서버 실행")
    serve.add_argument("--host", default="127.0.0.1", help="바인드 호스트")
    serve.add_argument("--port", type=int, default=8000, help="바인드 포트")

    enqueue = subparsers.add_parser("enqueue", help="작업 적재 요청")
    enqueue.add_argument("--count", type=int, default=1, help="적재할 아이템 개수")
    enqueue.add_argument("--base-url", default=DEFAULT_BASE_URL, help="API 서버 주소")

    health = subparsers.add_parser("health", help="상태 조회")
    health.add_argument("--base-url", default=DEFAULT_BASE_URL, help="API 서버 주소")
    return parser.parse_args(argv)


def _print_json(payload: dict) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def run_enqueue(base_url: str, count: int, client: Optional[httpx.Client] = None) -> dict:
    """적재 엔드포인트를 호출하고 응답 본문을 반환한다."""

    owned = client is None
    client = client or httpx.Client(base_url=base_url, timeout=10.0)
    try:
        response = client.post(f"{QUEUE_API_PREFIX}{QUEUE_API_ENQUEUE_PATH}", json={"count": count})
        response.raise_for_status()
        return response.json()
    finally:
        if owned:
            client.close()


def run_health(base_url: str, client: Optional[httpx.Client] = None) -> dict:
    """헬스 엔드포인트를 호출하고 응답 본문을 반환한다."""

    owned = client is None
    client = client or httpx.Client(base_url=base_url, timeout=10.0)
    try:
        response = client.get(HEALTH_API_PATH)
        response.raise_for_status()
        return response.json()
    finally:
        if owned:
            client.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    if args.command == "serve":
        uvicorn.run("work_queue.api.main:app", host=args.host, port=args.port)
        return 0
    try:
        if args.command == "enqueue":
            _print_json(run_enqueue(args.base_url, args.count))
        else:
            _print_json(run_health(args.base_url))
    except httpx.HTTPError as error:
        print(f"[오류][work-queue] 요청 실패: {error}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
