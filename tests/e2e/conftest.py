"""
목적: 작업 큐 E2E 테스트용 서버 픽스처를 제공한다.
설명: pytest 실행 중 uvicorn 서버를 실제 프로세스로 기동하고, 테스트가 끝나면 남은 프로세스를 정리한다.
디자인 패턴: 테스트 픽스처 패턴
참조: src/work_queue/api/main.py
"""

from __future__ import annotations

import os
import socket
import subprocess
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

import httpx
import pytest


@dataclass(frozen=True)
class QueueServerContext:
    """E2E 서버 실행 컨텍스트."""

    base_url: str
    process: subprocess.Popen


def _find_free_port() -> int:
    """사용 가능한 로컬 포트를 반환한다."""

    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return int(sock.getsockname()[1])


def _wait_for_server_ready(
    process: subprocess.Popen,
    base_url: str,
    timeout_seconds: float = 20.0,
) -> None:
    """서버 헬스체크 응답이 가능할 때까지 대기한다."""

    deadline = time.monotonic() + timeout_seconds
    last_error: Exception | None = None
    while time.monotonic() < deadline:
        if process.poll() is not None:
            stdout, stderr = process.communicate(timeout=1)
            raise RuntimeError(
                "E2E 서버가 초기화 전에 종료되었습니다.\n"
                f"stdout:\n{stdout[-500:]}\n"
                f"stderr:\n{stderr[-500:]}"
            )
        try:
            response = httpx.get(f"{base_url}/health", timeout=1.0)
            if response.status_code == 200:
                return
        except Exception as error:  # noqa: BLE001 - 재시도 루프 유지
            last_error = error
        time.sleep(0.2)
    raise RuntimeError(f"E2E 서버 기동 대기 타임아웃: {last_error}")


@pytest.fixture
def queue_server_context() -> Iterator[QueueServerContext]:
    """작업 큐 API 서버를 실제 프로세스로 띄운 뒤 컨텍스트를 반환한다."""

    if sys.platform == "win32":
        pytest.skip("SIGINT 전달 E2E 테스트는 POSIX 환경에서만 실행합니다.")

    root = Path(__file__).resolve().parents[2]
    port = _find_free_port()
    base_url = f"http://127.0.0.1:{port}"

    command = [
        sys.executable,
        "-m",
        "uvicorn",
        "work_queue.api.main:app",
        "--host",
        "127.0.0.1",
        "--port",
        str(port),
    ]
    env = {key: value for key, value in os.environ.items() if not key.startswith("WORK_QUEUE_")}
    for key in ("ENV", "APP_ENV"):
        env.pop(key, None)
    env["WORK_QUEUE_PROCESS_BASE_MS"] = "5"
    env["WORK_QUEUE_PROCESS_JITTER_MS"] = "0"
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(root / "src"), env.get("PYTHONPATH")]))
    env["PYTHONUNBUFFERED"] = "1"

    process = subprocess.Popen(
        command,
        cwd=str(root),
        env=env,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )
    try:
        _wait_for_server_ready(process=process, base_url=base_url)
        yield QueueServerContext(base_url=base_url, process=process)
    finally:
        if process.poll() is None:
            process.kill()
            process.wait(timeout=5)
        process.communicate(timeout=1)
