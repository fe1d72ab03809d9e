"""
목적: FastAPI 앱을 실행하기 위한 엔트리 포인트 제공
설명: 헬스체크/작업 큐 API를 묶고 앱 수명주기에 맞춰 소비 루프를 기동/종료한다.
디자인 패턴: 단일 책임 원칙(SRP), 팩토리 함수
참조: src/work_queue/api/queue/services/__init__.py
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from work_queue.shared.config import RuntimeEnvironmentLoader, load_settings

# 런타임 환경(local/dev/stg/prod)을 판별해 환경 파일을 로드한다.
RUNTIME_ENV = RuntimeEnvironmentLoader().load()

# NOTE:
# .env 로딩 이후에 라우터/서비스를 import해야, 서비스 생성 시점에 최신 환경 변수를 읽는다.
from work_queue.api.exit_signal import ExitSignalHook
from work_queue.api.health.routers import router as health_router
from work_queue.api.queue.routers import router as queue_router
from work_queue.api.queue.services import get_queue_service, shutdown_queue_service


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 시작 시 소비 루프를 기동하고, 종료 시 stopped 이벤트 송출 후 정리한다.

    종료 신호가 오면 연결 종료 대기보다 먼저 큐를 닫아 열린 SSE 응답이 끝나도록 한다.
    """
    exit_hook = ExitSignalHook(on_exit=shutdown_queue_service)
    exit_hook.install()
    get_queue_service().start()
    try:
        yield
    finally:
        exit_hook.uninstall()
        await exit_hook.wait()
        await shutdown_queue_service()


def create_app() -> FastAPI:
    """작업 큐 FastAPI 앱을 생성한다."""
    settings = load_settings()
    application = FastAPI(title="work-queue", lifespan=lifespan)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(health_router)
    application.include_router(queue_router)

    @application.get("/", include_in_schema=False)
    def redirect_to_docs():
        """기본 접속 시 문서 페이지로 리다이렉트한다."""
        return RedirectResponse(url="/docs")

    return application


app = create_app()
