"""
목적: 런타임 환경별 `.env` 로딩을 제공한다.
설명: 작업 큐 실행 환경(local/dev/stg/prod)을 판별하고, 루트 `.env`와 패키지 리소스의 환경 파일을 프로세스 환경에 반영한다.
디자인 패턴: 전략 패턴
참조: src/work_queue/shared/config/settings.py, src/work_queue/api/main.py
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from work_queue.shared.logging import Logger, create_default_logger


class RuntimeEnvironmentLoader:
    """런타임 환경별 `.env` 로더이다.

    동작 순서:
    1. 프로젝트 루트의 `.env`가 있으면 로드한다.
    2. `WORK_QUEUE_ENV`(또는 `ENV`, `APP_ENV`) 값으로 환경을 판별한다. 값이 없으면 `local`이다.
    3. `dev/stg/prod`이면 `src/work_queue/resources/<env>/.env`를 추가로 로드한다.
       이미 설정된 프로세스 환경 변수는 덮어쓰지 않는다.
    """

    SUPPORTED_ENVS = ("local", "dev", "stg", "prod")
    _ENV_ALIASES = {
        "development": "dev",
        "staging": "stg",
        "production": "prod",
    }
    _DEFAULT_ENV_KEYS = ("WORK_QUEUE_ENV", "ENV", "APP_ENV")

    def __init__(
        self,
        logger: Optional[Logger] = None,
        project_root: Optional[Path] = None,
        resources_root: Optional[Path] = None,
        env_key_candidates: Optional[Sequence[str]] = None,
    ) -> None:
        package_root = Path(__file__).resolve().parents[2]
        self._project_root = Path(project_root or package_root.parents[1])
        self._resources_root = Path(resources_root or package_root / "resources")
        self._env_keys = tuple(env_key_candidates or self._DEFAULT_ENV_KEYS)
        self._logger = logger or create_default_logger("RuntimeEnvironmentLoader")
        self._loaded_files: list[Path] = []

    @property
    def project_root(self) -> Path:
        return self._project_root

    @property
    def resources_root(self) -> Path:
        return self._resources_root

    @property
    def loaded_files(self) -> list[Path]:
        """마지막 load 호출에서 실제로 읽은 env 파일 목록을 반환한다."""

        return list(self._loaded_files)

    def resource_env_path(self, runtime_env: str) -> Path:
        """환경별 리소스 env 파일 경로를 반환한다."""

        return self._resources_root / runtime_env / ".env"

    def load(self, override_root_env: bool = False) -> str:
        """런타임 환경을 판별하고 관련 `.env`를 로드한다.

        Args:
            override_root_env: 루트 `.env`가 기존 환경 변수를 덮어쓸지 여부.

        Returns:
            판별된 런타임 환경 문자열(`local/dev/stg/prod`).

        Raises:
            ValueError: 지원하지 않는 환경 값인 경우.
            FileNotFoundError: dev/stg/prod 리소스 env 파일이 없는 경우.
        """

        self._loaded_files = []
        root_env = self._project_root / ".env"
        if root_env.is_file():
            load_dotenv(dotenv_path=root_env, override=override_root_env)
            self._loaded_files.append(root_env)

        runtime_env = self.resolve()
        if runtime_env != "local":
            resource_env = self.resource_env_path(runtime_env)
            if not resource_env.is_file():
                raise FileNotFoundError(f"환경 파일을 찾을 수 없습니다: {resource_env}")
            load_dotenv(dotenv_path=resource_env, override=False)
            self._loaded_files.append(resource_env)

        files = ", ".join(str(path) for path in self._loaded_files) or "-"
        self._logger.info(f"config.env.loaded: env={runtime_env}, files={files}")
        return runtime_env

    def resolve(self) -> str:
        """환경 키 후보에서 첫 번째로 값이 있는 항목을 정규화해 반환한다."""

        raw = next((os.environ[key] for key in self._env_keys if os.environ.get(key, "").strip()), None)
        if raw is None:
            return "local"
        normalized = raw.strip().lower()
        normalized = self._ENV_ALIASES.get(normalized, normalized)
        if normalized not in self.SUPPORTED_ENVS:
            raise ValueError(
                f"지원하지 않는 ENV 값입니다: {raw}. 허용값: {', '.join(self.SUPPORTED_ENVS)}"
            )
        return normalized
