"""
목적: 작업 큐 설정 소스 병합기를 제공한다.
설명: dict/JSON 파일/dotenv 파일/프로세스 환경 변수를 평탄한 설정 사전으로 병합하고, 키별 출처를 기록한다.
디자인 패턴: 빌더 패턴
참조: src/work_queue/shared/config/settings.py, src/work_queue/shared/const/__init__.py
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from dotenv import dotenv_values

from work_queue.shared.const import SharedConst
from work_queue.shared.logging import Logger, create_default_logger

PathLike = Union[str, Path]

_TRUE_WORDS = {"true", "yes", "on"}
_FALSE_WORDS = {"false", "no", "off"}
_NULL_WORDS = {"null", "none"}


def parse_value(raw: str) -> Any:
    """환경 변수 문자열을 bool/None/int/float/JSON 순으로 해석한다. 해석되지 않으면 원문을 반환한다."""

    text = raw.strip()
    lowered = text.lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    if lowered in _NULL_WORDS:
        return None
    for cast in (int, float):
        try:
            return cast(text)
        except ValueError:
            continue
    if text[:1] in {"{", "["}:
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return text
    return text


class ConfigLoader:
    """작업 큐 설정 소스 병합기.

    소스는 추가 순서대로 쌓이며 뒤 소스가 앞 소스를 덮어쓴다. 접두사가 붙은
    환경 변수 키는 접두사를 떼고 소문자로 바꿔 설정 필드명과 맞춘다.

    Args:
        logger: 주입 가능한 로거.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger or create_default_logger("ConfigLoader")
        self._sources: list[tuple[str, Dict[str, Any]]] = []
        self._provenance: Dict[str, str] = {}

    def add_dict(self, data: Optional[Mapping[str, Any]], name: str = "dict") -> "ConfigLoader":
        """이미 타입이 정해진 값 사전을 소스로 추가한다."""

        if data:
            self._sources.append((name, dict(data)))
        return self

    def add_json_file(self, path: PathLike, required: bool = False) -> "ConfigLoader":
        """최상위가 객체인 JSON 파일을 소스로 추가한다."""

        file_path = Path(path)
        if not file_path.exists():
            if required:
                raise FileNotFoundError(str(file_path))
            self._logger.warning(f"config.loader.skip: source=json, path={file_path}")
            return self
        try:
            payload = json.loads(file_path.read_text(encoding=SharedConst.DEFAULT_ENCODING))
        except json.JSONDecodeError as exc:
            raise ValueError(f"JSON 설정 파일 파싱에 실패했습니다: {file_path}") from exc
        if not isinstance(payload, dict):
            raise ValueError(f"JSON 설정 파일은 최상위가 객체여야 합니다: {file_path}")
        self._sources.append((f"json:{file_path.name}", payload))
        return self

    def add_env_file(
        self,
        path: PathLike,
        prefix: str = SharedConst.ENV_PREFIX,
        required: bool = False,
    ) -> "ConfigLoader":
        """dotenv 파일을 프로세스 환경에 반영하지 않고 소스로 추가한다."""

        file_path = Path(path)
        if not file_path.exists():
            if required:
                raise FileNotFoundError(str(file_path))
            self._logger.debug(f"config.loader.skip: source=dotenv, path={file_path}")
            return self
        values = {key: value for key, value in dotenv_values(file_path).items() if value is not None}
        collected = self._collect_prefixed(values, prefix)
        if collected:
            self._sources.append((f"dotenv:{file_path.name}", collected))
        return self

    def add_env(
        self,
        prefix: str = SharedConst.ENV_PREFIX,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "ConfigLoader":
        """접두사가 일치하는 환경 변수를 소스로 추가한다."""

        collected = self._collect_prefixed(os.environ if environ is None else environ, prefix)
        if collected:
            self._sources.append(("env", collected))
        return self

    def build(self, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """수집된 소스를 병합해 반환하고 키별 출처를 갱신한다."""

        merged: Dict[str, Any] = {}
        provenance: Dict[str, str] = {}
        layers = list(self._sources)
        if overrides:
            layers.append(("overrides", dict(overrides)))
        for name, values in layers:
            for key, value in values.items():
                merged[key] = value
                provenance[key] = name
        self._provenance = provenance
        return merged

    def provenance(self) -> Dict[str, str]:
        """마지막 build 결과의 키별 출처를 반환한다."""

        return dict(self._provenance)

    def _collect_prefixed(self, values: Mapping[str, str], prefix: str) -> Dict[str, Any]:
        collected: Dict[str, Any] = {}
        for key, raw in values.items():
            if prefix and not key.startswith(prefix):
                continue
            field = key[len(prefix) :].lower()
            if field:
                collected[field] = parse_value(raw)
        return collected
