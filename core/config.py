"""
core/config.py - 중앙 설정 관리

기본 리전, 확인 프롬프트 임계값, botocore 클라이언트 설정 등
애플리케이션 전역 설정을 한 곳에서 관리합니다.

환경 변수로 기본값을 덮어쓸 수 있습니다:
    AWC_DEFAULT_REGION / AWS_DEFAULT_REGION  기본 리전
    AWS_PROFILE                              기본 프로파일
    AWC_CONFIRM_PREFERENCE                   확인 프롬프트 임계값 (none/low/medium/high)
    AWC_MAX_ATTEMPTS                         botocore 최대 시도 횟수
    AWC_CONNECT_TIMEOUT / AWC_READ_TIMEOUT   타임아웃 (초)
    AWC_LANG                                 CLI 메시지 언어 (ko/en)

Usage:
    from core.config import settings, get_default_region

    region = get_default_region()
    print(settings.CONFIRM_PREFERENCE)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

VALID_CONFIRM_PREFERENCES = ("none", "low", "medium", "high")


def get_env_bool(name: str, default: bool = False) -> bool:
    """환경 변수를 bool로 읽기

    Args:
        name: 환경 변수 이름
        default: 값이 없을 때 기본값

    Returns:
        "1", "true", "yes", "on" (대소문자 무관)이면 True
    """
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_env_int(name: str, default: int) -> int:
    """환경 변수를 int로 읽기 (변환 실패 시 기본값)"""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"환경 변수 {name} 값이 정수가 아닙니다: {value!r} (기본값 {default} 사용)")
        return default


def _get_confirm_preference() -> str:
    value = os.environ.get("AWC_CONFIRM_PREFERENCE", "high").strip().lower()
    if value not in VALID_CONFIRM_PREFERENCES:
        logger.warning(f"AWC_CONFIRM_PREFERENCE 값이 올바르지 않습니다: {value!r} (high 사용)")
        return "high"
    return value


@dataclass(frozen=True)
class Settings:
    """애플리케이션 설정 (불변)"""

    DEFAULT_REGION: str = "ap-northeast-2"

    # 확인 프롬프트: 작업 영향도가 이 값 이상이면 --force 없이 확인을 요청
    CONFIRM_PREFERENCE: str = "high"

    # botocore 클라이언트
    API_MAX_ATTEMPTS: int = 3
    API_RETRY_MODE: str = "standard"
    API_CONNECT_TIMEOUT: int = 10
    API_READ_TIMEOUT: int = 60
    API_MAX_POOL_CONNECTIONS: int = 10

    # CLI
    DEFAULT_LANG: str = "ko"
    DEFAULT_OUTPUT_FORMAT: str = "console"


def _load_settings() -> Settings:
    return Settings(
        CONFIRM_PREFERENCE=_get_confirm_preference(),
        API_MAX_ATTEMPTS=get_env_int("AWC_MAX_ATTEMPTS", 3),
        API_CONNECT_TIMEOUT=get_env_int("AWC_CONNECT_TIMEOUT", 10),
        API_READ_TIMEOUT=get_env_int("AWC_READ_TIMEOUT", 60),
        DEFAULT_LANG=os.environ.get("AWC_LANG", "ko"),
    )


settings = _load_settings()


@dataclass(frozen=True)
class LogConfig:
    """로깅 설정"""

    level: int = logging.WARNING
    verbose_level: int = logging.DEBUG
    format: str = "%(asctime)s - %(levelname)s - %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
    # 도구 출력에 섞이지 않도록 WARNING으로 고정할 botocore 로거
    quiet_loggers: tuple[str, ...] = (
        "botocore.httpchecksum",
        "botocore.credentials",
        "botocore.loaders",
        "botocore.session",
        "urllib3.connectionpool",
    )


def get_project_root() -> Path:
    """프로젝트 루트 디렉토리 반환"""
    return Path(__file__).resolve().parent.parent


def get_version() -> str:
    """version.txt에서 버전 문자열 읽기"""
    version_file = get_project_root() / "version.txt"
    try:
        return version_file.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        return "0.0.0"


def get_default_region() -> str:
    """기본 리전 반환

    AWC_DEFAULT_REGION > AWS_DEFAULT_REGION > AWS_REGION > settings.DEFAULT_REGION
    """
    for name in ("AWC_DEFAULT_REGION", "AWS_DEFAULT_REGION", "AWS_REGION"):
        value = os.environ.get(name)
        if value:
            return value
    return settings.DEFAULT_REGION


def get_default_profile() -> str | None:
    """기본 프로파일 반환 (AWS_PROFILE, 없으면 None)"""
    return os.environ.get("AWS_PROFILE") or None
