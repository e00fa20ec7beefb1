"""
core/client.py - boto3 session/client 생성 헬퍼

cmdlet 호출에 주입할 boto3 session과 client를 명시적으로 생성합니다.
전역 세션이나 공유 자격 증명은 사용하지 않습니다.

주요 구성 요소:
- create_session: 프로파일/리전을 지정한 boto3 Session 생성
- get_client: retry + 타임아웃 + 연결 풀이 설정된 boto3 client 생성
- describe_endpoint: 로깅용 클라이언트 리전/엔드포인트 조회

Example:
    from core.client import create_session, get_client

    session = create_session(profile="dev", region="ap-northeast-2")
    osis = get_client(session, "osis")
    output = adapter.invoke(osis, {"PipelineName": "logs"})
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, cast

from core.config import get_default_region, settings

if TYPE_CHECKING:
    import boto3

# Retry mode 타입 (botocore TypedDict와 호환)
RetryMode = Literal["legacy", "standard", "adaptive"]


def create_session(profile: str | None = None, region: str | None = None) -> boto3.Session:
    """boto3 Session 생성

    Args:
        profile: AWS 프로파일 이름 (None이면 boto3 기본 체인)
        region: 리전 (None이면 get_default_region())

    Returns:
        boto3 Session
    """
    import boto3

    return boto3.Session(profile_name=profile, region_name=region or get_default_region())


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    max_attempts: int | None = None,
    retry_mode: RetryMode | None = None,
    connect_timeout: int | None = None,
    read_timeout: int | None = None,
    **kwargs: Any,
) -> Any:
    """Retry가 적용된 boto3 client 생성

    재시도는 botocore가 수행합니다. cmdlet 어댑터는 호출을 한 번만 보냅니다.

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (osis, appsync, cognito-idp 등)
        region_name: 리전 (None이면 세션 기본값)
        max_attempts: 최대 시도 횟수 (기본: settings.API_MAX_ATTEMPTS)
        retry_mode: 재시도 모드 (기본: settings.API_RETRY_MODE)
        connect_timeout: 연결 타임아웃 (초)
        read_timeout: 읽기 타임아웃 (초)
        **kwargs: session.client()에 전달할 추가 인자 (endpoint_url 등)

    Returns:
        boto3 client
    """
    from botocore.config import Config

    config = Config(
        retries={
            "max_attempts": max_attempts or settings.API_MAX_ATTEMPTS,
            "mode": retry_mode or settings.API_RETRY_MODE,
        },  # pyright: ignore[reportArgumentType]
        connect_timeout=connect_timeout or settings.API_CONNECT_TIMEOUT,
        read_timeout=read_timeout or settings.API_READ_TIMEOUT,
        max_pool_connections=settings.API_MAX_POOL_CONNECTIONS,
    )

    # 기존 config가 있으면 병합
    if "config" in kwargs:
        existing = kwargs.pop("config")
        config = config.merge(existing)

    # cast to Any to bypass boto3-stubs Literal type requirements
    return session.client(  # pyright: ignore[reportCallIssue]
        cast(Any, service_name),
        region_name=region_name,
        config=config,
        **kwargs,
    )


def describe_endpoint(client: Any) -> tuple[str | None, str | None]:
    """클라이언트의 (리전, 엔드포인트 URL) 반환

    MagicMock 등 meta가 없는 객체도 허용합니다.
    """
    meta = getattr(client, "meta", None)
    region = getattr(meta, "region_name", None)
    endpoint_url = getattr(meta, "endpoint_url", None)
    return (
        region if isinstance(region, str) else None,
        endpoint_url if isinstance(endpoint_url, str) else None,
    )
