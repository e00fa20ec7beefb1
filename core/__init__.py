# core/__init__.py
"""
core - AWS cmdlet 인프라

cmdlet 선언/바인딩/호출과 boto3 클라이언트, 설정, 예외를 포함하는 최상위 패키지입니다.

아키텍처:
    core/
    ├── cmdlet/         # cmdlet 선언, 바인딩, 요청 구성, 선택자, 확인, 어댑터, 레지스트리
    ├── client.py       # boto3 session/client 생성
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    # 설정 사용
    from core.config import settings, get_default_region
    region = get_default_region()  # "ap-northeast-2"

    # cmdlet 호출
    from core.client import create_session, get_client
    from core.cmdlet.registry import get_cmdlet
    from core.cmdlet import CmdletAdapter

    descriptor = get_cmdlet("Get-CGIPUserPool")
    client = get_client(create_session(region="us-east-1"), descriptor.service)
    output = CmdletAdapter(descriptor).invoke(client, positional=["us-east-1_ABC123"])

    # 예외 처리
    from core.exceptions import ConfigurationError, is_access_denied
    try:
        output = CmdletAdapter(descriptor).invoke(client, {})
    except ConfigurationError as e:
        print(e)  # 네트워크 호출 전에 실패
"""

from core import client, cmdlet, config, exceptions

__all__: list[str] = [
    # 서브패키지
    "cmdlet",
    # 모듈
    "client",
    "config",
    "exceptions",
]
