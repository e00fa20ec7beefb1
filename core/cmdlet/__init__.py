"""
core/cmdlet - 범용 cmdlet 어댑터

AWS API 작업 하나를 셸 명령으로 감싸는 공통 파이프라인입니다.
작업별 클래스를 복제하지 않고, OperationDescriptor 선언으로 cmdlet을 정의합니다.

주요 구성 요소:
- OperationDescriptor / ParameterSpec: cmdlet 선언
- bind_arguments / BoundContext: 파라미터 바인딩 (불변 컨텍스트)
- build_request: 요청 구성 (중첩 그룹 존재 규칙)
- resolve_selector: 응답 선택자
- CmdletAdapter: 바인딩 → 확인 → 요청 → 호출 1회 → 선택
- registry: cmdlets/ 패키지 자동 발견

Example:
    from core.cmdlet import CmdletAdapter
    from core.cmdlet.registry import get_cmdlet

    adapter = CmdletAdapter(get_cmdlet("Get-CGIPUserPool"))
    output = adapter.invoke(cognito_client, positional=["ap-northeast-2_abc123"])
    print(output.pipeline_output)
"""

from .adapter import CmdletAdapter, CmdletOutput, invoke
from .context import BoundContext, bind_arguments
from .request import build_request
from .select import Selector, resolve_selector
from .types import SELECT_ALL, ConfirmImpact, OperationDescriptor, ParameterSpec, ParameterType

__all__: list[str] = [
    # Types
    "OperationDescriptor",
    "ParameterSpec",
    "ParameterType",
    "ConfirmImpact",
    "SELECT_ALL",
    # Pipeline
    "BoundContext",
    "bind_arguments",
    "build_request",
    "Selector",
    "resolve_selector",
    # Adapter
    "CmdletAdapter",
    "CmdletOutput",
    "invoke",
]
