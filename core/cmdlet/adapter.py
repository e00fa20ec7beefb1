"""
core/cmdlet/adapter.py - cmdlet 호출 어댑터

OperationDescriptor 하나로 파라미터 바인딩 → 요청 구성 → boto3 호출 1회 →
응답 선택까지 수행하는 범용 어댑터입니다.

실행 순서:
    1. select/pass-thru 해석 (잘못되면 InvalidSelectError)
    2. 파라미터 바인딩 + 훅 + 필수 검증 (ConfigurationError)
    3. 확인 프롬프트 (거절 시 OperationCancelledError)
    4. 요청 구성 (중첩 그룹은 멤버가 있을 때만 포함)
    5. client.<operation>(**request) 1회 호출
    6. 응답 선택

1~4 단계의 실패는 네트워크 호출 전에 발생합니다.
EndpointConnectionError는 NameResolutionError로 래핑되고,
그 외 예외(ClientError 등)는 그대로 전파됩니다. 재시도는 botocore 설정에 맡깁니다.

Example:
    from core.client import create_session, get_client
    from core.cmdlet import CmdletAdapter
    from cmdlets.osis import NEW_OSIS_PIPELINE

    client = get_client(create_session(region="us-east-1"), "osis")
    output = CmdletAdapter(NEW_OSIS_PIPELINE).invoke(
        client,
        {"PipelineName": "logs", "MinUnit": 1, "MaxUnit": 4, "PipelineConfigurationBody": body},
        force=True,
    )
    print(output.pipeline_output)  # response["Pipeline"]
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from botocore.exceptions import EndpointConnectionError

from core.client import describe_endpoint
from core.exceptions import NameResolutionError, OperationCancelledError

from .confirm import Confirmer, confirm_should_proceed
from .context import BoundContext, PostHook, PreHook, bind_arguments
from .request import build_request
from .select import Selector, resolve_selector
from .types import OperationDescriptor

logger = logging.getLogger(__name__)


@dataclass
class CmdletOutput:
    """cmdlet 실행 결과

    Attributes:
        pipeline_output: 선택자가 고른 출력 값
        service_response: 수정되지 않은 boto3 응답
        request: 실제로 전송한 요청 인자
        context: 바인딩된 파라미터
    """

    pipeline_output: Any
    service_response: Any
    request: dict[str, Any] = field(default_factory=dict)
    context: BoundContext | None = None


class CmdletAdapter:
    """범용 cmdlet 어댑터

    상태를 갖지 않으며 호출마다 컨텍스트와 요청을 새로 만듭니다.
    클라이언트는 invoke()에 명시적으로 전달합니다.

    Args:
        descriptor: cmdlet 선언
        pre_hook: 바인딩 전 원시 인자 수정 훅
        post_hook: 바인딩 후 컨텍스트 교체 훅
        confirmer: 확인 함수 (기본: questionary 프롬프트)
        confirm_preference: 확인 임계값 (기본: settings)
    """

    def __init__(
        self,
        descriptor: OperationDescriptor,
        pre_hook: PreHook | None = None,
        post_hook: PostHook | None = None,
        confirmer: Confirmer | None = None,
        confirm_preference: str | None = None,
    ):
        self.descriptor = descriptor
        self.pre_hook = pre_hook
        self.post_hook = post_hook
        self.confirmer = confirmer
        self.confirm_preference = confirm_preference

    def bind(self, arguments: Mapping[str, Any] | None = None, positional: Sequence[Any] = ()) -> BoundContext:
        """인자 바인딩 (훅 적용 + 필수 검증)"""
        return bind_arguments(
            self.descriptor,
            arguments,
            positional,
            pre_hook=self.pre_hook,
            post_hook=self.post_hook,
        )

    def build_request(self, context: BoundContext) -> dict[str, Any]:
        return build_request(self.descriptor, context)

    def invoke(
        self,
        client: Any,
        arguments: Mapping[str, Any] | None = None,
        *,
        positional: Sequence[Any] = (),
        select: str | Selector | None = None,
        pass_thru: bool = False,
        force: bool = False,
    ) -> CmdletOutput:
        """cmdlet 실행

        Args:
            client: boto3 client (descriptor.service 용)
            arguments: 파라미터 이름 → 값
            positional: 위치 인자
            select: 응답 선택 표현식 또는 함수
            pass_thru: deprecated, select="^<pass_thru>"와 동일
            force: 확인 프롬프트 생략

        Returns:
            CmdletOutput

        Raises:
            ConfigurationError: 호출 전 검증 실패
            OperationCancelledError: 확인 거절
            NameResolutionError: 엔드포인트 이름 해석 실패
        """
        selector = resolve_selector(self.descriptor, select, pass_thru)
        context = self.bind(arguments, positional)

        if not confirm_should_proceed(
            self.descriptor,
            context,
            force=force,
            confirmer=self.confirmer,
            preference=self.confirm_preference,
        ):
            raise OperationCancelledError(self.descriptor.name)

        request = self.build_request(context)
        response = self._call(client, request)

        return CmdletOutput(
            pipeline_output=selector(response, context),
            service_response=response,
            request=request,
            context=context,
        )

    def _call(self, client: Any, request: dict[str, Any]) -> Any:
        """boto3 작업 1회 호출"""
        descriptor = self.descriptor
        region, endpoint_url = describe_endpoint(client)
        logger.debug(
            f"{descriptor.service_display or descriptor.service} {descriptor.api_name} 호출 "
            f"(region={region}, endpoint={endpoint_url})"
        )

        operation = getattr(client, descriptor.operation)
        try:
            return operation(**request)
        except EndpointConnectionError as e:
            raise NameResolutionError(
                service=descriptor.service,
                operation=descriptor.api_name,
                region=region,
                endpoint_url=endpoint_url or e.kwargs.get("endpoint_url"),
                cause=e,
            ) from e


def invoke(
    descriptor: OperationDescriptor,
    client: Any,
    arguments: Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> CmdletOutput:
    """CmdletAdapter(descriptor).invoke() 단축 함수"""
    return CmdletAdapter(descriptor).invoke(client, arguments, **kwargs)
