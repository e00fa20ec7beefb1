"""
core/cmdlet/select.py - 응답 선택자

cmdlet 출력으로 응답의 어느 부분을 돌려줄지 결정합니다.
문자열 표현식은 호출 전에 타입이 있는 함수로 컴파일되며,
알려진 응답 필드에 대해 검증됩니다.

select 표현식:
    "*"             전체 응답 (수정 없이)
    "Pipeline"      응답 필드 (대소문자 무관, 점 경로 허용: "Pipeline.PipelineArn")
    "^PipelineName" 입력 파라미터 값 되돌려주기
    callable        (response, context) -> Any

--pass-thru는 deprecated이며 "^<pass_thru 파라미터>"와 같습니다.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable, Mapping
from typing import Any

from core.exceptions import InvalidSelectError

from .context import BoundContext
from .types import SELECT_ALL, OperationDescriptor

logger = logging.getLogger(__name__)

Selector = Callable[[Mapping[str, Any], BoundContext], Any]


def whole_response(response: Mapping[str, Any], context: BoundContext) -> Any:
    """전체 응답 반환"""
    return response


def no_output(response: Mapping[str, Any], context: BoundContext) -> Any:
    """출력 없음"""
    return None


def field_selector(path: str) -> Selector:
    """응답 필드 선택자 생성 ("A.B" 점 경로 허용)"""
    keys = path.split(".")

    def select(response: Mapping[str, Any], context: BoundContext) -> Any:
        node: Any = response
        for key in keys:
            if not isinstance(node, Mapping):
                return None
            node = node.get(key)
        return node

    select.__name__ = f"select_{path}"
    return select


def parameter_selector(name: str) -> Selector:
    """입력 파라미터 값 선택자 생성"""

    def select(response: Mapping[str, Any], context: BoundContext) -> Any:
        return context.get(name)

    select.__name__ = f"select_param_{name}"
    return select


def default_selector(descriptor: OperationDescriptor) -> Selector:
    """cmdlet 기본 선택자"""
    if descriptor.default_select is None:
        return no_output
    if descriptor.default_select == SELECT_ALL:
        return whole_response
    return field_selector(descriptor.default_select)


def compile_select(descriptor: OperationDescriptor, expression: str) -> Selector:
    """select 문자열을 선택자로 컴파일

    Raises:
        InvalidSelectError: 빈 값, 알 수 없는 파라미터, 알 수 없는 응답 필드
    """
    text = expression.strip()
    if not text:
        raise InvalidSelectError(descriptor.name, expression, "빈 값")

    if text == SELECT_ALL:
        return whole_response

    if text.startswith("^"):
        spec = descriptor.get_parameter(text[1:])
        if spec is None:
            raise InvalidSelectError(descriptor.name, expression, "알 수 없는 파라미터")
        return parameter_selector(spec.name)

    if any(not part for part in text.split(".")):
        raise InvalidSelectError(descriptor.name, expression, "잘못된 필드 경로")
    head, _, rest = text.partition(".")

    if descriptor.response_fields:
        matched = next((f for f in descriptor.response_fields if f.lower() == head.lower()), None)
        if matched is None:
            raise InvalidSelectError(
                descriptor.name,
                expression,
                f"응답 필드가 아닙니다 (가능: {', '.join(descriptor.response_fields)})",
            )
        head = matched

    return field_selector(f"{head}.{rest}" if rest else head)


def resolve_selector(
    descriptor: OperationDescriptor,
    select: str | Selector | None = None,
    pass_thru: bool = False,
) -> Selector:
    """호출 옵션으로부터 최종 선택자 결정

    Args:
        descriptor: cmdlet 선언
        select: select 표현식 또는 선택자 함수 (None이면 기본값)
        pass_thru: deprecated --pass-thru 스위치

    Raises:
        InvalidSelectError: select와 pass_thru 동시 지정, 지원하지 않는 pass_thru,
            잘못된 select 값
    """
    if select is not None and pass_thru:
        raise InvalidSelectError(descriptor.name, select, "--pass-thru는 --select와 함께 사용할 수 없습니다")

    if pass_thru:
        if descriptor.pass_thru is None:
            raise InvalidSelectError(descriptor.name, "--pass-thru", "이 cmdlet은 --pass-thru를 지원하지 않습니다")
        message = f"--pass-thru는 deprecated입니다. --select '^{descriptor.pass_thru}'를 사용하세요"
        warnings.warn(message, DeprecationWarning, stacklevel=3)
        logger.warning(message)
        return parameter_selector(descriptor.pass_thru)

    if select is None:
        return default_selector(descriptor)

    if isinstance(select, str):
        return compile_select(descriptor, select)

    if callable(select):
        return select

    raise InvalidSelectError(descriptor.name, select, "문자열 또는 함수여야 합니다")
