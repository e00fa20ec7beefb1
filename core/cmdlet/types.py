"""
core/cmdlet/types.py - cmdlet 메타데이터 타입 정의

하나의 AWS API 작업을 감싸는 cmdlet을 선언적으로 기술합니다.
어댑터(CmdletAdapter)는 이 디스크립터만 보고 파라미터 바인딩,
요청 구성, 응답 선택을 수행합니다.

주요 구성 요소:
- ParameterType: 파라미터 값 타입 (셸 문자열 → 파이썬 값 변환 기준)
- ConfirmImpact: 확인 프롬프트 영향도
- ParameterSpec: 단일 파라미터 선언 (별칭, 필수 여부, 위치, 요청 경로)
- OperationDescriptor: cmdlet 전체 선언

Example:
    DESCRIPTOR = OperationDescriptor(
        verb="Get",
        noun="CGIPUserPool",
        service="cognito-idp",
        operation="describe_user_pool",
        api_name="DescribeUserPool",
        parameters=(
            ParameterSpec("UserPoolId", required=True, position=0, from_pipeline=True),
        ),
        default_select="UserPool",
        pass_thru="UserPoolId",
    )
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ParameterType(str, Enum):
    """파라미터 값 타입"""

    STRING = "string"
    INTEGER = "integer"
    LONG = "long"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    STRING_LIST = "string_list"
    DOUBLE_LIST = "double_list"
    MAP = "map"  # key=value 또는 JSON 객체
    JSON = "json"  # 임의의 JSON 객체/배열 (구조체 파라미터)

    @property
    def is_list(self) -> bool:
        return self in (ParameterType.STRING_LIST, ParameterType.DOUBLE_LIST)


class ConfirmImpact(str, Enum):
    """확인 프롬프트 영향도

    설정된 임계값(settings.CONFIRM_PREFERENCE) 이상이면 --force 없이
    확인을 요청합니다.
    """

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _IMPACT_RANK[self]


_IMPACT_RANK = {
    ConfirmImpact.NONE: 0,
    ConfirmImpact.LOW: 1,
    ConfirmImpact.MEDIUM: 2,
    ConfirmImpact.HIGH: 3,
}

# 전체 응답 선택 표현식
SELECT_ALL = "*"


@dataclass(frozen=True)
class ParameterSpec:
    """단일 파라미터 선언

    Attributes:
        name: 파라미터 이름 (CLI/바인딩 키)
        type: 값 타입
        required: 필수 여부
        aliases: 별칭 목록 (대소문자 무관 매칭)
        default: 값이 없을 때 사용할 기본값
        position: 위치 인자 순서 (None이면 이름으로만 바인딩)
        from_pipeline: 파이프라인 입력 바인딩 대상 여부
        request_path: 요청 내 필드 경로 ("A.B.C" 형식, 기본: name)
        choices: 허용 값 목록 (enum 파라미터)
        description: 도움말 설명
    """

    name: str
    type: ParameterType = ParameterType.STRING
    required: bool = False
    aliases: tuple[str, ...] = ()
    default: Any = None
    position: int | None = None
    from_pipeline: bool = False
    request_path: str | None = None
    choices: tuple[str, ...] = ()
    description: str = ""

    @property
    def path(self) -> tuple[str, ...]:
        """요청 필드 경로 세그먼트"""
        return tuple((self.request_path or self.name).split("."))

    @property
    def is_grouped(self) -> bool:
        """중첩 그룹(하위 객체) 멤버 여부"""
        return len(self.path) > 1

    def matches(self, key: str) -> bool:
        """이름 또는 별칭 일치 여부 (대소문자 무관)"""
        lowered = key.lower()
        return lowered == self.name.lower() or any(lowered == a.lower() for a in self.aliases)


@dataclass(frozen=True)
class OperationDescriptor:
    """cmdlet 선언

    Attributes:
        verb: 동사 (Get, New, Remove, Send, Search ...)
        noun: 명사 (예: OSISPipeline)
        service: boto3 클라이언트 서비스 이름 (예: "osis")
        operation: boto3 클라이언트 메서드 이름 (예: "create_pipeline")
        api_name: AWS API 작업 이름 (예: "CreatePipeline")
        service_display: 서비스 표시 이름
        parameters: 파라미터 선언 목록
        default_select: 기본 출력 ("*" 전체 응답, 필드명, None이면 출력 없음)
        pass_thru: --pass-thru 시 되돌려줄 파라미터 이름
        confirm_impact: 확인 프롬프트 영향도
        confirm_parameter: 확인 메시지에 표시할 식별 파라미터
        response_fields: 응답 최상위 필드 목록 (select 검증용)
        description: 설명
    """

    verb: str
    noun: str
    service: str
    operation: str
    api_name: str
    service_display: str = ""
    parameters: tuple[ParameterSpec, ...] = ()
    default_select: str | None = SELECT_ALL
    pass_thru: str | None = None
    confirm_impact: ConfirmImpact = ConfirmImpact.NONE
    confirm_parameter: str | None = None
    response_fields: tuple[str, ...] = ()
    description: str = ""
    _lookup: dict[str, ParameterSpec] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        errors = validate_descriptor(self)
        if errors:
            raise ValueError(f"잘못된 cmdlet 선언 [{self.name}]: {'; '.join(errors)}")
        for spec in self.parameters:
            for key in (spec.name, *spec.aliases):
                self._lookup[key.lower()] = spec

    @property
    def name(self) -> str:
        """cmdlet 이름 (Verb-Noun)"""
        return f"{self.verb}-{self.noun}"

    @property
    def label(self) -> str:
        """확인/로그용 표시 이름 (Verb-Noun (ApiName))"""
        return f"{self.name} ({self.api_name})"

    def get_parameter(self, key: str) -> ParameterSpec | None:
        """이름 또는 별칭으로 파라미터 조회 (대소문자 무관)"""
        return self._lookup.get(key.lower())

    @property
    def required_parameters(self) -> list[ParameterSpec]:
        return [p for p in self.parameters if p.required]

    @property
    def positional_parameters(self) -> list[ParameterSpec]:
        """위치 인자 파라미터 (position 순)"""
        return sorted(
            (p for p in self.parameters if p.position is not None),
            key=lambda p: p.position,  # type: ignore[arg-type, return-value]
        )

    @property
    def pipeline_parameter(self) -> ParameterSpec | None:
        """파이프라인(표준 입력) 값을 받는 파라미터"""
        return next((p for p in self.parameters if p.from_pipeline), None)


def validate_descriptor(descriptor: OperationDescriptor) -> list[str]:
    """cmdlet 선언 검증

    Returns:
        에러 메시지 목록 (비어있으면 유효)
    """
    errors: list[str] = []

    if not descriptor.verb or not descriptor.noun:
        errors.append("verb/noun 누락")
    if not descriptor.service or not descriptor.operation:
        errors.append("service/operation 누락")

    seen: dict[str, str] = {}
    for spec in descriptor.parameters:
        for key in (spec.name, *spec.aliases):
            owner = seen.get(key.lower())
            if owner is not None:
                errors.append(f"이름/별칭 중복: {key} ({owner}, {spec.name})")
            seen[key.lower()] = spec.name

    positions = [p.position for p in descriptor.parameters if p.position is not None]
    if len(positions) != len(set(positions)):
        errors.append(f"위치 중복: {positions}")

    pipeline = [p.name for p in descriptor.parameters if p.from_pipeline]
    if len(pipeline) > 1:
        errors.append(f"파이프라인 파라미터는 하나만 가능: {pipeline}")

    # 어떤 필드 경로도 다른 필드 경로의 상위 그룹이 될 수 없음
    paths = {spec.path for spec in descriptor.parameters}
    for path in paths:
        for other in paths:
            if other != path and other[: len(path)] == path:
                errors.append(f"요청 경로 충돌: {'.'.join(path)} / {'.'.join(other)}")

    names = {spec.name for spec in descriptor.parameters}
    if descriptor.pass_thru is not None and descriptor.pass_thru not in names:
        errors.append(f"pass_thru 파라미터 없음: {descriptor.pass_thru}")
    if descriptor.confirm_parameter is not None and descriptor.confirm_parameter not in names:
        errors.append(f"confirm_parameter 파라미터 없음: {descriptor.confirm_parameter}")

    select = descriptor.default_select
    if select not in (None, SELECT_ALL) and descriptor.response_fields:
        if select.split(".")[0] not in descriptor.response_fields:
            errors.append(f"default_select 필드 없음: {select}")

    return errors
