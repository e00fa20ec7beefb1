"""
core/cmdlet/request.py - 요청 객체 구성

BoundContext 값을 boto3 호출 인자(dict)로 옮깁니다.

중첩 그룹 규칙:
    "LogPublishingOptions.CloudWatchLogDestination.LogGroup" 같은 경로를 가진
    파라미터는 값이 있을 때만 상위 객체를 만듭니다. 그룹의 멤버가 하나도
    지정되지 않으면 그룹 자체가 요청에서 빠집니다. 그룹 멤버의 선언 기본값은
    호출자가 값을 지정하지 않은 한 요청에 넣지 않습니다 (기본값만으로 그룹을
    만들지 않음). 최상위 필드의 기본값은 그대로 전송합니다.

Example:
    >>> build_request(descriptor, context)
    {"PipelineName": "logs", "LogPublishingOptions": {"CloudWatchLogDestination": {"LogGroup": "/app/logs"}}}
"""

from __future__ import annotations

import copy
from typing import Any

from .context import BoundContext
from .types import OperationDescriptor


def build_request(descriptor: OperationDescriptor, context: BoundContext) -> dict[str, Any]:
    """BoundContext로부터 boto3 요청 인자 구성

    Args:
        descriptor: cmdlet 선언
        context: 바인딩된 파라미터 값

    Returns:
        client.<operation>(**request)에 전달할 딕셔너리
    """
    request: dict[str, Any] = {}
    for spec in descriptor.parameters:
        value = context.get(spec.name)
        if value is None:
            continue
        if spec.is_grouped and not context.is_bound(spec.name):
            continue
        # 요청은 컨텍스트와 독립적으로 소유
        _set_path(request, spec.path, copy.deepcopy(value))
    return request


def _set_path(target: dict[str, Any], path: tuple[str, ...], value: Any) -> None:
    node = target
    for key in path[:-1]:
        node = node.setdefault(key, {})
    node[path[-1]] = value


def request_groups(descriptor: OperationDescriptor) -> dict[str, list[str]]:
    """중첩 그룹별 멤버 파라미터 목록

    Returns:
        {"LogPublishingOptions": ["LogPublishingOptions_IsLoggingEnabled", ...]}
        (하위 그룹 멤버는 상위 그룹에도 포함)
    """
    groups: dict[str, list[str]] = {}
    for spec in descriptor.parameters:
        for depth in range(1, len(spec.path)):
            group = ".".join(spec.path[:depth])
            groups.setdefault(group, []).append(spec.name)
    return groups
