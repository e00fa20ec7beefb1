"""
core/cmdlet/context.py - 파라미터 바인딩

셸/호출자가 넘긴 인자를 cmdlet 선언에 맞춰 해석하고, 한 번의 호출 동안
사용할 불변 BoundContext를 만듭니다.

처리 순서:
    1. pre_hook(arguments) - 원시 인자 딕셔너리 수정 (선택)
    2. 이름/별칭 해석 (대소문자 무관), 위치 인자 할당
    3. 선언 타입으로 값 변환 (셸 문자열 → int/bool/list/dict ...)
    4. 기본값 적용
    5. post_hook(context) - 바인딩된 컨텍스트 교체 (선택)
    6. 필수 파라미터 검증

값이 None이면 "지정되지 않음"으로 취급합니다.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator, Mapping, MutableMapping, Sequence
from types import MappingProxyType
from typing import Any

from core.exceptions import InvalidParameterValueError, MissingParameterError, UnknownParameterError

from .types import OperationDescriptor, ParameterSpec, ParameterType

logger = logging.getLogger(__name__)

PreHook = Callable[[MutableMapping[str, Any]], None]
PostHook = Callable[["BoundContext"], "BoundContext"]

_TRUE_VALUES = ("true", "1", "yes", "y", "on", "$true")
_FALSE_VALUES = ("false", "0", "no", "n", "off", "$false")


class BoundContext(Mapping[str, Any]):
    """한 번의 호출에 바인딩된 파라미터 값 (불변)

    Attributes:
        cmdlet: cmdlet 이름
        bound: 호출자가 명시적으로 지정한 파라미터 이름 집합
    """

    __slots__ = ("_values", "cmdlet", "bound")

    def __init__(self, cmdlet: str, values: Mapping[str, Any], bound: frozenset[str] | None = None):
        self.cmdlet = cmdlet
        self._values = MappingProxyType({k: v for k, v in values.items() if v is not None})
        self.bound = bound if bound is not None else frozenset(self._values)

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"BoundContext({self.cmdlet!r}, {dict(self._values)!r})"

    def is_bound(self, name: str) -> bool:
        """호출자가 명시적으로 지정했는지 (기본값 적용과 구분)"""
        return name in self.bound

    def replace(self, **changes: Any) -> BoundContext:
        """일부 값을 바꾼 새 컨텍스트 반환 (None이면 제거)"""
        values = dict(self._values)
        values.update(changes)
        bound = set(self.bound)
        for key, value in changes.items():
            if value is None:
                bound.discard(key)
            else:
                bound.add(key)
        return BoundContext(self.cmdlet, values, frozenset(bound))


def bind_arguments(
    descriptor: OperationDescriptor,
    arguments: Mapping[str, Any] | None = None,
    positional: Sequence[Any] = (),
    pre_hook: PreHook | None = None,
    post_hook: PostHook | None = None,
) -> BoundContext:
    """인자를 바인딩하고 필수 파라미터를 검증

    Args:
        descriptor: cmdlet 선언
        arguments: 이름 → 값 (별칭 허용)
        positional: 위치 인자 값 (position 순으로 미지정 파라미터에 할당)
        pre_hook: 바인딩 전에 원시 인자를 수정하는 훅
        post_hook: 바인딩 후 컨텍스트를 교체하는 훅

    Returns:
        BoundContext

    Raises:
        UnknownParameterError: 선언되지 않은 이름, 중복 지정, 위치 인자 초과
        InvalidParameterValueError: 타입 변환 실패
        MissingParameterError: 필수 파라미터 누락
    """
    raw: dict[str, Any] = dict(arguments or {})
    if pre_hook is not None:
        pre_hook(raw)

    values: dict[str, Any] = {}
    for key, value in raw.items():
        spec = descriptor.get_parameter(key)
        if spec is None:
            raise UnknownParameterError(descriptor.name, key)
        if spec.name in values:
            raise UnknownParameterError(descriptor.name, key, reason="파라미터가 중복 지정되었습니다")
        if value is None and spec.required:
            logger.warning(f"[{descriptor.name}] 필수 파라미터 {spec.name}에 None이 전달되었습니다")
        values[spec.name] = None if value is None else coerce_value(descriptor.name, spec, value)

    if positional:
        free = [p for p in descriptor.positional_parameters if p.name not in values]
        if len(positional) > len(free):
            extra = positional[len(free)]
            raise UnknownParameterError(descriptor.name, str(extra), reason="위치 인자가 너무 많습니다")
        for spec, value in zip(free, positional):
            values[spec.name] = coerce_value(descriptor.name, spec, value)

    bound = frozenset(name for name, value in values.items() if value is not None)
    for spec in descriptor.parameters:
        if values.get(spec.name) is None and spec.default is not None:
            values[spec.name] = spec.default

    context = BoundContext(descriptor.name, values, bound)
    if post_hook is not None:
        context = post_hook(context)

    for spec in descriptor.required_parameters:
        if context.get(spec.name) is None:
            raise MissingParameterError(descriptor.name, spec.name)

    return context


def coerce_value(cmdlet: str, spec: ParameterSpec, value: Any) -> Any:
    """선언 타입으로 값 변환

    셸에서 넘어온 문자열은 선언 타입으로 파싱하고, 이미 올바른 타입인
    파이썬 값은 그대로 둡니다.

    Raises:
        InvalidParameterValueError: 변환 불가
    """
    try:
        result = _COERCERS[spec.type](value)
    except (TypeError, ValueError) as e:
        raise InvalidParameterValueError(cmdlet, spec.name, value, spec.type.value, cause=e) from e

    if spec.choices:
        result = _match_choice(cmdlet, spec, result)
    return result


def _match_choice(cmdlet: str, spec: ParameterSpec, value: Any) -> str:
    for choice in spec.choices:
        if str(value).lower() == choice.lower():
            return choice
    raise InvalidParameterValueError(cmdlet, spec.name, value, " | ".join(spec.choices))


def _to_string(value: Any) -> str:
    if isinstance(value, (dict, list, tuple, set)):
        raise TypeError(f"문자열이 아닙니다: {type(value).__name__}")
    return str(value)


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("bool은 정수로 변환하지 않습니다")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"정수가 아닙니다: {value}")
        return int(value)
    return int(str(value).strip())


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        raise TypeError("bool은 실수로 변환하지 않습니다")
    if isinstance(value, (int, float)):
        return float(value)
    return float(str(value).strip())


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"bool 값이 아닙니다: {value}")


def _split_items(value: Any) -> list[Any]:
    if isinstance(value, str):
        text = value.strip()
        if text.startswith("["):
            parsed = json.loads(text)
            if not isinstance(parsed, list):
                raise ValueError("JSON 배열이 아닙니다")
            return parsed
        return [text]
    if isinstance(value, (list, tuple)):
        return list(value)
    raise TypeError(f"목록이 아닙니다: {type(value).__name__}")


def _to_string_list(value: Any) -> list[str]:
    return [_to_string(item) for item in _split_items(value)]


def _to_double_list(value: Any) -> list[float]:
    items: list[Any] = []
    for item in _split_items(value):
        # "-123.1,49.2" 같은 쉼표 구분 입력 허용
        if isinstance(item, str) and "," in item:
            items.extend(part for part in item.split(",") if part.strip())
        else:
            items.append(item)
    return [_to_float(item) for item in items]


def _to_map(value: Any) -> dict[str, Any]:
    if isinstance(value, Mapping):
        return {str(k): v for k, v in value.items()}
    entries = [value] if isinstance(value, str) else value
    if not isinstance(entries, (list, tuple)):
        raise TypeError(f"맵이 아닙니다: {type(value).__name__}")

    result: dict[str, Any] = {}
    for entry in entries:
        if isinstance(entry, Mapping):
            result.update({str(k): v for k, v in entry.items()})
            continue
        text = str(entry).strip()
        if text.startswith("{"):
            parsed = json.loads(text)
            if not isinstance(parsed, dict):
                raise ValueError("JSON 객체가 아닙니다")
            result.update(parsed)
            continue
        key, sep, item = text.partition("=")
        if not sep or not key:
            raise ValueError(f"key=value 형식이 아닙니다: {text}")
        result[key.strip()] = item
    return result


def _to_json(value: Any) -> Any:
    if isinstance(value, (dict, list)):
        return value
    if isinstance(value, tuple):
        return [_to_json(item) for item in value]
    if isinstance(value, str):
        return json.loads(value)
    raise TypeError(f"JSON 값이 아닙니다: {type(value).__name__}")


_COERCERS: dict[ParameterType, Callable[[Any], Any]] = {
    ParameterType.STRING: _to_string,
    ParameterType.INTEGER: _to_int,
    ParameterType.LONG: _to_int,
    ParameterType.DOUBLE: _to_float,
    ParameterType.BOOLEAN: _to_bool,
    ParameterType.STRING_LIST: _to_string_list,
    ParameterType.DOUBLE_LIST: _to_double_list,
    ParameterType.MAP: _to_map,
    ParameterType.JSON: _to_json,
}
