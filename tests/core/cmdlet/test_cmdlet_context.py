"""
tests/core/cmdlet/test_cmdlet_context.py - 파라미터 바인딩 테스트

이름/별칭/위치 인자 바인딩, 타입 변환, 훅, 필수 검증 테스트
"""

import pytest

from core.cmdlet.context import BoundContext, bind_arguments, coerce_value
from core.cmdlet.types import ParameterSpec, ParameterType
from core.exceptions import (
    ConfigurationError,
    InvalidParameterValueError,
    MissingParameterError,
    UnknownParameterError,
)

# =============================================================================
# BoundContext
# =============================================================================


class TestBoundContext:
    """BoundContext 테스트"""

    def test_none_values_dropped(self):
        """None 값은 지정되지 않은 것으로 취급"""
        ctx = BoundContext("New-TSTWidget", {"Name": "w1", "Size": None})
        assert dict(ctx) == {"Name": "w1"}
        assert "Size" not in ctx

    def test_immutable(self):
        """컨텍스트는 수정할 수 없음"""
        ctx = BoundContext("New-TSTWidget", {"Name": "w1"})
        with pytest.raises(TypeError):
            ctx._values["Name"] = "w2"  # type: ignore[index]

    def test_replace_returns_new_context(self):
        ctx = BoundContext("New-TSTWidget", {"Name": "w1"})
        changed = ctx.replace(Size=3)

        assert changed["Size"] == 3
        assert changed.is_bound("Size")
        assert "Size" not in ctx

    def test_replace_none_removes(self):
        ctx = BoundContext("New-TSTWidget", {"Name": "w1", "Size": 3})
        changed = ctx.replace(Size=None)
        assert "Size" not in changed
        assert not changed.is_bound("Size")


# =============================================================================
# bind_arguments
# =============================================================================


class TestBindArguments:
    """bind_arguments 테스트"""

    def test_bind_by_name(self, widget_descriptor):
        ctx = bind_arguments(widget_descriptor, {"Name": "w1", "Size": "3"})
        assert ctx["Name"] == "w1"
        assert ctx["Size"] == 3

    def test_bind_by_alias_case_insensitive(self, widget_descriptor):
        """별칭과 대소문자 무관 이름 허용"""
        ctx = bind_arguments(widget_descriptor, {"name": "w1", "SIZES": 5})
        assert ctx["Name"] == "w1"
        assert ctx["Size"] == 5

    def test_bind_positional(self, widget_descriptor):
        ctx = bind_arguments(widget_descriptor, {}, positional=["w1"])
        assert ctx["Name"] == "w1"
        assert ctx.is_bound("Name")

    def test_too_many_positional(self, widget_descriptor):
        with pytest.raises(UnknownParameterError, match="위치 인자"):
            bind_arguments(widget_descriptor, {}, positional=["w1", "extra"])

    def test_positional_skips_named(self, widget_descriptor):
        """이름으로 지정된 위치 파라미터에는 위치 인자를 할당하지 않음"""
        with pytest.raises(UnknownParameterError):
            bind_arguments(widget_descriptor, {"Name": "w1"}, positional=["w2"])

    def test_unknown_parameter(self, widget_descriptor):
        with pytest.raises(UnknownParameterError) as exc_info:
            bind_arguments(widget_descriptor, {"Name": "w1", "Colour": "RED"})
        assert exc_info.value.parameter == "Colour"
        assert isinstance(exc_info.value, ConfigurationError)

    def test_duplicate_via_alias(self, widget_descriptor):
        """이름과 별칭으로 같은 파라미터를 두 번 지정"""
        with pytest.raises(UnknownParameterError, match="중복"):
            bind_arguments(widget_descriptor, {"Name": "w1", "Size": 1, "Sizes": 2})

    def test_missing_required(self, widget_descriptor):
        with pytest.raises(MissingParameterError) as exc_info:
            bind_arguments(widget_descriptor, {"Size": 1})
        assert exc_info.value.parameter == "Name"

    def test_explicit_none_required_fails(self, widget_descriptor):
        """필수 파라미터에 None을 명시해도 누락으로 처리"""
        with pytest.raises(MissingParameterError):
            bind_arguments(widget_descriptor, {"Name": None})

    def test_default_applied_not_bound(self, widget_descriptor):
        """기본값은 적용되지만 명시적 지정으로 기록되지 않음"""
        ctx = bind_arguments(widget_descriptor, {"Name": "w1"})
        assert ctx["DryRun"] is False
        assert not ctx.is_bound("DryRun")
        assert ctx.is_bound("Name")

    def test_choice_normalized(self, widget_descriptor):
        ctx = bind_arguments(widget_descriptor, {"Name": "w1", "Config_Color": "blue"})
        assert ctx["Config_Color"] == "BLUE"

    def test_invalid_choice(self, widget_descriptor):
        with pytest.raises(InvalidParameterValueError):
            bind_arguments(widget_descriptor, {"Name": "w1", "Config_Color": "GREEN"})

    def test_pre_hook_mutates_raw_arguments(self, widget_descriptor):
        """pre_hook은 바인딩 전 원시 인자를 수정"""

        def pre_hook(raw):
            raw.setdefault("Name", "from-hook")

        ctx = bind_arguments(widget_descriptor, {}, pre_hook=pre_hook)
        assert ctx["Name"] == "from-hook"

    def test_post_hook_replaces_context(self, widget_descriptor):
        """post_hook이 채운 필수 값은 검증을 통과"""
        ctx = bind_arguments(
            widget_descriptor,
            {"Size": 1},
            post_hook=lambda c: c.replace(Name="filled"),
        )
        assert ctx["Name"] == "filled"

    def test_post_hook_can_remove_required(self, widget_descriptor):
        """필수 검증은 post_hook 이후에 수행"""
        with pytest.raises(MissingParameterError):
            bind_arguments(
                widget_descriptor,
                {"Name": "w1"},
                post_hook=lambda c: c.replace(Name=None),
            )

    def test_caller_arguments_not_mutated(self, widget_descriptor):
        arguments = {"Name": "w1"}
        bind_arguments(widget_descriptor, arguments, pre_hook=lambda raw: raw.update(Size=1))
        assert arguments == {"Name": "w1"}


# =============================================================================
# coerce_value
# =============================================================================


class TestCoerceValue:
    """타입 변환 테스트"""

    @pytest.mark.parametrize(
        "param_type,value,expected",
        [
            (ParameterType.STRING, 5, "5"),
            (ParameterType.INTEGER, "42", 42),
            (ParameterType.INTEGER, 3.0, 3),
            (ParameterType.LONG, "3600000", 3600000),
            (ParameterType.DOUBLE, "1.5", 1.5),
            (ParameterType.BOOLEAN, "true", True),
            (ParameterType.BOOLEAN, "$false", False),
            (ParameterType.BOOLEAN, "yes", True),
            (ParameterType.STRING_LIST, "sg-1", ["sg-1"]),
            (ParameterType.STRING_LIST, '["a", "b"]', ["a", "b"]),
            (ParameterType.STRING_LIST, ("a", "b"), ["a", "b"]),
            (ParameterType.DOUBLE_LIST, "-123.1,49.2", [-123.1, 49.2]),
            (ParameterType.DOUBLE_LIST, ["1", 2], [1.0, 2.0]),
            (ParameterType.MAP, "env=dev", {"env": "dev"}),
            (ParameterType.MAP, ["env=dev", "team=data"], {"env": "dev", "team": "data"}),
            (ParameterType.MAP, '{"env": "dev"}', {"env": "dev"}),
            (ParameterType.JSON, '{"a": [1, 2]}', {"a": [1, 2]}),
            (ParameterType.JSON, [{"a": 1}], [{"a": 1}]),
        ],
    )
    def test_coerce(self, param_type, value, expected):
        spec = ParameterSpec("P", param_type)
        assert coerce_value("Test-Cmdlet", spec, value) == expected

    @pytest.mark.parametrize(
        "param_type,value",
        [
            (ParameterType.INTEGER, "abc"),
            (ParameterType.INTEGER, True),
            (ParameterType.INTEGER, 1.5),
            (ParameterType.DOUBLE, False),
            (ParameterType.BOOLEAN, "maybe"),
            (ParameterType.STRING, {"a": 1}),
            (ParameterType.STRING_LIST, '["a",'),
            (ParameterType.MAP, "novalue"),
            (ParameterType.JSON, "{not json"),
        ],
    )
    def test_coerce_invalid(self, param_type, value):
        spec = ParameterSpec("P", param_type)
        with pytest.raises(InvalidParameterValueError) as exc_info:
            coerce_value("Test-Cmdlet", spec, value)
        assert exc_info.value.parameter == "P"
