"""
tests/cli/test_output.py - cmdlet 결과 출력 테스트
"""

import json
from datetime import datetime, timezone

from cli.output import _cell, render_output, to_json


class TestToJson:
    """JSON 직렬화"""

    def test_datetime_as_string(self):
        value = {"createdAt": datetime(2024, 1, 1, tzinfo=timezone.utc)}
        assert json.loads(to_json(value)) == {"createdAt": "2024-01-01 00:00:00+00:00"}

    def test_non_ascii_kept(self):
        assert "파이프라인" in to_json({"name": "파이프라인"})


class TestCell:
    """테이블 셀 값"""

    def test_none(self):
        assert _cell(None) == ""

    def test_nested(self):
        assert _cell({"a": [1]}) == '{"a": [1]}'

    def test_scalar(self):
        assert _cell(3) == "3"


class TestRenderOutput:
    """출력 형식별 렌더링"""

    def test_none_prints_nothing(self, capsys):
        render_output(None, "json")
        render_output(None, "console")
        assert capsys.readouterr().out == ""

    def test_json(self, capsys):
        render_output({"PipelineName": "logs"}, "json")
        assert json.loads(capsys.readouterr().out) == {"PipelineName": "logs"}

    def test_scalar_console(self, capsys):
        render_output("us-east-1_ABC", "console")
        assert capsys.readouterr().out.strip() == "us-east-1_ABC"

    def test_string_list_console(self, capsys):
        render_output(["subnet-1", "subnet-2"], "console")
        assert capsys.readouterr().out.split() == ["subnet-1", "subnet-2"]

    def test_dict_console_table(self, capsys):
        render_output({"Id": "p1"}, "console")
        out = capsys.readouterr().out
        assert "Id" in out
        assert "p1" in out

    def test_list_of_dicts_console_table(self, capsys):
        render_output([{"scanName": "s1"}, {"scanName": "s2", "runId": "r2"}], "console")
        out = capsys.readouterr().out
        assert "scanName" in out
        assert "runId" in out
        assert "s2" in out
