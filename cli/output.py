"""
cli/output.py - cmdlet 결과 출력

출력 형식:
    json     JSON 문자열 (datetime 등은 str 변환)
    console  Rich 테이블 (dict/list[dict]) 또는 값 그대로

None은 출력하지 않습니다 (Remove-* 등 출력이 없는 cmdlet).
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import click
from rich.table import Table

from cli.ui.console import console

OUTPUT_FORMATS = ("console", "json")


def to_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, indent=2, default=str)


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, ensure_ascii=False, default=str)
    return str(value)


def _dict_table(value: Mapping[str, Any]) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, item in value.items():
        table.add_row(str(key), _cell(item))
    return table


def _list_table(items: list[Mapping[str, Any]]) -> Table:
    # 컬럼은 등장 순서대로 합집합
    columns: list[str] = []
    for item in items:
        for key in item:
            if key not in columns:
                columns.append(key)

    table = Table(show_header=True, header_style="bold")
    for column in columns:
        table.add_column(str(column))
    for item in items:
        table.add_row(*(_cell(item.get(column)) for column in columns))
    return table


def render_output(value: Any, output_format: str = "console") -> None:
    """cmdlet 파이프라인 출력 렌더링

    Args:
        value: CmdletOutput.pipeline_output
        output_format: console 또는 json
    """
    if value is None:
        return

    if output_format == "json":
        click.echo(to_json(value))
        return

    if isinstance(value, Mapping):
        console.print(_dict_table(value))
    elif isinstance(value, list) and value and all(isinstance(v, Mapping) for v in value):
        console.print(_list_table(value))
    elif isinstance(value, (list, tuple)):
        for item in value:
            click.echo(_cell(item))
    else:
        click.echo(_cell(value))
