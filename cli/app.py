"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.
cmdlet 레지스트리(cmdlets/ 패키지)를 통해 cmdlet 명령어를 동적으로 생성합니다.

명령어 구조:
    awc --version                       # 버전 표시
    awc list [-s <service>]             # cmdlet 목록
    awc describe <cmdlet>               # cmdlet 파라미터 상세
    awc search <검색어>                 # cmdlet 검색
    awc <Verb-Noun> [값...] [옵션]      # cmdlet 실행

    예시:
    awc Get-CGIPUserPool us-east-1_ABC123 -r us-east-1
    awc New-OSISPipeline logs --min-unit 1 --max-unit 4 \\
        --pipeline-configuration-body "$(cat pipeline.yaml)" -s ^PipelineName
    awc Remove-CFStreamingDistribution EDFDVBD6EXAMPLE E2QWRUHEXAMPLE --force

아키텍처:
    1. cli(): Click 그룹 - 언어/로깅 설정
    2. CmdletCommandsGroup.get_command(): 등록된 명령어가 없으면
       레지스트리에서 cmdlet을 찾아 build_cmdlet_command()로 명령어 생성
    3. 찾지 못하면 rapidfuzz 기반 유사 cmdlet 이름 제안

Usage:
    $ awc list
    $ python -m cli.app list
"""

from __future__ import annotations

import json
import logging

import click
from click import Command, Context, HelpFormatter

from cli.i18n import SUPPORTED_LANGS, set_lang, t
from cli.ui.console import configure_logging, console, print_error
from core.cmdlet.registry import discover_services, get_cmdlet, list_cmdlets, suggest_cmdlets
from core.config import get_version, settings
from core.exceptions import CmdletNotFoundError

logger = logging.getLogger(__name__)

VERSION = get_version()


def _apply_parsed_lang(ctx: Context) -> None:
    """그룹 콜백보다 먼저 실행되는 경로(명령어 조회, 오류 메시지)에 --lang 반영"""
    lang = (ctx.params or {}).get("lang")
    if lang:
        set_lang(lang)


class CmdletCommandsGroup(click.Group):
    """유틸리티 명령어와 서비스별 cmdlet을 분리해서 표시하는 커스텀 Click 그룹

    추가 기능:
    - awc New-OSISPipeline 형식의 cmdlet 직접 실행 (대소문자 무관)
    - 없는 이름은 유사 cmdlet 제안
    """

    def list_commands(self, ctx: Context) -> list[str]:
        builtin = super().list_commands(ctx)
        return builtin + sorted(d.name for d in list_cmdlets())

    def get_command(self, ctx: Context, cmd_name: str) -> Command | None:
        """명령어 조회 - 등록된 명령어가 없으면 cmdlet 명령어 생성"""
        cmd = super().get_command(ctx, cmd_name)
        if cmd is not None:
            return cmd

        if "-" not in cmd_name:
            return None

        try:
            descriptor = get_cmdlet(cmd_name)
        except CmdletNotFoundError:
            return None

        _apply_parsed_lang(ctx)

        from cli.command import build_cmdlet_command

        return build_cmdlet_command(descriptor)

    def resolve_command(self, ctx: Context, args: list[str]) -> tuple[str | None, Command | None, list[str]]:
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            _apply_parsed_lang(ctx)
            name = args[0] if args else ""
            suggestions = suggest_cmdlets(name) if name else []
            if not suggestions:
                raise
            raise click.UsageError(
                t("cli.cmdlet_not_found_suggest", name=name, suggestions=", ".join(suggestions)),
                ctx,
            ) from e

    def format_commands(self, ctx: Context, formatter: HelpFormatter) -> None:
        """유틸리티 명령어와 서비스별 cmdlet을 그룹화해서 표시"""
        utility_cmds: list[tuple[str, str]] = []
        for name in super().list_commands(ctx):
            cmd = super().get_command(ctx, name)
            if cmd is None or cmd.hidden:
                continue
            utility_cmds.append((name, cmd.get_short_help_str(limit=formatter.width)))

        if utility_cmds:
            with formatter.section(t("cli.section_utilities")):
                formatter.write_dl(utility_cmds)

        for service in discover_services():
            rows = [(d.name, d.description) for d in service.cmdlets]
            with formatter.section(service.display_name):
                formatter.write_dl(rows)


def _build_help_text() -> str:
    """help 텍스트 생성"""
    lines = [
        "AWC - AWS Cmdlet CLI",
        "",
        t("cli.help_intro"),
        "",
        "\b",  # Click 줄바꿈 유지 마커
        t("cli.help_basic_usage"),
        f"  awc list                       {t('cli.help_list')}",
        f"  awc describe <cmdlet>          {t('cli.help_describe')}",
        f"  awc search <query>             {t('cli.help_search')}",
        f"  awc <Verb-Noun> [values] [options]  {t('cli.help_run')}",
        "",
        "\b",
        t("cli.help_examples"),
        "  awc Get-CGIPUserPool us-east-1_ABC123 -r us-east-1",
        "  awc Get-CGSScanList --max-result 10 -f json",
        "  awc Remove-CFStreamingDistribution EDFDVBD6EXAMPLE E2QWRUHEXAMPLE --force",
    ]
    return "\n".join(lines)


@click.group(cls=CmdletCommandsGroup)
@click.version_option(VERSION, prog_name="awc")
@click.option(
    "--lang",
    type=click.Choice(list(SUPPORTED_LANGS)),
    default=settings.DEFAULT_LANG if settings.DEFAULT_LANG in SUPPORTED_LANGS else "ko",
    help="UI 언어 설정 / UI language (ko: 한국어, en: English)",
)
@click.option("-v", "--verbose", is_flag=True, help="상세 로그 출력 (DEBUG)")
@click.pass_context
def cli(ctx: Context, lang: str, verbose: bool) -> None:
    """AWC - AWS Cmdlet CLI"""
    set_lang(lang)
    configure_logging(verbose=verbose)

    ctx.ensure_object(dict)
    ctx.obj["lang"] = lang
    ctx.obj["verbose"] = verbose


# help 텍스트 동적 설정
cli.help = _build_help_text()


@cli.command("list")
@click.option("-s", "--service", default=None, help="특정 서비스만 표시 (이름 또는 별칭)")
@click.option("--json", "as_json", is_flag=True, help="JSON 형식으로 출력")
def list_command(service: str | None, as_json: bool) -> None:
    """사용 가능한 cmdlet 목록

    \b
    Examples:
        awc list              # 전체 cmdlet 목록
        awc list -s osis      # OSIS 서비스만
        awc list --json       # JSON 출력
    """
    from rich.table import Table

    descriptors = list_cmdlets(service)
    if service and not descriptors:
        click.echo(t("cli.service_not_found", name=service), err=True)
        raise SystemExit(1)

    if as_json:
        output_data = [
            {
                "name": d.name,
                "service": d.service,
                "operation": d.api_name,
                "confirm_impact": d.confirm_impact.value,
                "description": d.description,
            }
            for d in descriptors
        ]
        click.echo(json.dumps(output_data, ensure_ascii=False, indent=2))
        return

    table = Table(title=t("cli.available_cmdlets"), show_header=True)
    table.add_column(t("cli.col_cmdlet"), style="cyan")
    table.add_column(t("cli.col_service"), style="white")
    table.add_column(t("cli.col_operation"), style="white")
    table.add_column(t("cli.col_confirm"), style="yellow")

    for d in descriptors:
        table.add_row(d.name, d.service, d.api_name, d.confirm_impact.value)

    console.print(table)
    console.print()
    console.print(f"[dim]{t('cli.usage_hint')}[/dim]")


@cli.command("describe")
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="JSON 형식으로 출력")
def describe_command(name: str, as_json: bool) -> None:
    """cmdlet 파라미터 상세

    \b
    Examples:
        awc describe New-OSISPipeline
        awc describe new-asyngraphqlapi --json
    """
    from rich.table import Table

    from cli.command import to_option_name
    from core.cmdlet.request import request_groups

    try:
        descriptor = get_cmdlet(name)
    except CmdletNotFoundError as e:
        print_error(str(e))
        if e.suggestions:
            click.echo(t("cli.did_you_mean", suggestions=", ".join(e.suggestions)), err=True)
        raise SystemExit(1) from e

    if as_json:
        output_data = {
            "name": descriptor.name,
            "service": descriptor.service,
            "operation": descriptor.api_name,
            "default_select": descriptor.default_select,
            "pass_thru": descriptor.pass_thru,
            "confirm_impact": descriptor.confirm_impact.value,
            "response_fields": list(descriptor.response_fields),
            "request_groups": request_groups(descriptor),
            "parameters": [
                {
                    "name": p.name,
                    "type": p.type.value,
                    "required": p.required,
                    "aliases": list(p.aliases),
                    "position": p.position,
                    "request_path": ".".join(p.path),
                    "choices": list(p.choices),
                    "from_pipeline": p.from_pipeline,
                }
                for p in descriptor.parameters
            ],
        }
        click.echo(json.dumps(output_data, ensure_ascii=False, indent=2))
        return

    console.print(f"[bold cyan]{descriptor.name}[/bold cyan]  [dim]{descriptor.label}[/dim]")
    console.print(descriptor.description)
    console.print(
        f"[dim]{t('cli.default_output')}: {descriptor.default_select or '-'}  "
        f"{t('cli.col_confirm')}: {descriptor.confirm_impact.value}[/dim]"
    )
    pipeline = descriptor.pipeline_parameter
    if pipeline is not None:
        console.print(f"[dim]{t('cli.pipeline_input')}: {pipeline.name} ({t('cli.pipeline_hint')})[/dim]")

    table = Table(show_header=True)
    table.add_column(t("cli.col_parameter"), style="cyan")
    table.add_column(t("cli.col_option"), style="white")
    table.add_column(t("cli.col_type"), style="white")
    table.add_column(t("cli.col_required"), style="yellow")
    table.add_column(t("cli.col_request_path"), style="dim")

    for p in descriptor.parameters:
        position = f" #{p.position}" if p.position is not None else ""
        table.add_row(
            f"{p.name}{position}",
            f"--{to_option_name(p.name)}",
            p.type.value,
            "Y" if p.required else "",
            ".".join(p.path),
        )

    console.print(table)

    groups = request_groups(descriptor)
    if groups:
        console.print(f"[dim]{t('cli.request_groups')}: {', '.join(groups)}[/dim]")


@cli.command("search")
@click.argument("query")
@click.option("-n", "--limit", default=10, show_default=True, help="최대 결과 수")
@click.option("--json", "as_json", is_flag=True, help="JSON 형식으로 출력")
def search_command(query: str, limit: int, as_json: bool) -> None:
    """cmdlet 검색 (이름, API, 서비스, 설명)

    \b
    Examples:
        awc search pipeline
        awc search osis:
        awc search chime:message
    """
    from rich.table import Table

    from cli.ui.search import get_search_engine

    results = get_search_engine().search(query, limit=limit)

    if as_json:
        output_data = [
            {
                "name": r.name,
                "service": r.service,
                "score": round(r.score, 2),
                "match_type": r.match_type,
            }
            for r in results
        ]
        click.echo(json.dumps(output_data, ensure_ascii=False, indent=2))
        return

    if not results:
        click.echo(t("cli.no_search_results", query=query))
        return

    table = Table(title=t("cli.search_results", query=query), show_header=True)
    table.add_column(t("cli.col_cmdlet"), style="cyan")
    table.add_column(t("cli.col_service"), style="white")
    table.add_column(t("cli.col_description"), style="white")

    for r in results:
        table.add_row(r.name, r.service_display, r.descriptor.description)

    console.print(table)


if __name__ == "__main__":
    cli(prog_name="awc")

