"""
cli/command.py - OperationDescriptor → click.Command 변환

cmdlet 파라미터는 kebab-case 옵션으로 노출됩니다.

    MinUnit                            --min-unit (별칭: --min-units)
    LogPublishingOptions_IsLoggingEnabled
                                       --log-publishing-options-is-logging-enabled
    VpcOptions_SubnetId (STRING_LIST)  --vpc-options-subnet-id a --vpc-options-subnet-id b

위치 파라미터는 옵션 대신 순서대로 인자로 전달할 수 있습니다.

    awc Get-CGIPUserPool us-east-1_ABC123
    awc Get-CGIPUserPool --user-pool-id us-east-1_ABC123

from_pipeline 파라미터에 - 를 주면 표준 입력의 줄마다 한 번씩 실행합니다.

    cat pool-ids.txt | awc Get-CGIPUserPool - -f json

값 변환과 필수 검증은 core.cmdlet의 바인딩이 수행하므로
여기서는 문자열 그대로 전달하고 click 타입 검증은 최소로 유지합니다.
"""

from __future__ import annotations

import logging
import re
from typing import Any

import click
from botocore.exceptions import BotoCoreError, ClientError

from cli.i18n import t
from cli.output import OUTPUT_FORMATS, render_output
from cli.ui.console import print_error, print_warning
from core.cmdlet import CmdletAdapter, OperationDescriptor, ParameterSpec, ParameterType
from core.config import get_default_profile, settings
from core.exceptions import CmdletError, OperationCancelledError, format_error_for_user

logger = logging.getLogger(__name__)

# 파이프라인 파라미터에 이 값을 주면 표준 입력의 각 줄을 값으로 사용
PIPELINE_INPUT = "-"


def to_option_name(name: str) -> str:
    """파라미터 이름 → kebab-case 옵션 이름

    Examples:
        >>> to_option_name("MinUnit")
        'min-unit'
        >>> to_option_name("OpenIDConnectConfig_IatTTL")
        'open-id-connect-config-iat-ttl'
    """
    text = name.replace("_", "-")
    text = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1-\2", text)
    text = re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", text)
    return re.sub(r"-+", "-", text).lower()


def _param_dest(spec: ParameterSpec) -> str:
    return f"p_{to_option_name(spec.name).replace('-', '_')}"


def _build_option(spec: ParameterSpec) -> click.Option:
    flags = [f"--{to_option_name(spec.name)}"]
    for alias in spec.aliases:
        flag = f"--{to_option_name(alias)}"
        if flag not in flags:
            flags.append(flag)

    help_text = spec.description
    if spec.required:
        help_text = f"{help_text} [{t('cli.required')}]".strip()
    if spec.position is not None:
        help_text = f"{help_text} ({t('cli.position', position=spec.position)})"
    if spec.from_pipeline:
        help_text = f"{help_text} ({t('cli.pipeline_hint')})"

    kwargs: dict[str, Any] = {"help": help_text, "default": None}
    if spec.type.is_list or spec.type == ParameterType.MAP:
        kwargs["multiple"] = True
        kwargs["default"] = ()
    if spec.choices:
        kwargs["type"] = click.Choice(spec.choices, case_sensitive=False)
    elif spec.type == ParameterType.BOOLEAN:
        kwargs["metavar"] = "BOOLEAN"

    return click.Option([*flags, _param_dest(spec)], **kwargs)


def _collect_arguments(descriptor: OperationDescriptor, params: dict[str, Any]) -> dict[str, Any]:
    """click 파라미터 → cmdlet 인자 (지정하지 않은 값 제외)"""
    arguments: dict[str, Any] = {}
    for spec in descriptor.parameters:
        value = params.get(_param_dest(spec))
        if value is None or value == ():
            continue
        if isinstance(value, tuple):
            # 한 번만 지정한 값은 JSON 배열/객체 문자열일 수 있으므로 그대로 전달
            value = value[0] if len(value) == 1 else list(value)
        arguments[spec.name] = value
    return arguments


def _read_pipeline_values() -> list[str]:
    """표준 입력의 비어있지 않은 각 줄"""
    stream = click.get_text_stream("stdin")
    return [line.strip() for line in stream if line.strip()]


def _expand_pipeline_input(
    descriptor: OperationDescriptor,
    arguments: dict[str, Any],
    positional: tuple[str, ...],
) -> list[tuple[dict[str, Any], tuple[str, ...]]] | None:
    """파이프라인 파라미터 값 '-'를 표준 입력의 줄마다 한 번의 호출로 전개

    Returns:
        (arguments, positional) 호출 목록. '-'가 없으면 None,
        표준 입력이 비어 있으면 빈 목록
    """
    spec = descriptor.pipeline_parameter
    if spec is None:
        return None

    if arguments.get(spec.name) == PIPELINE_INPUT:
        return [({**arguments, spec.name: value}, positional) for value in _read_pipeline_values()]

    # 이름으로 지정하지 않은 위치 파라미터에 순서대로 할당되는 규칙과 동일
    free = [p.name for p in descriptor.positional_parameters if p.name not in arguments]
    if spec.name not in free:
        return None
    index = free.index(spec.name)
    if index >= len(positional) or positional[index] != PIPELINE_INPUT:
        return None
    return [
        (arguments, (*positional[:index], value, *positional[index + 1 :]))
        for value in _read_pipeline_values()
    ]


def run_cmdlet(
    descriptor: OperationDescriptor,
    arguments: dict[str, Any],
    positional: tuple[str, ...] = (),
    *,
    profile: str | None = None,
    region: str | None = None,
    endpoint_url: str | None = None,
    select: str | None = None,
    pass_thru: bool = False,
    force: bool = False,
    output_format: str = "console",
) -> int:
    """cmdlet 실행 후 결과 출력

    Returns:
        종료 코드 (0: 성공, 1: 오류, 130: 중단)
    """
    from core.client import create_session, get_client

    try:
        session = create_session(profile=profile, region=region)
        client_kwargs = {"endpoint_url": endpoint_url} if endpoint_url else {}
        client = get_client(session, descriptor.service, **client_kwargs)

        output = CmdletAdapter(descriptor).invoke(
            client,
            arguments,
            positional=positional,
            select=select,
            pass_thru=pass_thru,
            force=force,
        )
    except KeyboardInterrupt:
        print_warning(t("cli.interrupted"))
        return 130
    except OperationCancelledError as e:
        print_warning(str(e))
        return 1
    except (CmdletError, ClientError) as e:
        print_error(format_error_for_user(e))
        return 1
    except BotoCoreError as e:
        # NoCredentialsError, ProfileNotFound 등
        logger.debug(f"{descriptor.name} 실행 실패", exc_info=True)
        print_error(str(e))
        return 1

    render_output(output.pipeline_output, output_format)
    return 0


def build_cmdlet_command(descriptor: OperationDescriptor) -> click.Command:
    """OperationDescriptor로 click 명령 생성

    Args:
        descriptor: cmdlet 선언

    Returns:
        descriptor.name 이름의 click.Command
    """

    def callback(**params: Any) -> None:
        arguments = _collect_arguments(descriptor, params)
        positional = tuple(params.get("args") or ())

        calls = _expand_pipeline_input(descriptor, arguments, positional)
        if calls is None:
            calls = [(arguments, positional)]
        elif not calls:
            print_error(t("cli.no_pipeline_input", name=descriptor.pipeline_parameter.name))
            raise SystemExit(1)

        exit_code = 0
        for call_arguments, call_positional in calls:
            code = run_cmdlet(
                descriptor,
                call_arguments,
                call_positional,
                profile=params.get("profile") or get_default_profile(),
                region=params.get("region"),
                endpoint_url=params.get("endpoint_url"),
                select=params.get("select"),
                pass_thru=params.get("pass_thru", False),
                force=params.get("force", False),
                output_format=params.get("output_format") or settings.DEFAULT_OUTPUT_FORMAT,
            )
            if code == 130:
                raise SystemExit(code)
            # 실패한 값이 있어도 나머지 입력은 계속 처리
            exit_code = exit_code or code
        if exit_code:
            raise SystemExit(exit_code)

    params: list[click.Parameter] = []
    positional = descriptor.positional_parameters
    if positional:
        metavar = " ".join(p.name.upper() for p in positional)
        params.append(click.Argument(["args"], nargs=-1, metavar=f"[{metavar}]"))

    params.extend(_build_option(spec) for spec in descriptor.parameters)
    params.extend(
        [
            click.Option(["-p", "--profile"], default=None, help=t("cli.opt_profile")),
            click.Option(["-r", "--region"], default=None, help=t("cli.opt_region")),
            click.Option(["--endpoint-url"], default=None, help=t("cli.opt_endpoint_url")),
            click.Option(["-s", "--select"], default=None, help=t("cli.opt_select")),
            click.Option(["--pass-thru"], is_flag=True, default=False, help=t("cli.opt_pass_thru")),
            click.Option(["--force"], is_flag=True, default=False, help=t("cli.opt_force")),
            click.Option(
                ["-f", "--format", "output_format"],
                type=click.Choice(OUTPUT_FORMATS),
                default=None,
                help=t("cli.opt_format"),
            ),
        ]
    )

    help_text = f"{descriptor.description}\n\n{descriptor.service_display} {descriptor.api_name}"
    return click.Command(
        name=descriptor.name,
        callback=callback,
        params=params,
        help=help_text,
        short_help=descriptor.description,
    )
