"""
cli/i18n/messages.py - CLI 메시지 카탈로그

키는 "cli.<이름>" 형식이며 값은 언어별 문자열입니다.
ko/en 두 언어의 placeholder({name} 등)는 같아야 합니다.
"""

from __future__ import annotations

from typing import TypedDict


class MessageDict(TypedDict):
    """언어별 메시지"""

    ko: str
    en: str


CLI_MESSAGES: dict[str, MessageDict] = {
    # =========================================================================
    # 도움말 섹션 이름
    # =========================================================================
    "section_utilities": {
        "ko": "유틸리티",
        "en": "Utilities",
    },
    # =========================================================================
    # 그룹 도움말
    # =========================================================================
    "help_intro": {
        "ko": "AWS 서비스 작업을 Verb-Noun 형식의 cmdlet으로 호출하는 CLI 도구입니다.",
        "en": "A CLI tool that invokes AWS service operations as Verb-Noun cmdlets.",
    },
    "help_basic_usage": {
        "ko": "[기본 사용법]",
        "en": "[Basic Usage]",
    },
    "help_list": {
        "ko": "cmdlet 목록 조회",
        "en": "List available cmdlets",
    },
    "help_describe": {
        "ko": "cmdlet 파라미터 상세",
        "en": "Show cmdlet parameters",
    },
    "help_search": {
        "ko": "cmdlet 검색",
        "en": "Search cmdlets",
    },
    "help_run": {
        "ko": "cmdlet 실행",
        "en": "Run a cmdlet",
    },
    "help_examples": {
        "ko": "[예시]",
        "en": "[Examples]",
    },
    # =========================================================================
    # cmdlet 공통 옵션
    # =========================================================================
    "required": {
        "ko": "필수",
        "en": "required",
    },
    "position": {
        "ko": "위치 {position}",
        "en": "position {position}",
    },
    "opt_profile": {
        "ko": "AWS 프로파일 (기본: AWS_PROFILE 또는 기본 자격 증명 체인)",
        "en": "AWS profile (default: AWS_PROFILE or default credential chain)",
    },
    "opt_region": {
        "ko": "리전 (기본: AWC_DEFAULT_REGION, AWS_DEFAULT_REGION, ap-northeast-2)",
        "en": "Region (default: AWC_DEFAULT_REGION, AWS_DEFAULT_REGION, ap-northeast-2)",
    },
    "opt_endpoint_url": {
        "ko": "서비스 엔드포인트 URL 재정의",
        "en": "Override the service endpoint URL",
    },
    "opt_select": {
        "ko": "출력 선택: '*' 전체 응답, 응답 필드 이름, '^파라미터' 입력 값",
        "en": "Output selection: '*' whole response, a response field, or '^Parameter' input value",
    },
    "opt_pass_thru": {
        "ko": "(deprecated) --select '^<파라미터>' 사용 권장",
        "en": "(deprecated) use --select '^<Parameter>' instead",
    },
    "opt_force": {
        "ko": "확인 프롬프트 생략",
        "en": "Skip the confirmation prompt",
    },
    "opt_format": {
        "ko": "출력 형식 (console, json)",
        "en": "Output format (console, json)",
    },
    # =========================================================================
    # list / describe / search
    # =========================================================================
    "available_cmdlets": {
        "ko": "사용 가능한 cmdlet",
        "en": "Available Cmdlets",
    },
    "col_cmdlet": {
        "ko": "cmdlet",
        "en": "Cmdlet",
    },
    "col_service": {
        "ko": "서비스",
        "en": "Service",
    },
    "col_operation": {
        "ko": "API",
        "en": "API",
    },
    "col_confirm": {
        "ko": "확인 수준",
        "en": "Confirm Impact",
    },
    "col_parameter": {
        "ko": "파라미터",
        "en": "Parameter",
    },
    "col_option": {
        "ko": "옵션",
        "en": "Option",
    },
    "col_type": {
        "ko": "타입",
        "en": "Type",
    },
    "col_required": {
        "ko": "필수",
        "en": "Required",
    },
    "col_request_path": {
        "ko": "요청 경로",
        "en": "Request Path",
    },
    "col_description": {
        "ko": "설명",
        "en": "Description",
    },
    "default_output": {
        "ko": "기본 출력",
        "en": "Default output",
    },
    "usage_hint": {
        "ko": "사용법: awc describe <cmdlet> 으로 파라미터 확인 후 awc <cmdlet> [옵션]",
        "en": "Usage: awc describe <cmdlet> to see parameters, then awc <cmdlet> [options]",
    },
    "service_not_found": {
        "ko": "서비스 '{name}'을(를) 찾을 수 없습니다.",
        "en": "Service '{name}' not found.",
    },
    "search_results": {
        "ko": "'{query}' 검색 결과",
        "en": "Search results for '{query}'",
    },
    "no_search_results": {
        "ko": "'{query}'에 해당하는 cmdlet이 없습니다.",
        "en": "No cmdlets match '{query}'.",
    },
    # =========================================================================
    # 오류
    # =========================================================================
    "cmdlet_not_found_suggest": {
        "ko": "'{name}' 명령어를 찾을 수 없습니다. 혹시 {suggestions} 을(를) 찾으셨나요?",
        "en": "No such command '{name}'. Did you mean {suggestions}?",
    },
    "did_you_mean": {
        "ko": "유사한 cmdlet: {suggestions}",
        "en": "Did you mean: {suggestions}",
    },
    "pipeline_input": {
        "ko": "파이프라인 입력",
        "en": "Pipeline input",
    },
    "request_groups": {
        "ko": "요청 그룹",
        "en": "Request groups",
    },
    "pipeline_hint": {
        "ko": "- 이면 표준 입력의 줄마다 실행",
        "en": "- runs once per stdin line",
    },
    "no_pipeline_input": {
        "ko": "표준 입력에서 '{name}' 값을 읽지 못했습니다.",
        "en": "No input on stdin for '{name}'.",
    },
    "interrupted": {
        "ko": "사용자에 의해 중단되었습니다",
        "en": "Interrupted by user",
    },
}

MESSAGES: dict[str, MessageDict] = {f"cli.{key}": value for key, value in CLI_MESSAGES.items()}
