"""
cli/i18n/__init__.py - CLI 다국어(ko/en) 메시지

도움말, 표 제목, 오류 안내 문구를 현재 언어로 돌려줍니다.
기본 언어는 한국어이며 그룹 옵션 --lang 으로 바꿉니다.

언어 상태:
    ContextVar에 보관합니다. cli() 콜백과, 콜백보다 먼저 실행되는
    명령어 조회 경로(CmdletCommandsGroup)가 set_lang()을 호출합니다.

Usage:
    from cli.i18n import t, set_lang

    t("cli.interrupted")                      # "사용자에 의해 중단되었습니다"
    t("cli.service_not_found", name="osis")   # placeholder 치환
    t("cli.section_utilities", lang="en")     # 현재 언어를 바꾸지 않고 조회
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any

SUPPORTED_LANGS = ("ko", "en")
DEFAULT_LANG = "ko"

_current_lang: ContextVar[str] = ContextVar("awc_lang", default=DEFAULT_LANG)


def get_lang() -> str:
    """현재 언어 코드"""
    return _current_lang.get()


def set_lang(lang: str) -> None:
    """현재 언어 설정 (지원하지 않는 코드는 기본 언어로)"""
    _current_lang.set(lang if lang in SUPPORTED_LANGS else DEFAULT_LANG)


def t(key: str, lang: str | None = None, **kwargs: Any) -> str:
    """메시지 키를 현재 언어 문자열로 변환

    Args:
        key: "cli.<이름>" 형식 메시지 키
        lang: 이번 조회에만 쓸 언어 (None이면 현재 언어)
        **kwargs: placeholder 값

    Returns:
        번역 문자열. 키가 없으면 키 자체, placeholder 값이 모자라면
        치환하지 않은 원문
    """
    from cli.i18n.messages import MESSAGES

    entry = MESSAGES.get(key)
    if entry is None:
        return key

    if lang not in SUPPORTED_LANGS:
        lang = get_lang()
    text = entry.get(lang) or entry[DEFAULT_LANG]

    if not kwargs:
        return text
    try:
        return text.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        return text


__all__ = [
    "t",
    "get_lang",
    "set_lang",
    "SUPPORTED_LANGS",
    "DEFAULT_LANG",
]
