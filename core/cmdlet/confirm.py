"""
core/cmdlet/confirm.py - 확인 프롬프트

영향도가 설정 임계값 이상인 작업은 --force가 없으면 요청을 만들기 전에
사용자 확인을 받습니다.

임계값(settings.CONFIRM_PREFERENCE):
    none    확인하지 않음
    low     LOW 이상 모두 확인
    medium  MEDIUM 이상 확인
    high    HIGH만 확인 (기본값 - Remove-* 작업)
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from core.config import settings

from .context import BoundContext
from .types import ConfirmImpact, OperationDescriptor

logger = logging.getLogger(__name__)

Confirmer = Callable[[str], bool]


def requires_confirmation(impact: ConfirmImpact, preference: str | None = None) -> bool:
    """영향도와 임계값으로 확인 필요 여부 판단"""
    threshold = ConfirmImpact((preference or settings.CONFIRM_PREFERENCE).lower())
    if threshold == ConfirmImpact.NONE or impact == ConfirmImpact.NONE:
        return False
    return impact.rank >= threshold.rank


def format_confirmation_message(descriptor: OperationDescriptor, context: BoundContext) -> str:
    """확인 메시지 생성

    Example:
        "Remove-CFStreamingDistribution (DeleteStreamingDistribution) 작업을 수행합니다.
         대상: Id=EDFDVBD6EXAMPLE. 계속하시겠습니까?"
    """
    target = ""
    if descriptor.confirm_parameter:
        value = context.get(descriptor.confirm_parameter)
        if value is not None:
            target = f" 대상: {descriptor.confirm_parameter}={value}."
    return f"{descriptor.label} 작업을 수행합니다.{target} 계속하시겠습니까?"


def prompt_confirmation(message: str) -> bool:
    """questionary 확인 프롬프트 (Ctrl+C/EOF는 거절로 처리)"""
    import questionary

    answer = questionary.confirm(message, default=False).ask()
    return bool(answer)


def confirm_should_proceed(
    descriptor: OperationDescriptor,
    context: BoundContext,
    force: bool = False,
    confirmer: Confirmer | None = None,
    preference: str | None = None,
) -> bool:
    """작업 진행 여부 확인

    Args:
        descriptor: cmdlet 선언
        context: 바인딩된 파라미터 값
        force: True면 확인 생략
        confirmer: 확인 함수 (기본: questionary 프롬프트)
        preference: 임계값 (기본: settings.CONFIRM_PREFERENCE)

    Returns:
        진행하면 True
    """
    if force or not requires_confirmation(descriptor.confirm_impact, preference):
        return True

    message = format_confirmation_message(descriptor, context)
    proceed = (confirmer or prompt_confirmation)(message)
    if not proceed:
        logger.info(f"[{descriptor.name}] 사용자가 확인을 거절했습니다")
    return proceed
