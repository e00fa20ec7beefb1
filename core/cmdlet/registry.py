"""
core/cmdlet/registry.py - cmdlet 자동 발견

cmdlets/ 패키지의 서비스 폴더를 스캔하여 cmdlet 선언을 수집합니다.
각 서비스 폴더의 __init__.py는 SERVICE(dict)와 CMDLETS(list)를 정의합니다.

    cmdlets/osis/__init__.py
        SERVICE = {"name": "osis", "display_name": "...", "aliases": [...]}
        CMDLETS = [NEW_OSIS_PIPELINE]

Usage:
    from core.cmdlet.registry import get_cmdlet, list_cmdlets

    descriptor = get_cmdlet("new-osispipeline")  # 대소문자 무관
    for d in list_cmdlets(service="osis"):
        print(d.name)
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from dataclasses import dataclass
from functools import lru_cache

from rapidfuzz import fuzz

from core.exceptions import CmdletNotFoundError

from .types import OperationDescriptor

logger = logging.getLogger(__name__)

CMDLETS_PACKAGE = "cmdlets"
SUGGEST_MIN_SCORE = 60  # 최소 유사도 (%)

REQUIRED_SERVICE_FIELDS = ("name", "display_name", "description")


@dataclass(frozen=True)
class ServiceInfo:
    """서비스(폴더) 메타데이터"""

    name: str
    display_name: str
    description: str
    description_en: str = ""
    aliases: tuple[str, ...] = ()
    cmdlets: tuple[OperationDescriptor, ...] = ()

    def get_description(self, lang: str = "ko") -> str:
        if lang == "en":
            return self.description_en or self.description
        return self.description


def _load_service(module_name: str) -> ServiceInfo | None:
    module = importlib.import_module(module_name)
    meta = getattr(module, "SERVICE", None)
    cmdlets = getattr(module, "CMDLETS", None)
    if not isinstance(meta, dict) or not cmdlets:
        logger.debug(f"{module_name}: SERVICE/CMDLETS 없음, 건너뜀")
        return None

    missing = [f for f in REQUIRED_SERVICE_FIELDS if f not in meta]
    if missing:
        raise ValueError(f"{module_name}: SERVICE 필수 필드 누락: {missing}")

    return ServiceInfo(
        name=meta["name"],
        display_name=meta["display_name"],
        description=meta["description"],
        description_en=meta.get("description_en", ""),
        aliases=tuple(meta.get("aliases", ())),
        cmdlets=tuple(cmdlets),
    )


@lru_cache(maxsize=None)
def discover_services(package: str = CMDLETS_PACKAGE) -> tuple[ServiceInfo, ...]:
    """서비스 패키지 스캔

    Args:
        package: 스캔할 최상위 패키지 이름

    Returns:
        이름순 ServiceInfo 튜플
    """
    root = importlib.import_module(package)
    services: list[ServiceInfo] = []
    for module_info in pkgutil.iter_modules(root.__path__):
        if not module_info.ispkg or module_info.name.startswith("_"):
            continue
        service = _load_service(f"{package}.{module_info.name}")
        if service is not None:
            services.append(service)

    names = [d.name.lower() for s in services for d in s.cmdlets]
    duplicates = {n for n in names if names.count(n) > 1}
    if duplicates:
        raise ValueError(f"cmdlet 이름 중복: {sorted(duplicates)}")

    return tuple(sorted(services, key=lambda s: s.name))


def get_service(name: str, package: str = CMDLETS_PACKAGE) -> ServiceInfo | None:
    """서비스 이름 또는 별칭으로 조회"""
    lowered = name.lower()
    for service in discover_services(package):
        if lowered == service.name.lower() or lowered in (a.lower() for a in service.aliases):
            return service
    return None


def list_cmdlets(service: str | None = None, package: str = CMDLETS_PACKAGE) -> list[OperationDescriptor]:
    """cmdlet 목록 (service 지정 시 해당 서비스만)"""
    if service is not None:
        info = get_service(service, package)
        return list(info.cmdlets) if info else []
    return [d for s in discover_services(package) for d in s.cmdlets]


def suggest_cmdlets(name: str, limit: int = 3, package: str = CMDLETS_PACKAGE) -> list[str]:
    """유사한 cmdlet 이름 제안 (rapidfuzz)"""
    query = name.lower()
    scored = []
    for descriptor in list_cmdlets(package=package):
        score = fuzz.ratio(query, descriptor.name.lower())
        if score >= SUGGEST_MIN_SCORE:
            scored.append((score, descriptor.name))
    scored.sort(key=lambda item: (-item[0], item[1]))
    return [cmdlet_name for _, cmdlet_name in scored[:limit]]


def get_cmdlet(name: str, package: str = CMDLETS_PACKAGE) -> OperationDescriptor:
    """cmdlet 이름(Verb-Noun)으로 조회 (대소문자 무관)

    Raises:
        CmdletNotFoundError: 없는 이름 (유사 이름 제안 포함)
    """
    lowered = name.lower()
    for descriptor in list_cmdlets(package=package):
        if descriptor.name.lower() == lowered:
            return descriptor
    raise CmdletNotFoundError(name, suggest_cmdlets(name, package=package))
