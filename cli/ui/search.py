"""
cli/ui/search.py - cmdlet 검색 엔진

cmdlet 이름, API 이름, 서비스 이름/별칭, 설명을 대상으로 하는 점수 기반 검색
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from rapidfuzz import fuzz

from core.cmdlet.registry import ServiceInfo
from core.cmdlet.types import OperationDescriptor

# Fuzzy 검색 상수
FUZZY_MIN_SCORE = 70  # 최소 유사도 (%)
FUZZY_SCORE_BASE = 0.4  # fuzzy 기본 점수
FUZZY_SCORE_MAX = 0.7  # fuzzy 최대 점수
SERVICE_MATCH_SCORE = 0.75  # 서비스명/별칭 매칭 점수


@dataclass
class SearchResult:
    """검색 결과 항목"""

    descriptor: OperationDescriptor
    service: str
    service_display: str
    score: float  # 매칭 점수 (0-1)
    match_type: str  # exact, prefix, contains, service, fuzzy

    @property
    def name(self) -> str:
        return self.descriptor.name


def normalize_text(text: str) -> str:
    """검색용 텍스트 정규화

    - 소문자 변환
    - 구분자(_ - .) 공백 치환
    - 공백 정규화
    """
    text = text.lower()
    text = re.sub(r"[_\-\.]", " ", text)
    text = re.sub(r"\s+", " ", text)
    return text.strip()


class CmdletSearchEngine:
    """cmdlet 검색 엔진

    특징:
    - 점수 기반 매칭 (정확도순 정렬)
    - "서비스:검색어" 필터 문법 지원 (예: "osis:pipeline")
    """

    def __init__(self):
        self._index: list[dict] = []
        self._service_names: dict[str, str] = {}  # 정규화된 이름/별칭 → 서비스명
        self._built = False

    def build_index(self, services: tuple[ServiceInfo, ...] | list[ServiceInfo]) -> None:
        """검색 인덱스 구축

        Args:
            services: discover_services() 결과
        """
        self._index.clear()
        self._service_names.clear()

        for service in services:
            names = [service.name, *service.aliases]
            for name in names:
                self._service_names[normalize_text(name)] = service.name

            for descriptor in service.cmdlets:
                self._index.append(
                    {
                        "descriptor": descriptor,
                        "service": service.name,
                        "service_display": service.display_name,
                        "norm_name": normalize_text(descriptor.name),
                        "norm_noun": normalize_text(descriptor.noun),
                        "norm_api": normalize_text(descriptor.api_name),
                        "norm_desc": normalize_text(descriptor.description),
                        "norm_services": [normalize_text(n) for n in names],
                    }
                )

        self._built = True

    def search(self, query: str, limit: int = 10, service_filter: str | None = None) -> list[SearchResult]:
        """검색 실행

        Args:
            query: 검색 쿼리
            limit: 최대 결과 수
            service_filter: 특정 서비스만 검색 (선택)

        Returns:
            검색 결과 리스트 (점수 내림차순)
        """
        if not query or not query.strip() or not self._built:
            return []

        parsed_filter, search_query = self._parse_query(query.strip())
        if parsed_filter:
            service_filter = parsed_filter

        norm_query = normalize_text(search_query)
        results: list[tuple[float, str, dict]] = []

        for entry in self._index:
            if service_filter and entry["service"] != service_filter:
                continue

            if not norm_query:
                # 필터만 지정된 경우 해당 서비스 전체
                results.append((SERVICE_MATCH_SCORE, "service", entry))
                continue

            score, match_type = self._calculate_score(norm_query, entry)
            if score > 0:
                results.append((score, match_type, entry))

        results.sort(key=lambda x: (-x[0], x[2]["norm_name"]))

        return [
            SearchResult(
                descriptor=entry["descriptor"],
                service=entry["service"],
                service_display=entry["service_display"],
                score=score,
                match_type=match_type,
            )
            for score, match_type, entry in results[:limit]
        ]

    def _parse_query(self, query: str) -> tuple[str | None, str]:
        """서비스 필터 문법 파싱 ("osis:pipeline" → ("osis", "pipeline"))"""
        if ":" not in query:
            return None, query

        filter_part, _, search_part = query.partition(":")
        resolved = self._service_names.get(normalize_text(filter_part))
        if resolved:
            return resolved, search_part.strip()

        # 필터가 유효하지 않으면 원본 쿼리 사용
        return None, query

    def _calculate_score(self, query: str, entry: dict) -> tuple[float, str]:
        """매칭 점수 계산

        Returns:
            (점수, 매칭 유형)
        """
        name = entry["norm_name"]

        if query == name:
            return 1.0, "exact"
        if name.startswith(query) or entry["norm_noun"].startswith(query):
            return 0.9, "prefix"
        if query in name or query in entry["norm_api"]:
            return 0.8, "contains"
        if query in entry["norm_services"]:
            return SERVICE_MATCH_SCORE, "service"
        if query in entry["norm_desc"]:
            return 0.6, "contains"

        ratio = max(fuzz.ratio(query, name), fuzz.partial_ratio(query, entry["norm_noun"]))
        if ratio >= FUZZY_MIN_SCORE:
            scaled = FUZZY_SCORE_BASE + (ratio - FUZZY_MIN_SCORE) / (100 - FUZZY_MIN_SCORE) * (
                FUZZY_SCORE_MAX - FUZZY_SCORE_BASE
            )
            return scaled, "fuzzy"

        return 0.0, ""


_engine: CmdletSearchEngine | None = None


def get_search_engine() -> CmdletSearchEngine:
    """레지스트리로 인덱스를 구축한 전역 검색 엔진 반환"""
    global _engine
    if _engine is None:
        from core.cmdlet.registry import discover_services

        _engine = CmdletSearchEngine()
        _engine.build_index(discover_services())
    return _engine
