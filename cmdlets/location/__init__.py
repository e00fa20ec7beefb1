"""
cmdlets/location - Amazon Location Service

cmdlet 목록:
    - Search-LOCPlaceIndexForSuggestion: 자동완성 장소 제안 (SearchPlaceIndexForSuggestions)

BiasPosition과 FilterBBox는 서비스에서 상호 배타적입니다.
둘 다 지정하면 서비스가 ValidationException을 반환합니다.
"""

from core.cmdlet import ConfirmImpact, OperationDescriptor, ParameterSpec, ParameterType

SERVICE = {
    "name": "location",
    "display_name": "Amazon Location Service",
    "description": "장소 인덱스 검색",
    "description_en": "Place index search",
    "aliases": ["loc", "geo"],
}

SEARCH_LOC_PLACE_INDEX_FOR_SUGGESTION = OperationDescriptor(
    verb="Search",
    noun="LOCPlaceIndexForSuggestion",
    service="location",
    operation="search_place_index_for_suggestions",
    api_name="SearchPlaceIndexForSuggestions",
    service_display="Amazon Location Service",
    description="부분 입력 텍스트로 장소 후보를 제안합니다",
    parameters=(
        ParameterSpec("IndexName", required=True, position=0, from_pipeline=True, description="장소 인덱스 이름"),
        ParameterSpec("Text", required=True, description="검색할 부분 텍스트"),
        ParameterSpec(
            "BiasPosition",
            ParameterType.DOUBLE_LIST,
            description="우선 검색 위치 [경도, 위도]",
        ),
        ParameterSpec(
            "FilterBBox",
            ParameterType.DOUBLE_LIST,
            description="검색 영역 [남서 경도, 남서 위도, 북동 경도, 북동 위도]",
        ),
        ParameterSpec(
            "FilterCountry",
            ParameterType.STRING_LIST,
            aliases=("FilterCountries",),
            request_path="FilterCountries",
            description="ISO 3166 alpha-3 국가 코드 목록",
        ),
        ParameterSpec("Language", description="BCP 47 언어 태그 (예: ko, en)"),
        ParameterSpec(
            "MaxResult",
            ParameterType.INTEGER,
            aliases=("MaxResults",),
            request_path="MaxResults",
            description="최대 결과 수 (1-15)",
        ),
    ),
    pass_thru="IndexName",
    confirm_impact=ConfirmImpact.MEDIUM,
    confirm_parameter="IndexName",
    response_fields=("Summary", "Results"),
)

CMDLETS = [SEARCH_LOC_PLACE_INDEX_FOR_SUGGESTION]
