"""
cmdlets/codeguru_security - Amazon CodeGuru Security

cmdlet 목록:
    - Get-CGSScanList: 표준 스캔 목록 조회 (ListScans)

페이지 반복은 하지 않습니다. 다음 페이지는 응답의 nextToken을
--next-token으로 넘겨 다시 호출합니다.
"""

from core.cmdlet import OperationDescriptor, ParameterSpec, ParameterType

SERVICE = {
    "name": "codeguru_security",
    "display_name": "Amazon CodeGuru Security",
    "description": "코드 보안 스캔 관리",
    "description_en": "Code security scan management",
    "aliases": ["codeguru-security", "cgs"],
}

GET_CGS_SCAN_LIST = OperationDescriptor(
    verb="Get",
    noun="CGSScanList",
    service="codeguru-security",
    operation="list_scans",
    api_name="ListScans",
    service_display="Amazon CodeGuru Security",
    description="계정의 표준 스캔 목록을 조회합니다 (express 스캔 제외)",
    parameters=(
        ParameterSpec(
            "MaxResult",
            ParameterType.INTEGER,
            aliases=("MaxResults",),
            request_path="maxResults",
            description="응답 최대 결과 수",
        ),
        ParameterSpec("NextToken", request_path="nextToken", description="다음 페이지 토큰"),
    ),
    default_select="summaries",
    response_fields=("summaries", "nextToken"),
)

CMDLETS = [GET_CGS_SCAN_LIST]
