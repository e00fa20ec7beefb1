"""
cmdlets/cognito_idp - Amazon Cognito Identity Provider

cmdlet 목록:
    - Get-CGIPUserPool: 사용자 풀 조회 (DescribeUserPool)
"""

from core.cmdlet import OperationDescriptor, ParameterSpec

SERVICE = {
    "name": "cognito_idp",
    "display_name": "Amazon Cognito Identity Provider",
    "description": "Cognito 사용자 풀 관리",
    "description_en": "Cognito user pool management",
    "aliases": ["cognito-idp", "cognito"],
}

GET_CGIP_USER_POOL = OperationDescriptor(
    verb="Get",
    noun="CGIPUserPool",
    service="cognito-idp",
    operation="describe_user_pool",
    api_name="DescribeUserPool",
    service_display="Amazon Cognito Identity Provider",
    description="사용자 풀 설정을 조회합니다",
    parameters=(
        ParameterSpec(
            "UserPoolId",
            required=True,
            position=0,
            from_pipeline=True,
            description="조회할 사용자 풀 ID",
        ),
    ),
    default_select="UserPool",
    pass_thru="UserPoolId",
    response_fields=("UserPool",),
)

CMDLETS = [GET_CGIP_USER_POOL]
