"""
cmdlets/appsync - AWS AppSync

cmdlet 목록:
    - New-ASYNGraphqlApi: GraphQL API 생성 (CreateGraphqlApi)

LogConfig_*, LambdaAuthorizerConfig_*, OpenIDConnectConfig_* 파라미터는
각각 logConfig, lambdaAuthorizerConfig, openIDConnectConfig 하위 객체로
묶이며, 멤버가 하나라도 지정된 그룹만 요청에 포함됩니다.
"""

from core.cmdlet import ConfirmImpact, OperationDescriptor, ParameterSpec, ParameterType

SERVICE = {
    "name": "appsync",
    "display_name": "AWS AppSync",
    "description": "GraphQL API 관리",
    "description_en": "GraphQL API management",
    "aliases": ["asyn"],
}

AUTHENTICATION_TYPES = (
    "API_KEY",
    "AWS_IAM",
    "AMAZON_COGNITO_USER_POOLS",
    "OPENID_CONNECT",
    "AWS_LAMBDA",
)

NEW_ASYN_GRAPHQL_API = OperationDescriptor(
    verb="New",
    noun="ASYNGraphqlApi",
    service="appsync",
    operation="create_graphql_api",
    api_name="CreateGraphqlApi",
    service_display="AWS AppSync",
    description="GraphQL API를 생성합니다",
    parameters=(
        ParameterSpec("Name", required=True, position=0, from_pipeline=True, request_path="name", description="API 이름"),
        ParameterSpec(
            "AuthenticationType",
            required=True,
            choices=AUTHENTICATION_TYPES,
            request_path="authenticationType",
            description="인증 유형",
        ),
        ParameterSpec("ApiType", choices=("GRAPHQL", "MERGED"), request_path="apiType", description="API 유형"),
        ParameterSpec(
            "Visibility",
            choices=("GLOBAL", "PRIVATE"),
            request_path="visibility",
            description="공개(GLOBAL) 또는 비공개(PRIVATE)",
        ),
        ParameterSpec(
            "MergedApiExecutionRoleArn",
            request_path="mergedApiExecutionRoleArn",
            description="Merged API가 소스 API에 접근할 때 사용할 Role ARN",
        ),
        ParameterSpec("OwnerContact", request_path="ownerContact", description="API 소유자 연락처"),
        ParameterSpec("XrayEnabled", ParameterType.BOOLEAN, request_path="xrayEnabled", description="X-Ray 추적 활성화"),
        ParameterSpec(
            "Tag",
            ParameterType.MAP,
            aliases=("Tags",),
            request_path="tags",
            description="태그 (key=value, 여러 번 지정 가능)",
        ),
        ParameterSpec(
            "UserPoolConfig",
            ParameterType.JSON,
            request_path="userPoolConfig",
            description="Cognito 사용자 풀 설정 (JSON)",
        ),
        ParameterSpec(
            "AdditionalAuthenticationProvider",
            ParameterType.JSON,
            aliases=("AdditionalAuthenticationProviders",),
            request_path="additionalAuthenticationProviders",
            description="추가 인증 공급자 목록 (JSON 배열)",
        ),
        # logConfig
        ParameterSpec(
            "LogConfig_FieldLogLevel",
            choices=("NONE", "ERROR", "ALL", "INFO", "DEBUG"),
            request_path="logConfig.fieldLogLevel",
            description="필드 리졸버 로그 수준",
        ),
        ParameterSpec(
            "LogConfig_CloudWatchLogsRoleArn",
            request_path="logConfig.cloudWatchLogsRoleArn",
            description="CloudWatch Logs 게시용 Role ARN",
        ),
        ParameterSpec(
            "LogConfig_ExcludeVerboseContent",
            ParameterType.BOOLEAN,
            request_path="logConfig.excludeVerboseContent",
            description="헤더/컨텍스트/매핑 템플릿 등 상세 내용 제외",
        ),
        # lambdaAuthorizerConfig
        ParameterSpec(
            "LambdaAuthorizerConfig_AuthorizerUri",
            request_path="lambdaAuthorizerConfig.authorizerUri",
            description="권한 부여 Lambda 함수 ARN",
        ),
        ParameterSpec(
            "LambdaAuthorizerConfig_AuthorizerResultTtlInSecond",
            ParameterType.INTEGER,
            aliases=("LambdaAuthorizerConfig_AuthorizerResultTtlInSeconds",),
            request_path="lambdaAuthorizerConfig.authorizerResultTtlInSeconds",
            description="권한 부여 결과 캐시 시간 (초)",
        ),
        ParameterSpec(
            "LambdaAuthorizerConfig_IdentityValidationExpression",
            request_path="lambdaAuthorizerConfig.identityValidationExpression",
            description="토큰 검증 정규식",
        ),
        # openIDConnectConfig
        ParameterSpec(
            "OpenIDConnectConfig_Issuer",
            request_path="openIDConnectConfig.issuer",
            description="OIDC issuer URL",
        ),
        ParameterSpec(
            "OpenIDConnectConfig_ClientId",
            request_path="openIDConnectConfig.clientId",
            description="OIDC client ID",
        ),
        ParameterSpec(
            "OpenIDConnectConfig_IatTTL",
            ParameterType.LONG,
            request_path="openIDConnectConfig.iatTTL",
            description="발급 시각 기준 토큰 유효 시간 (ms)",
        ),
        ParameterSpec(
            "OpenIDConnectConfig_AuthTTL",
            ParameterType.LONG,
            request_path="openIDConnectConfig.authTTL",
            description="인증 시각 기준 토큰 유효 시간 (ms)",
        ),
    ),
    default_select="graphqlApi",
    pass_thru="Name",
    confirm_impact=ConfirmImpact.MEDIUM,
    confirm_parameter="Name",
    response_fields=("graphqlApi",),
)

CMDLETS = [NEW_ASYN_GRAPHQL_API]
