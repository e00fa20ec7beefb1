"""
cmdlets/osis - Amazon OpenSearch Ingestion

cmdlet 목록:
    - New-OSISPipeline: OpenSearch Ingestion 파이프라인 생성 (CreatePipeline)
"""

from core.cmdlet import ConfirmImpact, OperationDescriptor, ParameterSpec, ParameterType

SERVICE = {
    "name": "osis",
    "display_name": "Amazon OpenSearch Ingestion",
    "description": "OpenSearch Ingestion 파이프라인 관리",
    "description_en": "OpenSearch Ingestion pipeline management",
    "aliases": ["opensearch-ingestion"],
}

NEW_OSIS_PIPELINE = OperationDescriptor(
    verb="New",
    noun="OSISPipeline",
    service="osis",
    operation="create_pipeline",
    api_name="CreatePipeline",
    service_display="Amazon OpenSearch Ingestion",
    description="OpenSearch Ingestion 파이프라인을 생성합니다",
    parameters=(
        ParameterSpec(
            "PipelineName",
            required=True,
            position=0,
            from_pipeline=True,
            description="생성할 파이프라인 이름 (계정/리전 내 고유)",
        ),
        ParameterSpec(
            "MinUnit",
            ParameterType.INTEGER,
            required=True,
            aliases=("MinUnits",),
            request_path="MinUnits",
            description="최소 파이프라인 용량 (ICU)",
        ),
        ParameterSpec(
            "MaxUnit",
            ParameterType.INTEGER,
            required=True,
            aliases=("MaxUnits",),
            request_path="MaxUnits",
            description="최대 파이프라인 용량 (ICU)",
        ),
        ParameterSpec(
            "PipelineConfigurationBody",
            required=True,
            description="YAML 형식 파이프라인 설정",
        ),
        ParameterSpec(
            "LogPublishingOptions_IsLoggingEnabled",
            ParameterType.BOOLEAN,
            request_path="LogPublishingOptions.IsLoggingEnabled",
            description="로그 게시 여부",
        ),
        ParameterSpec(
            "CloudWatchLogDestination_LogGroup",
            aliases=("LogPublishingOptions_CloudWatchLogDestination_LogGroup",),
            request_path="LogPublishingOptions.CloudWatchLogDestination.LogGroup",
            description="파이프라인 로그를 보낼 CloudWatch Logs 그룹",
        ),
        ParameterSpec(
            "VpcOptions_SecurityGroupId",
            ParameterType.STRING_LIST,
            aliases=("VpcOptions_SecurityGroupIds",),
            request_path="VpcOptions.SecurityGroupIds",
            description="VPC 엔드포인트 보안 그룹 목록",
        ),
        ParameterSpec(
            "VpcOptions_SubnetId",
            ParameterType.STRING_LIST,
            aliases=("VpcOptions_SubnetIds",),
            request_path="VpcOptions.SubnetIds",
            description="VPC 엔드포인트 서브넷 목록",
        ),
        ParameterSpec(
            "Tag",
            ParameterType.JSON,
            aliases=("Tags",),
            request_path="Tags",
            description='태그 목록 (JSON: [{"Key": "k", "Value": "v"}])',
        ),
    ),
    default_select="Pipeline",
    pass_thru="PipelineName",
    confirm_impact=ConfirmImpact.MEDIUM,
    confirm_parameter="PipelineName",
    response_fields=("Pipeline",),
)

CMDLETS = [NEW_OSIS_PIPELINE]
