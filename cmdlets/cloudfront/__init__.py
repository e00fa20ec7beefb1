"""
cmdlets/cloudfront - Amazon CloudFront

cmdlet 목록:
    - Remove-CFStreamingDistribution: RTMP 스트리밍 배포 삭제 (DeleteStreamingDistribution)

삭제 전에 배포를 비활성화하고 GetStreamingDistributionConfig 응답의
ETag를 --if-match로 전달해야 합니다.
"""

from core.cmdlet import ConfirmImpact, OperationDescriptor, ParameterSpec

SERVICE = {
    "name": "cloudfront",
    "display_name": "Amazon CloudFront",
    "description": "CloudFront 배포 관리",
    "description_en": "CloudFront distribution management",
    "aliases": ["cf"],
}

REMOVE_CF_STREAMING_DISTRIBUTION = OperationDescriptor(
    verb="Remove",
    noun="CFStreamingDistribution",
    service="cloudfront",
    operation="delete_streaming_distribution",
    api_name="DeleteStreamingDistribution",
    service_display="Amazon CloudFront",
    description="스트리밍 배포를 삭제합니다",
    parameters=(
        ParameterSpec("Id", required=True, position=0, from_pipeline=True, description="배포 ID"),
        ParameterSpec("IfMatch", position=1, description="배포를 비활성화할 때 받은 ETag 값"),
    ),
    pass_thru="Id",
    confirm_impact=ConfirmImpact.HIGH,
    confirm_parameter="Id",
)

CMDLETS = [REMOVE_CF_STREAMING_DISTRIBUTION]
