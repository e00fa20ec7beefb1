"""
cmdlets/iot_roborunner - AWS IoT RoboRunner

cmdlet 목록:
    - New-IOTRRWorkerFleet: 워커 플릿 생성 (CreateWorkerFleet)
"""

from core.cmdlet import ConfirmImpact, OperationDescriptor, ParameterSpec

SERVICE = {
    "name": "iot_roborunner",
    "display_name": "AWS IoT RoboRunner",
    "description": "로봇 플릿/사이트 관리",
    "description_en": "Robot fleet and site management",
    "aliases": ["iot-roborunner", "roborunner"],
}

NEW_IOTRR_WORKER_FLEET = OperationDescriptor(
    verb="New",
    noun="IOTRRWorkerFleet",
    service="iot-roborunner",
    operation="create_worker_fleet",
    api_name="CreateWorkerFleet",
    service_display="AWS IoT RoboRunner",
    description="워커 플릿을 생성합니다",
    parameters=(
        ParameterSpec("Name", required=True, request_path="name", description="플릿 이름"),
        ParameterSpec("Site", required=True, request_path="site", description="사이트 ARN"),
        ParameterSpec("ClientToken", request_path="clientToken", description="멱등성 토큰"),
        ParameterSpec(
            "AdditionalFixedProperty",
            aliases=("AdditionalFixedProperties",),
            request_path="additionalFixedProperties",
            description="추가 고정 속성 (JSON 문자열)",
        ),
    ),
    confirm_impact=ConfirmImpact.MEDIUM,
    response_fields=("arn", "id", "createdAt", "updatedAt"),
)

CMDLETS = [NEW_IOTRR_WORKER_FLEET]
