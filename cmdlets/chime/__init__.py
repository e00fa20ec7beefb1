"""
cmdlets/chime - Amazon Chime

cmdlet 목록:
    - Remove-CHMChannelMessage: 채널 메시지 삭제 (DeleteChannelMessage)
"""

from core.cmdlet import ConfirmImpact, OperationDescriptor, ParameterSpec

SERVICE = {
    "name": "chime",
    "display_name": "Amazon Chime",
    "description": "Chime 메시징 채널 관리",
    "description_en": "Chime messaging channel management",
    "aliases": ["chm"],
}

REMOVE_CHM_CHANNEL_MESSAGE = OperationDescriptor(
    verb="Remove",
    noun="CHMChannelMessage",
    service="chime",
    operation="delete_channel_message",
    api_name="DeleteChannelMessage",
    service_display="Amazon Chime",
    description="채널 메시지를 삭제합니다 (백엔드에서 즉시 삭제, 복구 불가)",
    parameters=(
        ParameterSpec("ChannelArn", required=True, position=0, from_pipeline=True, description="채널 ARN"),
        ParameterSpec("MessageId", required=True, description="삭제할 메시지 ID"),
        ParameterSpec("ChimeBearer", description="호출하는 AppInstanceUser ARN"),
    ),
    pass_thru="ChannelArn",
    confirm_impact=ConfirmImpact.HIGH,
    confirm_parameter="MessageId",
)

CMDLETS = [REMOVE_CHM_CHANNEL_MESSAGE]
