"""
cmdlets/chime_sdk_messaging - Amazon Chime SDK Messaging

cmdlet 목록:
    - Send-CHMMGChannelMessage: 채널 메시지 전송 (SendChannelMessage)
"""

from core.cmdlet import ConfirmImpact, OperationDescriptor, ParameterSpec, ParameterType

SERVICE = {
    "name": "chime_sdk_messaging",
    "display_name": "Amazon Chime SDK Messaging",
    "description": "Chime SDK 메시징 채널",
    "description_en": "Chime SDK messaging channels",
    "aliases": ["chime-sdk-messaging", "chmmg"],
}

SEND_CHMMG_CHANNEL_MESSAGE = OperationDescriptor(
    verb="Send",
    noun="CHMMGChannelMessage",
    service="chime-sdk-messaging",
    operation="send_channel_message",
    api_name="SendChannelMessage",
    service_display="Amazon Chime SDK Messaging",
    description="채널에 메시지를 전송합니다",
    parameters=(
        ParameterSpec("ChannelArn", required=True, position=0, from_pipeline=True, description="채널 ARN"),
        ParameterSpec("ChimeBearer", required=True, description="호출하는 AppInstanceUser/Bot ARN"),
        ParameterSpec("Content", required=True, description="메시지 내용"),
        ParameterSpec(
            "Type",
            required=True,
            choices=("STANDARD", "CONTROL"),
            description="메시지 유형",
        ),
        ParameterSpec(
            "Persistence",
            required=True,
            choices=("PERSISTENT", "NON_PERSISTENT"),
            description="메시지 보존 여부",
        ),
        ParameterSpec("ClientRequestToken", description="멱등성 토큰"),
        ParameterSpec("Metadata", description="메시지 메타데이터"),
        ParameterSpec(
            "MessageAttribute",
            ParameterType.JSON,
            aliases=("MessageAttributes",),
            request_path="MessageAttributes",
            description='메시지 속성 (JSON: {"name": {"StringValues": ["v"]}})',
        ),
        ParameterSpec(
            "PushNotification_Title",
            request_path="PushNotification.Title",
            description="푸시 알림 제목",
        ),
        ParameterSpec(
            "PushNotification_Body",
            request_path="PushNotification.Body",
            description="푸시 알림 본문",
        ),
        ParameterSpec(
            "PushNotification_Type",
            choices=("DEFAULT", "VOIP"),
            request_path="PushNotification.Type",
            description="푸시 알림 유형",
        ),
    ),
    pass_thru="ChannelArn",
    confirm_impact=ConfirmImpact.MEDIUM,
    confirm_parameter="ChannelArn",
    response_fields=("ChannelArn", "MessageId", "Status", "SubChannelId"),
)

CMDLETS = [SEND_CHMMG_CHANNEL_MESSAGE]
