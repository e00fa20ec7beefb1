"""
tests/conftest.py - pytest 공통 픽스처

cmdlet 테스트용 디스크립터, boto3 클라이언트 모킹 픽스처를 제공합니다.

Usage:
    def test_something(widget_descriptor, mock_client):
        # widget_descriptor: 중첩 그룹/별칭/위치 인자를 가진 테스트용 cmdlet
        # mock_client: 호출 기록 확인용 MagicMock 클라이언트
        pass
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정"""
    # 테스트용 환경 변수 설정
    monkeypatch.setenv("AWS_DEFAULT_REGION", "ap-northeast-2")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    monkeypatch.delenv("AWC_DEFAULT_REGION", raising=False)

    yield

    # 언어 초기화
    from cli.i18n import set_lang

    set_lang("ko")


# =============================================================================
# cmdlet 픽스처
# =============================================================================


@pytest.fixture
def widget_descriptor():
    """테스트용 cmdlet 선언

    - Name: 필수, 위치 0
    - Size: 정수, 별칭 Sizes
    - Config_Color / Config_Depth: Config 그룹
    - Config_Limits_Max: Config.Limits 하위 그룹
    - Tag: 문자열 목록 → Tags
    """
    from core.cmdlet import ConfirmImpact, OperationDescriptor, ParameterSpec, ParameterType

    return OperationDescriptor(
        verb="New",
        noun="TSTWidget",
        service="widget",
        operation="create_widget",
        api_name="CreateWidget",
        service_display="Test Widget",
        parameters=(
            ParameterSpec("Name", required=True, position=0, from_pipeline=True),
            ParameterSpec("Size", ParameterType.INTEGER, aliases=("Sizes",)),
            ParameterSpec("Config_Color", request_path="Config.Color", choices=("RED", "BLUE")),
            ParameterSpec("Config_Depth", ParameterType.INTEGER, request_path="Config.Depth"),
            ParameterSpec("Config_Limits_Max", ParameterType.INTEGER, request_path="Config.Limits.Max"),
            ParameterSpec("Tag", ParameterType.STRING_LIST, aliases=("Tags",), request_path="Tags"),
            ParameterSpec("DryRun", ParameterType.BOOLEAN, default=False),
        ),
        default_select="Widget",
        pass_thru="Name",
        confirm_impact=ConfirmImpact.MEDIUM,
        confirm_parameter="Name",
        response_fields=("Widget", "RequestId"),
    )


@pytest.fixture
def mock_client():
    """boto3 클라이언트 모킹 (create_widget 기본 응답)"""
    client = MagicMock()
    client.meta.region_name = "ap-northeast-2"
    client.meta.endpoint_url = "https://widget.ap-northeast-2.amazonaws.com"
    client.create_widget.return_value = {
        "Widget": {"Name": "w1", "Arn": "arn:aws:widget:ap-northeast-2:123456789012:widget/w1"},
        "RequestId": "req-1",
        "ResponseMetadata": {"HTTPStatusCode": 200},
    }
    return client


@pytest.fixture
def confirm_yes():
    """항상 승인하는 확인 함수"""
    return MagicMock(return_value=True)


@pytest.fixture
def confirm_no():
    """항상 거절하는 확인 함수"""
    return MagicMock(return_value=False)


# =============================================================================
# moto 통합 (선택적)
# =============================================================================

try:
    import moto

    @pytest.fixture
    def aws_credentials(monkeypatch):
        """moto 사용 시 AWS 자격 증명 설정"""
        monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
        monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
        monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
        monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
        monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")

    @pytest.fixture
    def moto_cognito(aws_credentials):
        """moto를 사용한 Cognito User Pool 모킹

        Yields:
            (cognito-idp client, user pool ID)
        """
        with moto.mock_aws():
            import boto3

            client = boto3.client("cognito-idp", region_name="us-east-1")
            pool = client.create_user_pool(PoolName="test-pool")
            yield client, pool["UserPool"]["Id"]

except ImportError:
    # moto가 설치되지 않은 경우 더미 픽스처
    @pytest.fixture
    def moto_cognito():
        pytest.skip("moto not installed")
