"""
tests/cli/test_app.py - CLI 명령어 테스트

click CliRunner로 list/describe/search 유틸리티와 cmdlet 실행을 테스트합니다.
boto3 session/client 생성은 모킹합니다.
"""

import json
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from cli.app import VERSION, cli
from cli.command import _collect_arguments, build_cmdlet_command, to_option_name
from cmdlets.osis import NEW_OSIS_PIPELINE


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def aws_client():
    """create_session/get_client 모킹

    Yields:
        (mock_create_session, mock_get_client, client)
    """
    client = MagicMock()
    client.meta.region_name = "us-east-1"
    client.meta.endpoint_url = "https://example.us-east-1.amazonaws.com"
    with (
        patch("core.client.create_session") as mock_create_session,
        patch("core.client.get_client", return_value=client) as mock_get_client,
    ):
        yield mock_create_session, mock_get_client, client


# =============================================================================
# 유틸리티 명령어
# =============================================================================


class TestVersionAndHelp:
    """버전/도움말"""

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "awc" in result.output
        assert VERSION in result.output

    def test_help_groups_by_service(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "유틸리티" in result.output
        assert "Amazon OpenSearch Ingestion" in result.output
        assert "New-OSISPipeline" in result.output

    def test_cmdlet_help_lists_options(self, runner):
        result = runner.invoke(cli, ["--lang", "en", "Get-CGIPUserPool", "--help"])
        assert result.exit_code == 0
        assert "--user-pool-id" in result.output
        assert "[required]" in result.output
        assert "--pass-thru" in result.output


class TestListCommand:
    """awc list"""

    def test_list_table(self, runner):
        result = runner.invoke(cli, ["list"])
        assert result.exit_code == 0

    def test_list_json(self, runner):
        result = runner.invoke(cli, ["list", "--json"])
        assert result.exit_code == 0

        data = json.loads(result.stdout)
        assert len(data) == 9
        osis = next(item for item in data if item["name"] == "New-OSISPipeline")
        assert osis == {
            "name": "New-OSISPipeline",
            "service": "osis",
            "operation": "CreatePipeline",
            "confirm_impact": "medium",
            "description": NEW_OSIS_PIPELINE.description,
        }

    def test_list_by_service_alias(self, runner):
        result = runner.invoke(cli, ["list", "-s", "cf", "--json"])
        assert result.exit_code == 0
        assert [item["name"] for item in json.loads(result.stdout)] == ["Remove-CFStreamingDistribution"]

    def test_list_unknown_service(self, runner):
        result = runner.invoke(cli, ["--lang", "en", "list", "-s", "ec2"])
        assert result.exit_code == 1
        assert "Service 'ec2' not found." in result.output


class TestDescribeCommand:
    """awc describe"""

    def test_describe_json(self, runner):
        result = runner.invoke(cli, ["describe", "new-osispipeline", "--json"])
        assert result.exit_code == 0

        data = json.loads(result.stdout)
        assert data["name"] == "New-OSISPipeline"
        assert data["default_select"] == "Pipeline"
        assert data["pass_thru"] == "PipelineName"
        params = {p["name"]: p for p in data["parameters"]}
        assert params["PipelineName"]["position"] == 0
        assert params["MinUnit"]["aliases"] == ["MinUnits"]
        assert params["CloudWatchLogDestination_LogGroup"]["request_path"] == (
            "LogPublishingOptions.CloudWatchLogDestination.LogGroup"
        )
        assert params["PipelineName"]["from_pipeline"] is True
        assert params["MinUnit"]["from_pipeline"] is False
        assert set(data["request_groups"]) == {
            "LogPublishingOptions",
            "LogPublishingOptions.CloudWatchLogDestination",
            "VpcOptions",
        }
        assert data["request_groups"]["LogPublishingOptions.CloudWatchLogDestination"] == [
            "CloudWatchLogDestination_LogGroup"
        ]

    def test_describe_json_without_groups(self, runner):
        result = runner.invoke(cli, ["describe", "Remove-CFStreamingDistribution", "--json"])
        data = json.loads(result.stdout)
        assert data["request_groups"] == {}
        assert data["default_select"] == "*"

    def test_describe_table_shows_pipeline_and_groups(self, runner):
        result = runner.invoke(cli, ["--lang", "en", "describe", "New-OSISPipeline"])
        assert result.exit_code == 0
        assert "Pipeline input: PipelineName" in result.output
        assert "Request groups: LogPublishingOptions" in result.output

    def test_describe_table(self, runner):
        result = runner.invoke(cli, ["describe", "Get-CGIPUserPool"])
        assert result.exit_code == 0
        assert "Get-CGIPUserPool" in result.output

    def test_describe_unknown_with_suggestion(self, runner):
        result = runner.invoke(cli, ["describe", "New-OSISPipelin"])
        assert result.exit_code == 1
        assert "New-OSISPipeline" in result.output


class TestSearchCommand:
    """awc search"""

    def test_search_json(self, runner):
        result = runner.invoke(cli, ["search", "pipeline", "--json"])
        assert result.exit_code == 0

        data = json.loads(result.stdout)
        assert data[0]["name"] == "New-OSISPipeline"

    def test_search_service_filter(self, runner):
        result = runner.invoke(cli, ["search", "cognito:", "--json"])
        assert result.exit_code == 0
        assert [item["name"] for item in json.loads(result.stdout)] == ["Get-CGIPUserPool"]

    def test_search_no_results(self, runner):
        result = runner.invoke(cli, ["--lang", "en", "search", "zzzzqqqq"])
        assert result.exit_code == 0
        assert "No cmdlets match 'zzzzqqqq'." in result.output


# =============================================================================
# cmdlet 실행
# =============================================================================


class TestRunCmdlet:
    """awc <Verb-Noun>"""

    def test_positional_and_json_output(self, runner, aws_client):
        mock_create_session, mock_get_client, client = aws_client
        client.describe_user_pool.return_value = {"UserPool": {"Id": "us-east-1_ABC", "Name": "pool"}}

        result = runner.invoke(cli, ["Get-CGIPUserPool", "us-east-1_ABC", "-r", "us-east-1", "-f", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"Id": "us-east-1_ABC", "Name": "pool"}
        mock_create_session.assert_called_once_with(profile=None, region="us-east-1")
        mock_get_client.assert_called_once_with(mock_create_session.return_value, "cognito-idp")
        client.describe_user_pool.assert_called_once_with(UserPoolId="us-east-1_ABC")

    def test_case_insensitive_name(self, runner, aws_client):
        _, _, client = aws_client
        client.describe_user_pool.return_value = {"UserPool": {"Id": "p1"}}

        result = runner.invoke(cli, ["get-cgipuserpool", "--user-pool-id", "p1", "-f", "json"])

        assert result.exit_code == 0
        client.describe_user_pool.assert_called_once_with(UserPoolId="p1")

    def test_profile_and_endpoint_url(self, runner, aws_client):
        mock_create_session, mock_get_client, client = aws_client
        client.describe_user_pool.return_value = {"UserPool": {"Id": "p1"}}

        result = runner.invoke(
            cli,
            ["Get-CGIPUserPool", "p1", "-p", "dev", "--endpoint-url", "http://localhost:4566"],
        )

        assert result.exit_code == 0
        mock_create_session.assert_called_once_with(profile="dev", region=None)
        mock_get_client.assert_called_once_with(
            mock_create_session.return_value, "cognito-idp", endpoint_url="http://localhost:4566"
        )

    def test_nested_list_and_boolean_options(self, runner, aws_client):
        _, _, client = aws_client
        client.create_pipeline.return_value = {"Pipeline": {"PipelineName": "logs"}}

        result = runner.invoke(
            cli,
            [
                "New-OSISPipeline",
                "logs",
                "--min-units",
                "1",
                "--max-unit",
                "4",
                "--pipeline-configuration-body",
                "version: '2'",
                "--vpc-options-subnet-id",
                "subnet-1",
                "--vpc-options-subnet-id",
                "subnet-2",
                "--log-publishing-options-is-logging-enabled",
                "true",
                "--force",
                "-s",
                "^PipelineName",
            ],
        )

        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "logs"
        client.create_pipeline.assert_called_once_with(
            PipelineName="logs",
            MinUnits=1,
            MaxUnits=4,
            PipelineConfigurationBody="version: '2'",
            LogPublishingOptions={"IsLoggingEnabled": True},
            VpcOptions={"SubnetIds": ["subnet-1", "subnet-2"]},
        )

    def test_missing_required_fails_before_call(self, runner, aws_client):
        _, _, client = aws_client

        result = runner.invoke(cli, ["New-OSISPipeline", "logs", "--force"])

        assert result.exit_code == 1
        assert "MinUnit" in result.output
        client.create_pipeline.assert_not_called()

    def test_invalid_value_fails_before_call(self, runner, aws_client):
        _, _, client = aws_client

        result = runner.invoke(cli, ["Get-CGSScanList", "--max-result", "many"])

        assert result.exit_code == 1
        client.list_scans.assert_not_called()

    def test_declined_confirmation(self, runner, aws_client):
        """HIGH 영향도 작업은 --force 없이 확인 프롬프트 (거절 시 종료 코드 1)"""
        _, _, client = aws_client

        with patch("questionary.confirm") as mock_confirm:
            mock_confirm.return_value.ask.return_value = False
            result = runner.invoke(cli, ["Remove-CFStreamingDistribution", "EDFDVBD6EXAMPLE", "E2QWRUHEXAMPLE"])

        assert result.exit_code == 1
        mock_confirm.assert_called_once()
        client.delete_streaming_distribution.assert_not_called()

    def test_force_skips_confirmation(self, runner, aws_client):
        _, _, client = aws_client
        client.delete_streaming_distribution.return_value = {"ResponseMetadata": {"HTTPStatusCode": 204}}

        with patch("questionary.confirm") as mock_confirm:
            result = runner.invoke(
                cli, ["Remove-CFStreamingDistribution", "EDFDVBD6EXAMPLE", "E2QWRUHEXAMPLE", "--force", "-f", "json"]
            )

        assert result.exit_code == 0
        # 삭제 cmdlet의 기본 출력은 서비스 응답 전체
        assert json.loads(result.stdout) == {"ResponseMetadata": {"HTTPStatusCode": 204}}
        mock_confirm.assert_not_called()
        client.delete_streaming_distribution.assert_called_once_with(Id="EDFDVBD6EXAMPLE", IfMatch="E2QWRUHEXAMPLE")

    def test_client_error_exit_code(self, runner, aws_client):
        from botocore.exceptions import ClientError

        _, _, client = aws_client
        client.describe_user_pool.side_effect = ClientError(
            {"Error": {"Code": "ResourceNotFoundException", "Message": "User pool p1 does not exist."}},
            "DescribeUserPool",
        )

        result = runner.invoke(cli, ["Get-CGIPUserPool", "p1"])

        assert result.exit_code == 1
        assert "ResourceNotFoundException" in result.output

    def test_name_resolution_error_exit_code(self, runner, aws_client):
        from botocore.exceptions import EndpointConnectionError

        _, _, client = aws_client
        client.describe_user_pool.side_effect = EndpointConnectionError(endpoint_url="https://x.example")

        result = runner.invoke(cli, ["Get-CGIPUserPool", "p1"])

        assert result.exit_code == 1
        assert "--region" in result.output

    def test_unknown_command_suggests(self, runner):
        result = runner.invoke(cli, ["--lang", "en", "New-OSISPipelin"])
        assert result.exit_code == 2
        assert "Did you mean New-OSISPipeline" in result.output

    def test_unknown_command_suggests_in_default_lang(self, runner):
        """--lang 없이는 기본 언어(ko) 메시지"""
        result = runner.invoke(cli, ["New-OSISPipelin"])
        assert result.exit_code == 2
        assert "혹시 New-OSISPipeline" in result.output


class TestPipelineInput:
    """'-' 값은 표준 입력의 줄마다 한 번씩 실행"""

    def test_positional_pipeline_input(self, runner, aws_client):
        _, _, client = aws_client
        client.describe_user_pool.side_effect = lambda UserPoolId: {"UserPool": {"Id": UserPoolId}}

        result = runner.invoke(cli, ["Get-CGIPUserPool", "-", "-f", "json"], input="p1\n\n p2 \n")

        assert result.exit_code == 0
        assert [c.kwargs for c in client.describe_user_pool.call_args_list] == [
            {"UserPoolId": "p1"},
            {"UserPoolId": "p2"},
        ]
        assert '"Id": "p1"' in result.stdout
        assert '"Id": "p2"' in result.stdout

    def test_named_pipeline_input(self, runner, aws_client):
        _, _, client = aws_client
        client.describe_user_pool.return_value = {"UserPool": {}}

        result = runner.invoke(cli, ["Get-CGIPUserPool", "--user-pool-id", "-"], input="p1\np2\n")

        assert result.exit_code == 0
        assert client.describe_user_pool.call_count == 2

    def test_pipeline_slot_after_named_parameter(self, runner, aws_client):
        """이름으로 지정한 위치 파라미터는 건너뛰고 남은 순서대로 매칭"""
        _, _, client = aws_client
        client.delete_streaming_distribution.return_value = {}

        result = runner.invoke(
            cli,
            ["Remove-CFStreamingDistribution", "--if-match", "ETAG", "-", "--force"],
            input="D1\nD2\n",
        )

        assert result.exit_code == 0
        assert [c.kwargs for c in client.delete_streaming_distribution.call_args_list] == [
            {"Id": "D1", "IfMatch": "ETAG"},
            {"Id": "D2", "IfMatch": "ETAG"},
        ]

    def test_dash_for_non_pipeline_parameter_is_literal(self, runner, aws_client):
        _, _, client = aws_client
        client.delete_streaming_distribution.return_value = {}

        result = runner.invoke(cli, ["Remove-CFStreamingDistribution", "D1", "-", "--force"], input="ignored\n")

        assert result.exit_code == 0
        client.delete_streaming_distribution.assert_called_once_with(Id="D1", IfMatch="-")

    def test_empty_stdin(self, runner, aws_client):
        _, _, client = aws_client

        result = runner.invoke(cli, ["--lang", "en", "Get-CGIPUserPool", "-"], input="\n")

        assert result.exit_code == 1
        assert "No input on stdin for 'UserPoolId'" in result.output
        client.describe_user_pool.assert_not_called()

    def test_failed_record_does_not_stop_remaining(self, runner, aws_client):
        from botocore.exceptions import ClientError

        _, _, client = aws_client
        client.describe_user_pool.side_effect = [
            ClientError({"Error": {"Code": "ResourceNotFoundException", "Message": "missing"}}, "DescribeUserPool"),
            {"UserPool": {"Id": "p2"}},
        ]

        result = runner.invoke(cli, ["Get-CGIPUserPool", "-", "-f", "json"], input="p1\np2\n")

        assert result.exit_code == 1
        assert client.describe_user_pool.call_count == 2
        assert '"Id": "p2"' in result.stdout

    def test_interrupt_stops_remaining(self, runner, aws_client):
        _, _, client = aws_client
        client.describe_user_pool.side_effect = KeyboardInterrupt

        result = runner.invoke(cli, ["Get-CGIPUserPool", "-"], input="p1\np2\n")

        assert result.exit_code == 130
        client.describe_user_pool.assert_called_once()


# =============================================================================
# 옵션 변환 헬퍼
# =============================================================================


class TestOptionHelpers:
    """파라미터 이름 → 옵션 변환"""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("MinUnit", "min-unit"),
            ("PipelineName", "pipeline-name"),
            ("VpcOptions_SubnetId", "vpc-options-subnet-id"),
            ("OpenIDConnectConfig_IatTTL", "open-id-connect-config-iat-ttl"),
            ("UserPoolId", "user-pool-id"),
        ],
    )
    def test_to_option_name(self, name, expected):
        assert to_option_name(name) == expected

    def test_collect_arguments(self):
        params = {
            "p_pipeline_name": "logs",
            "p_min_unit": None,
            "p_vpc_options_subnet_id": ("subnet-1", "subnet-2"),
            "p_vpc_options_security_group_id": ("sg-1",),
            "p_tag": (),
        }
        assert _collect_arguments(NEW_OSIS_PIPELINE, params) == {
            "PipelineName": "logs",
            "VpcOptions_SubnetId": ["subnet-1", "subnet-2"],
            "VpcOptions_SecurityGroupId": "sg-1",
        }

    def test_build_command_without_positional(self):
        from cmdlets.codeguru_security import GET_CGS_SCAN_LIST

        command = build_cmdlet_command(GET_CGS_SCAN_LIST)
        assert command.name == "Get-CGSScanList"
        assert "args" not in {p.name for p in command.params}
        assert {"max_result", "profile", "force"} <= {p.name.removeprefix("p_") for p in command.params}
