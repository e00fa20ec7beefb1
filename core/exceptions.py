"""
core/exceptions.py - 통합 예외 계층 구조

cmdlet 실행 전체에서 사용되는 예외 클래스들을 정의합니다.
일관된 예외 처리와 에러 메시지를 제공합니다.

예외 계층 구조:
    CmdletError (베이스)
    ├── ConfigurationError (호출 전 검증 실패 - 네트워크 호출 없음)
    │   ├── MissingParameterError
    │   ├── InvalidParameterValueError
    │   ├── UnknownParameterError
    │   └── InvalidSelectError
    ├── OperationCancelledError (확인 프롬프트 거절)
    ├── CmdletNotFoundError (레지스트리 조회 실패)
    └── NameResolutionError (엔드포인트 이름 해석 실패)

Usage:
    from core.exceptions import ConfigurationError, NameResolutionError

    try:
        output = adapter.invoke(client, {"Name": "Fleet-A"})
    except ConfigurationError as e:
        print(e)  # 호출 전에 실패
    except NameResolutionError as e:
        print(e.__cause__)  # 원본 botocore 예외
"""

from typing import Any, Dict, List, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class CmdletError(Exception):
    """cmdlet 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 구성(호출 전 검증) 관련 예외
# =============================================================================


class ConfigurationError(CmdletError):
    """호출 구성 오류

    네트워크 호출 전에 발견되는 모든 오류의 베이스입니다.
    """

    def __init__(
        self,
        cmdlet: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"구성 오류 [{cmdlet}]: {message}"
        super().__init__(full_message, cause)
        self.cmdlet = cmdlet
        self.details["cmdlet"] = cmdlet


class MissingParameterError(ConfigurationError):
    """필수 파라미터 누락"""

    def __init__(self, cmdlet: str, parameter: str):
        super().__init__(cmdlet, f"필수 파라미터 '{parameter}' 값이 없습니다")
        self.parameter = parameter
        self.details["parameter"] = parameter


class InvalidParameterValueError(ConfigurationError):
    """파라미터 값 타입 변환 실패"""

    def __init__(
        self,
        cmdlet: str,
        parameter: str,
        value: Any,
        expected: str,
        cause: Optional[Exception] = None,
    ):
        super().__init__(
            cmdlet,
            f"파라미터 '{parameter}' 값이 올바르지 않습니다: 예상 '{expected}', 실제 '{value}'",
            cause,
        )
        self.parameter = parameter
        self.value = value
        self.expected = expected
        self.details.update(
            {
                "parameter": parameter,
                "value": str(value),
                "expected": expected,
            }
        )


class UnknownParameterError(ConfigurationError):
    """선언되지 않은 파라미터 또는 중복 바인딩"""

    def __init__(self, cmdlet: str, parameter: str, reason: str = "알 수 없는 파라미터"):
        super().__init__(cmdlet, f"{reason}: '{parameter}'")
        self.parameter = parameter
        self.details["parameter"] = parameter


class InvalidSelectError(ConfigurationError):
    """응답 선택자(select) 표현식 오류"""

    def __init__(self, cmdlet: str, expression: Any, reason: str):
        super().__init__(cmdlet, f"잘못된 select 값 '{expression}': {reason}")
        self.expression = expression
        self.details["expression"] = str(expression)


# =============================================================================
# 실행 흐름 관련 예외
# =============================================================================


class OperationCancelledError(CmdletError):
    """사용자가 확인 프롬프트를 거절한 경우"""

    def __init__(self, cmdlet: str):
        super().__init__(f"작업이 취소되었습니다 [{cmdlet}]")
        self.cmdlet = cmdlet
        self.details["cmdlet"] = cmdlet


class CmdletNotFoundError(CmdletError):
    """등록되지 않은 cmdlet 이름"""

    def __init__(self, name: str, suggestions: Optional[List[str]] = None):
        message = f"cmdlet을 찾을 수 없습니다: {name}"
        super().__init__(message)
        self.name = name
        self.suggestions = suggestions or []
        self.details["suggestions"] = self.suggestions


# =============================================================================
# 전송 계층 예외
# =============================================================================


class NameResolutionError(CmdletError):
    """서비스 엔드포인트 이름 해석 실패

    botocore EndpointConnectionError를 래핑하여 리전/엔드포인트 점검을
    안내하는 메시지를 제공합니다. 원본 예외는 cause와 __cause__로 보존됩니다.
    """

    def __init__(
        self,
        service: str,
        operation: str,
        region: Optional[str],
        endpoint_url: Optional[str],
        cause: Optional[Exception] = None,
    ):
        message = format_name_resolution_failure_message(service, region, endpoint_url)
        super().__init__(message, cause)
        self.service = service
        self.operation = operation
        self.region = region
        self.endpoint_url = endpoint_url
        self.details.update(
            {
                "service": service,
                "operation": operation,
                "region": region,
                "endpoint_url": endpoint_url,
            }
        )


def format_name_resolution_failure_message(
    service: str,
    region: Optional[str],
    endpoint_url: Optional[str],
) -> str:
    """이름 해석 실패 시 안내 메시지 생성

    Args:
        service: AWS 서비스 이름
        region: 클라이언트 리전
        endpoint_url: 클라이언트 엔드포인트 URL

    Returns:
        조치 방법이 포함된 메시지
    """
    target = endpoint_url or "(알 수 없는 엔드포인트)"
    region_text = region or "(미지정)"
    return (
        f"{service} 엔드포인트 {target} 이름 해석에 실패했습니다. "
        f"리전 '{region_text}'이(가) 올바른지(--region 또는 프로파일 기본값), "
        f"해당 리전에서 서비스가 지원되는지, 네트워크/DNS 설정을 확인하세요"
    )


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================


def _error_code(error: Exception) -> str:
    if hasattr(error, "response"):
        return error.response.get("Error", {}).get("Code", "")
    return ""


def is_access_denied(error: Exception) -> bool:
    """액세스 거부 오류인지 확인

    Args:
        error: 확인할 예외

    Returns:
        액세스 거부 오류이면 True
    """
    return _error_code(error) in (
        "AccessDenied",
        "AccessDeniedException",
        "UnauthorizedAccess",
    )


def is_throttling(error: Exception) -> bool:
    """스로틀링 오류인지 확인"""
    throttling_codes = {
        "Throttling",
        "ThrottlingException",
        "RequestLimitExceeded",
        "TooManyRequestsException",
        "RateExceeded",
    }
    return _error_code(error) in throttling_codes


def is_not_found(error: Exception) -> bool:
    """리소스를 찾을 수 없는 오류인지 확인"""
    not_found_codes = {
        "ResourceNotFoundException",
        "NotFoundException",
        "NoSuchEntity",
        "NoSuchStreamingDistribution",
        "UserPoolNotFoundException",
    }
    return _error_code(error) in not_found_codes


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    if isinstance(error, CmdletError):
        # 커스텀 예외는 이미 포맷팅됨
        return str(error)

    # boto3 ClientError
    if hasattr(error, "response"):
        error_info = error.response.get("Error", {})
        code = error_info.get("Code", "UnknownError")
        message = error_info.get("Message", str(error))

        if is_access_denied(error):
            return "권한이 없습니다. IAM 정책을 확인하세요."
        if is_throttling(error):
            return "요청이 너무 많습니다. 잠시 후 다시 시도하세요."
        if is_not_found(error):
            return f"{code}: {message} (리소스 ID와 --region을 확인하세요)"

        credential_messages = {
            "ExpiredToken": "인증 토큰이 만료되었습니다. 다시 로그인하세요.",
            "InvalidClientTokenId": "잘못된 자격 증명입니다.",
        }
        return credential_messages.get(code, f"{code}: {message}")

    return str(error)
