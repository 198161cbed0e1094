# community_posts/core/exceptions.py
"""
API 요청 처리 중 발생하는 예외 정의.

모든 예외는 고정된 HTTP 상태 코드와 error_code 를 가지며,
community_posts/__init__ 의 전역 에러 핸들러에서 JSON 응답으로 변환됩니다.
"""
from typing import Any, Dict, Optional


class ApiError(Exception):
    """클라이언트에 JSON 으로 전달되는 예외의 기본 클래스."""
    status_code = 500
    error_code = "INTERNAL_SERVER_ERROR"
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"error_code": self.error_code, "message": self.message}


class ValidationError(ApiError):
    """필수 입력값이 없거나 비어 있는 경우."""
    status_code = 400
    error_code = "VALIDATION_ERROR"
    default_message = "Missing required fields"


class MalformedInputError(ApiError):
    """요청 본문을 JSON 으로 파싱할 수 없는 경우."""
    status_code = 400
    error_code = "MALFORMED_INPUT"
    default_message = "Invalid JSON body"


class StoreError(ApiError):
    """
    데이터베이스 작업 실패.
    원인은 서버 로그에만 남기고, 응답 메시지는 항상 일반 메시지로 고정합니다.
    """
    status_code = 500
    error_code = "INTERNAL_SERVER_ERROR"
    default_message = "Internal server error"

    def to_dict(self) -> Dict[str, Any]:
        return {"error_code": self.error_code, "message": self.default_message}
