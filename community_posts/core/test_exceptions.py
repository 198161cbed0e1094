# community_posts/core/test_exceptions.py
from community_posts.core.exceptions import ApiError, ValidationError, MalformedInputError, StoreError


def test_default_messages():
    """메시지를 생략하면 클래스별 기본 메시지를 사용"""
    assert ApiError().message == "Internal server error"
    assert ValidationError().to_dict() == {"error_code": "VALIDATION_ERROR", "message": "Missing required fields"}
    assert MalformedInputError(None).message == "Invalid JSON body"

def test_custom_message():
    err = ValidationError("Community ID is required")
    assert err.status_code == 400
    assert str(err) == "Community ID is required"

def test_store_error_never_exposes_detail():
    err = StoreError("connection refused by db.internal:5432")
    assert err.status_code == 500
    assert err.to_dict() == {"error_code": "INTERNAL_SERVER_ERROR", "message": "Internal server error"}
