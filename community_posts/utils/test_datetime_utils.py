# community_posts/utils/test_datetime_utils.py
"""
시간 관리 유틸리티 기능 테스트

사용법: python -m pytest community_posts/utils/test_datetime_utils.py -v
"""

import pytest
from datetime import datetime, timezone, timedelta
from community_posts.utils.datetime_utils import DateTimeUtils

def test_parse_iso_datetime():
    """ISO 포맷 파싱 테스트"""
    test_cases = [
        "2024-01-15T10:30:00Z",
        "2024-01-15T10:30:00+09:00",
        "2024-01-15T10:30:00.123456Z",
        "2024-01-15T10:30:00",
        "2024-01-15 10:30:00.123",
    ]

    for iso_string in test_cases:
        dt = DateTimeUtils.parse_iso_datetime(iso_string)
        assert isinstance(dt, datetime)
        assert dt.tzinfo == timezone.utc  # UTC로 정규화되어야 함

def test_parse_iso_datetime_converts_offset():
    dt = DateTimeUtils.parse_iso_datetime("2024-01-15T10:30:00+09:00")
    assert dt == datetime(2024, 1, 15, 1, 30, tzinfo=timezone.utc)

def test_to_iso_string():
    assert DateTimeUtils.to_iso_string(datetime(2024, 1, 15, 10, 30)) == "2024-01-15T10:30:00Z"
    kst = timezone(timedelta(hours=9))
    assert DateTimeUtils.to_iso_string(datetime(2024, 1, 15, 19, 30, tzinfo=kst)) == "2024-01-15T10:30:00Z"

def test_from_db():
    """드라이버별 timestamp 표현 변환 테스트"""
    # psycopg2: timezone-aware datetime
    kst = timezone(timedelta(hours=9))
    aware = DateTimeUtils.from_db(datetime(2024, 1, 15, 19, 30, tzinfo=kst))
    assert aware == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

    # timestamp without time zone: naive datetime 은 UTC 로 간주
    naive = DateTimeUtils.from_db(datetime(2024, 1, 15, 10, 30))
    assert naive.tzinfo == timezone.utc

    # SQLite: 문자열
    text_value = DateTimeUtils.from_db("2024-01-15 10:30:00.250")
    assert text_value == datetime(2024, 1, 15, 10, 30, 0, 250000, tzinfo=timezone.utc)

    assert DateTimeUtils.from_db(None) is None

def test_error_handling():
    """오류 처리 테스트"""
    with pytest.raises(ValueError):
        DateTimeUtils.parse_iso_datetime("invalid-date")

    with pytest.raises(ValueError):
        DateTimeUtils.parse_iso_datetime("")

    with pytest.raises(ValueError):
        DateTimeUtils.from_db(12345)
