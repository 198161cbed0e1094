# community_posts/utils/datetime_utils.py
"""
프로젝트 전체에서 일관된 시간 처리를 위한 유틸리티 모듈

이 모듈의 목적:
1. 데이터베이스 드라이버마다 다른 timestamp 표현을 UTC datetime 으로 통일
2. API 응답용 ISO 포맷 생성 통일
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional
from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)


class DateTimeUtils:
    """시간 처리를 위한 중앙화된 유틸리티 클래스"""

    @staticmethod
    def parse_iso_datetime(iso_string: str) -> datetime:
        """
        ISO 포맷 문자열을 datetime 객체로 파싱

        지원 포맷:
        - 2024-01-15T10:30:00Z
        - 2024-01-15T10:30:00+09:00
        - 2024-01-15 10:30:00.123 (SQLite CURRENT_TIMESTAMP 계열)
        """
        try:
            if not iso_string:
                raise ValueError("빈 문자열은 파싱할 수 없습니다")

            if iso_string.endswith('Z'):
                iso_string = iso_string[:-1] + '+00:00'

            # isoparse 는 날짜/시간 구분자로 'T' 외의 한 글자(공백 등)도 허용합니다.
            dt = dateutil_parser.isoparse(iso_string)

            # timezone-naive인 경우 UTC로 가정
            if dt.tzinfo is None:
                dt = dt.replace(tzinfo=timezone.utc)

            return dt.astimezone(timezone.utc)

        except Exception as e:
            logger.error(f"ISO datetime 파싱 실패: {iso_string} - {e}")
            raise ValueError(f"잘못된 ISO 날짜 형식입니다: {iso_string}")

    @staticmethod
    def to_iso_string(dt: datetime) -> str:
        """datetime 객체를 ISO 포맷 문자열로 변환 (UTC, Z 접미사)"""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        else:
            dt = dt.astimezone(timezone.utc)
        return dt.isoformat().replace('+00:00', 'Z')

    @staticmethod
    def from_db(value: Any, field_name: str = "created_at") -> Optional[datetime]:
        """
        DB 에서 읽은 timestamp 값을 UTC timezone-aware datetime 으로 변환

        - psycopg2 는 datetime 객체를, SQLite 는 문자열을 돌려줍니다.
        - None 은 그대로 None 으로 반환합니다.

        Raises:
            ValueError: 문자열/datetime 이 아니거나 파싱할 수 없는 경우
        """
        if value is None:
            return None

        if isinstance(value, datetime):
            if value.tzinfo is None:
                # timestamp without time zone 컬럼은 DB 서버 TimeZone 이 UTC 라고 가정합니다.
                return value.replace(tzinfo=timezone.utc)
            return value.astimezone(timezone.utc)

        if isinstance(value, str):
            return DateTimeUtils.parse_iso_datetime(value)

        logger.error(f"{field_name} 변환 실패: {value!r} ({type(value)})")
        raise ValueError(f"{field_name}은 문자열 또는 datetime 객체여야 합니다")
