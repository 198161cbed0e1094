# community_posts/api/posts/schemas.py
import json

from marshmallow import Schema, fields, validate, ValidationError, EXCLUDE, post_load

from community_posts.utils.datetime_utils import DateTimeUtils


def _not_blank(value):
    """빈 문자열, 0, false, 빈 리스트 등 falsy 값을 거부합니다."""
    if not value:
        raise ValidationError("Field may not be empty.")


# --- API 요청 스키마 ---

class PostListQuerySchema(Schema):
    """GET /api/posts 쿼리 파라미터의 유효성을 검사합니다."""
    class Meta:
        unknown = EXCLUDE

    community_id = fields.Str(required=True, data_key='communityId', validate=validate.Length(min=1))


class PostCreateSchema(Schema):
    """
    POST /api/posts 요청 본문의 유효성을 검사합니다.
    필수 필드는 존재 여부와 truthiness 만 확인하며, 타입 변환이나 공백 제거는 하지 않습니다.
    """
    class Meta:
        unknown = EXCLUDE

    community_id = fields.Raw(required=True, data_key='communityId', validate=_not_blank)
    title = fields.Raw(required=True, validate=_not_blank)
    content = fields.Raw(required=True, validate=_not_blank)
    media_url = fields.Raw(load_default=None, allow_none=True, data_key='mediaUrl')

    @post_load
    def stringify_structured_values(self, data, **kwargs):
        # 객체/배열 값은 드라이버가 바인딩할 수 없으므로 JSON 문자열로 저장합니다.
        return {
            key: json.dumps(value, ensure_ascii=False) if isinstance(value, (dict, list)) else value
            for key, value in data.items()
        }


# --- API 응답 스키마 ---

class PostResponseSchema(Schema):
    """게시글 정보 응답을 위한 최종 JSON 형식을 정의합니다."""
    id = fields.Raw(dump_only=True)
    community_id = fields.Raw(data_key='communityId')
    title = fields.Str()
    content = fields.Str()
    media_url = fields.Raw(data_key='mediaUrl', allow_none=True)
    created_at = fields.Method('dump_created_at', data_key='createdAt')

    def dump_created_at(self, post):
        """created_at 을 UTC ISO 문자열(Z 접미사)로 변환합니다."""
        if post.created_at is None:
            return None
        return DateTimeUtils.to_iso_string(post.created_at)
