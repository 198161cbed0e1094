# community_posts/api/posts/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError as SchemaValidationError
from werkzeug.exceptions import BadRequest

from community_posts.api.posts.schemas import PostListQuerySchema, PostCreateSchema, PostResponseSchema
from community_posts.core.exceptions import ValidationError, MalformedInputError

logger = logging.getLogger(__name__)

posts_bp = Blueprint('posts_bp', __name__)


@posts_bp.route('', methods=['GET'])
@posts_bp.route('/', methods=['GET'])
def get_posts():
    """
    특정 커뮤니티의 게시글 목록을 최신순으로 조회합니다.
    - 쿼리 파라미터 communityId 는 필수입니다.
    - 게시글이 없는 커뮤니티는 빈 배열과 200 을 반환합니다.
    """
    post_service = current_app.services['posts']
    try:
        params = PostListQuerySchema().load(request.args)
    except SchemaValidationError:
        raise ValidationError("Community ID is required")

    posts = post_service.list_posts(params['community_id'])
    return jsonify(PostResponseSchema(many=True).dump(posts)), 200


@posts_bp.route('', methods=['POST'])
@posts_bp.route('/', methods=['POST'])
def create_post():
    """
    새로운 게시글을 생성합니다.
    - 본문은 Content-Type 과 관계없이 JSON 으로 파싱합니다.
    - 성공 시, 생성된 게시글 정보를 201 Created 상태 코드와 함께 반환합니다.
    """
    post_service = current_app.services['posts']
    try:
        body = request.get_json(force=True)
    except BadRequest as e:
        logger.warning(f"Error parsing JSON: {e}")
        raise MalformedInputError()

    try:
        data = PostCreateSchema().load(body)
    except SchemaValidationError as err:
        logger.info(f"게시글 생성 요청 검증 실패: {err.messages}")
        raise ValidationError("Missing required fields")

    new_post = post_service.create_post(
        data['community_id'], data['title'], data['content'], data['media_url']
    )
    return jsonify(PostResponseSchema().dump(new_post)), 201
