# community_posts/api/posts/services.py
import logging
from typing import Any, List, Optional

from community_posts.models.post import Post
from community_posts.services.database_service import DatabaseService

logger = logging.getLogger(__name__)

LIST_POSTS_SQL = (
    "SELECT * FROM posts WHERE community_id = :community_id ORDER BY created_at DESC"
)

CREATE_POST_SQL = (
    "INSERT INTO posts (community_id, title, content, media_url) "
    "VALUES (:community_id, :title, :content, :media_url) RETURNING *"
)


class PostService:
    """
    게시글 관련 비즈니스 로직을 담당하는 서비스 클래스.
    각 작업은 DatabaseService.execute 를 통해 SQL 문 하나만 실행합니다.
    DB 오류는 StoreError 로 그대로 전파되며, route 에서 처리하지 않습니다.
    """
    def __init__(self, database_service: DatabaseService):
        self.database = database_service

    def list_posts(self, community_id: str) -> List[Post]:
        """특정 커뮤니티의 게시글 전체를 최신순으로 조회합니다."""
        rows = self.database.execute(
            LIST_POSTS_SQL,
            {"community_id": community_id},
            operation="fetching posts",
        )
        logger.info(f"게시글 목록 조회 성공 (community_id: {community_id}): {len(rows)}개")
        return [Post.from_row(row) for row in rows]

    def create_post(self, community_id: Any, title: Any, content: Any,
                    media_url: Optional[Any] = None) -> Post:
        """새로운 게시글을 저장하고, DB 가 부여한 id 와 created_at 을 포함해 반환합니다."""
        rows = self.database.execute(
            CREATE_POST_SQL,
            {
                "community_id": community_id,
                "title": title,
                "content": content,
                "media_url": media_url,
            },
            commit=True,
            operation="creating post",
        )
        new_post = Post.from_row(rows[0])
        logger.info(f"게시글 생성 성공 (post_id: {new_post.id}, community_id: {community_id})")
        return new_post
