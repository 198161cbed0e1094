# community_posts/models/post.py
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Dict, Any, Union

from community_posts.utils.datetime_utils import DateTimeUtils


@dataclass(frozen=True)
class Post:
    """
    'posts' 테이블의 한 행을 표현하는 데이터클래스.
    id 와 created_at 은 DB 에서 생성되며, 생성 이후 변경되지 않습니다.
    """
    id: Union[int, str]
    community_id: str
    title: str
    content: str
    media_url: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Post":
        """DB 행(dict)으로부터 Post 객체를 생성합니다. 알 수 없는 컬럼은 무시합니다."""
        return cls(
            id=row['id'],
            community_id=row['community_id'],
            title=row['title'],
            content=row['content'],
            media_url=row.get('media_url'),
            created_at=DateTimeUtils.from_db(row.get('created_at')),
        )
