# community_posts/conftest.py
"""
테스트 공용 fixture

실제 Flask 앱과 DatabaseService 를 임시 SQLite 파일에 연결해 사용합니다.
운영 환경의 posts 테이블은 외부에서 관리되므로, 테스트에서 직접 생성합니다.
"""

import pytest
from sqlalchemy import create_engine, text

from community_posts import create_app

POSTS_TABLE_SQL = """
CREATE TABLE posts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    community_id TEXT NOT NULL,
    title TEXT NOT NULL,
    content TEXT NOT NULL,
    media_url TEXT,
    created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%d %H:%M:%f', 'now'))
)
"""


def sqlite_url(path) -> str:
    return f"sqlite:///{path}"


def create_posts_table(url: str):
    """지정한 DB 에 posts 테이블을 생성합니다."""
    engine = create_engine(url)
    try:
        with engine.begin() as connection:
            connection.execute(text(POSTS_TABLE_SQL))
    finally:
        engine.dispose()


def insert_post(url: str, community_id: str, title: str, content: str, created_at: str, media_url=None):
    """created_at 을 직접 지정해 게시글 행을 넣습니다. (정렬 검증용)"""
    engine = create_engine(url)
    try:
        with engine.begin() as connection:
            connection.execute(
                text(
                    "INSERT INTO posts (community_id, title, content, media_url, created_at) "
                    "VALUES (:community_id, :title, :content, :media_url, :created_at)"
                ),
                {
                    "community_id": community_id, "title": title, "content": content,
                    "media_url": media_url, "created_at": created_at,
                },
            )
    finally:
        engine.dispose()


def make_app(url: str, **overrides):
    config = {
        'DATABASE_URL': url,
        'DB_POOL_SIZE': 2,
        'DB_MAX_OVERFLOW': 0,
        'DB_POOL_TIMEOUT': 1,
    }
    config.update(overrides)
    return create_app('testing', config)


@pytest.fixture
def db_url(tmp_path):
    url = sqlite_url(tmp_path / "posts.db")
    create_posts_table(url)
    return url


@pytest.fixture
def app(db_url):
    app = make_app(db_url)
    yield app
    app.services['database'].dispose()


@pytest.fixture
def client(app):
    return app.test_client()
