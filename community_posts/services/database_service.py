# community_posts/services/database_service.py
import logging
from typing import Any, Dict, List, Optional

from flask import Flask
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, URL, make_url
from sqlalchemy.exc import SQLAlchemyError

from community_posts.core.exceptions import StoreError

logger = logging.getLogger(__name__)


def build_database_url(config) -> URL:
    """설정값으로부터 SQLAlchemy 접속 URL 을 만듭니다. DATABASE_URL 이 있으면 그것을 우선합니다."""
    database_url = config.get('DATABASE_URL')
    if database_url:
        return make_url(database_url)

    if not config.get('PG_DATABASE'):
        raise ValueError("PG_DATABASE 또는 DATABASE_URL 설정이 .env 또는 설정 파일에 필요합니다.")

    return URL.create(
        "postgresql+psycopg2",
        username=config.get('PG_USER'),
        password=config.get('PG_PASSWORD'),
        host=config.get('PG_HOST'),
        port=config.get('PG_PORT'),
        database=config.get('PG_DATABASE'),
    )


def build_connect_args(url: URL, config) -> Dict[str, Any]:
    """
    드라이버에 전달할 접속 옵션을 만듭니다.

    PostgreSQL 접속은 항상 TLS 로 암호화합니다.
    - PG_SSL_VERIFY=True  -> sslmode=verify-full (서버 인증서와 호스트명 검증)
    - PG_SSL_VERIFY=False -> sslmode=require (암호화만, 인증서 검증 생략)
    """
    if url.get_backend_name() != 'postgresql':
        return {}

    connect_args: Dict[str, Any] = {
        'connect_timeout': config.get('PG_CONNECT_TIMEOUT', 10),
    }
    if config.get('PG_SSL_VERIFY', True):
        connect_args['sslmode'] = 'verify-full'
        if config.get('PG_SSL_ROOT_CERT'):
            connect_args['sslrootcert'] = config['PG_SSL_ROOT_CERT']
    else:
        connect_args['sslmode'] = 'require'
    return connect_args


class DatabaseService:
    """
    관계형 DB 접근을 담당하는 범용 서비스 클래스입니다.
    크기가 제한된 커넥션 풀을 보유하고, 단일 SQL 문 실행 기능을 제공합니다.
    """

    def __init__(self):
        """실제 엔진 객체는 init_app 메서드를 통해 주입됩니다."""
        self.engine: Optional[Engine] = None

    def init_app(self, app: Flask):
        """
        Flask 앱 초기화 과정에서 호출되어 엔진(커넥션 풀)을 생성합니다.
        엔진 생성 시점에는 실제 접속을 시도하지 않습니다.

        :param app: Flask 애플리케이션 객체
        """
        url = build_database_url(app.config)
        connect_args = build_connect_args(url, app.config)

        if connect_args.get('sslmode') == 'require':
            logger.warning("DatabaseService: PG_SSL_VERIFY=false - 서버 인증서 검증 없이 TLS 접속합니다.")

        self.engine = create_engine(
            url,
            connect_args=connect_args,
            pool_size=app.config.get('DB_POOL_SIZE', 5),
            max_overflow=app.config.get('DB_MAX_OVERFLOW', 0),
            pool_timeout=app.config.get('DB_POOL_TIMEOUT', 30),
            pool_pre_ping=True,
        )
        logger.info(f"DatabaseService: 커넥션 풀이 초기화되었습니다. (backend: {url.get_backend_name()})")

    def execute(self, statement: str, params: Optional[Dict[str, Any]] = None,
                commit: bool = False, operation: str = "executing statement") -> List[Dict[str, Any]]:
        """
        풀에서 커넥션 하나를 꺼내 SQL 문 하나를 실행하고 결과 행을 dict 리스트로 반환합니다.
        커넥션은 성공/실패와 관계없이 항상 풀로 반환됩니다.

        :param statement: 이름 있는 바인드 파라미터(:name)를 사용하는 SQL 문
        :param params: 바인드 파라미터 값
        :param commit: True 이면 결과를 읽은 뒤 커밋합니다. (INSERT 등)
        :param operation: 실패 시 로그에 남길 작업 설명
        :raises StoreError: 접속 또는 실행 중 DB 오류가 발생한 경우
        """
        if self.engine is None:
            raise RuntimeError("DatabaseService가 초기화되지 않았습니다. init_app을 먼저 호출해주세요.")

        try:
            with self.engine.connect() as connection:
                result = connection.execute(text(statement), params or {})
                rows = [dict(row._mapping) for row in result] if result.returns_rows else []
                if commit:
                    connection.commit()
                return rows
        except SQLAlchemyError as e:
            logger.error(f"Error {operation}: {e}", exc_info=True)
            raise StoreError() from e

    def dispose(self):
        """풀에 남아 있는 커넥션을 모두 닫습니다."""
        if self.engine is not None:
            self.engine.dispose()
