# community_posts/core/config.py

import os # 환경 변수를 읽기 위해 사용합니다.


def _env_bool(key: str, default: bool) -> bool:
    """'true', '1', 'yes' 등의 환경 변수 문자열을 bool 값으로 변환합니다."""
    value = os.getenv(key)
    if value is None or value.strip() == '':
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # PostgreSQL 접속 정보. .env 파일 또는 배포 환경의 환경 변수에서 읽어옵니다.
    PG_HOST = os.getenv('PG_HOST', 'localhost')
    PG_PORT = int(os.getenv('PG_PORT', 5432))
    PG_DATABASE = os.getenv('PG_DATABASE')
    PG_USER = os.getenv('PG_USER')
    PG_PASSWORD = os.getenv('PG_PASSWORD')

    # 전송 구간 암호화는 항상 사용합니다.
    # PG_SSL_VERIFY=false 로 명시한 경우에만 서버 인증서 검증을 생략합니다.
    PG_SSL_VERIFY = _env_bool('PG_SSL_VERIFY', True)
    PG_SSL_ROOT_CERT = os.getenv('PG_SSL_ROOT_CERT')
    PG_CONNECT_TIMEOUT = int(os.getenv('PG_CONNECT_TIMEOUT', 10))

    # 전체 SQLAlchemy URL. 지정하면 위의 PG_* 값보다 우선합니다.
    DATABASE_URL = os.getenv('DATABASE_URL')

    # 커넥션 풀 크기 설정
    DB_POOL_SIZE = int(os.getenv('DB_POOL_SIZE', 5))
    DB_MAX_OVERFLOW = int(os.getenv('DB_MAX_OVERFLOW', 0))
    DB_POOL_TIMEOUT = int(os.getenv('DB_POOL_TIMEOUT', 30))


class DevelopmentConfig(Config):
    """개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True


class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다."""
    TESTING = True
    DEBUG = False


class ProductionConfig(Config):
    """운영 환경을 위한 설정 클래스입니다."""
    DEBUG = False


# FLASK_ENV 값에 따라 create_app 함수에서 설정 클래스를 선택하는 데 사용됩니다.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
