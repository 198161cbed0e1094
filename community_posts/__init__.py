# community_posts/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import logging
from typing import Any, Dict, Optional
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

# - 설정 및 예외
from community_posts.core.config import config_by_name
from community_posts.core.exceptions import ApiError, StoreError

# - API 블루프린트
from community_posts.api.posts.routes import posts_bp

# - 서비스 모듈
from community_posts.services.database_service import DatabaseService
from community_posts.api.posts.services import PostService


def create_app(config_name: Optional[str] = None, config_overrides: Optional[Dict[str, Any]] = None):
    """
    Flask 애플리케이션 팩토리 함수.

    :param config_name: 'development' / 'testing' / 'production'. 없으면 FLASK_ENV 를 사용합니다.
    :param config_overrides: 설정 클래스 값을 덮어쓸 딕셔너리 (테스트용)
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')
    if config_name not in config_by_name:
        raise ValueError(f"알 수 없는 설정 이름입니다: {config_name}")

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    if config_overrides:
        app.config.update(config_overrides)
    app.json.ensure_ascii = False
    app.json.sort_keys = False

    # =====================================================================================
    # 4. 로깅 설정
    # =====================================================================================
    if not app.debug:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    # =====================================================================================
    # 5. 서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    app.services = {}

    try:
        database_instance = DatabaseService()
        database_instance.init_app(app)
        app.services['database'] = database_instance
    except Exception as e:
        logging.error(f"Failed to initialize database service: {e}")
        raise

    app.services['posts'] = PostService(database_service=app.services['database'])

    # =====================================================================================
    # 6. 블루프린트 등록
    # =====================================================================================
    app.register_blueprint(posts_bp, url_prefix='/api/posts')

    # =====================================================================================
    # 7. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(ApiError)
    def handle_api_error(err):
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        # 404, 405 등 라우팅 단계의 오류는 원래 상태 코드를 유지합니다.
        if err.code is None or err.code < 400:
            return err
        response = {"error_code": err.name.upper().replace(' ', '_'), "message": err.description}
        return jsonify(response), err.code

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # 다른 핸들러에서 처리되지 않은 모든 예외를 여기서 처리
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        return jsonify(StoreError().to_dict()), 500

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
