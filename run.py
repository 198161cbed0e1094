# run.py
from dotenv import load_dotenv
import os

basedir = os.path.abspath(os.path.dirname(__file__))
# 설정 클래스가 임포트 시점에 환경 변수를 읽으므로, 앱 패키지를 임포트하기 전에 .env 를 로드합니다.
load_dotenv(dotenv_path=os.path.join(basedir, '.env'))

from community_posts import create_app

app = create_app()

if __name__ == '__main__':
    host = os.getenv('FLASK_RUN_HOST', '127.0.0.1')
    port = int(os.getenv('FLASK_RUN_PORT', 5000))
    debug = app.config.get('DEBUG', False)
    app.run(host=host, port=port, debug=debug)
