import os
from dotenv import load_dotenv

# .env 파일 로드
load_dotenv()

from app import create_app

config_name = os.getenv('FLASK_ENV', 'development')

app = create_app(config_name)

if __name__ == '__main__':
    # 프로덕션 환경에서는 WSGI 서버(gunicorn 등) 사용 권장
    app.run(
        host='0.0.0.0',
        port=int(os.getenv('PORT', 8000)),
        debug=(config_name == 'development')
    )
