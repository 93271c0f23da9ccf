"""
VidTube Application
Flask 기반 영상 공유 플랫폼 백엔드
"""

import logging
from urllib.parse import quote_plus

from flask import Flask
from flask_cors import CORS
from pymongo import MongoClient
import redis
import sentry_sdk
from sentry_sdk.integrations.flask import FlaskIntegration
from sentry_sdk.integrations.redis import RedisIntegration

from common.extensions import api
import common.extensions as extensions
from common.utils.logging_utils import setup_logger
from common.utils.storage_utils import init_storage


def _connect_mongo(app, logger):
    mongo_host = app.config.get('MONGO_HOST', 'localhost')
    mongo_port = app.config.get('MONGO_PORT', 27017)
    mongo_username = app.config.get('MONGO_USERNAME')
    mongo_password = app.config.get('MONGO_PASSWORD')

    if mongo_username and mongo_password:
        mongo_uri = f"mongodb://{quote_plus(mongo_username)}:{quote_plus(mongo_password)}@{mongo_host}:{mongo_port}/"
    else:
        mongo_uri = f"mongodb://{mongo_host}:{mongo_port}/"

    logger.info(f"MongoDB 연결 시도: {mongo_host}:{mongo_port}")

    try:
        mongo_connection = MongoClient(
            mongo_uri,
            serverSelectionTimeoutMS=5000,
            connectTimeoutMS=5000
        )
        mongo_connection.admin.command('ping')
        logger.info(f"MongoDB 연결 성공: {mongo_host}:{mongo_port}")
        return mongo_connection

    except Exception as e:
        logger.error(f"MongoDB 연결 실패: {e}")
        logger.error(f"MongoDB URI (마스킹): mongodb://{mongo_host}:{mongo_port}/")
        raise


def _connect_redis(app, logger):
    try:
        if app.config.get('REDIS_URL'):
            logger.info("Redis 연결 시도: REDIS_URL 사용")
            client = redis.from_url(
                app.config['REDIS_URL'],
                decode_responses=True,
                socket_connect_timeout=5
            )
        else:
            redis_password = app.config.get('REDIS_PASSWORD') or None
            client = redis.Redis(
                host=app.config.get('REDIS_HOST', 'localhost'),
                port=app.config.get('REDIS_PORT', 6379),
                db=app.config.get('REDIS_DB', 0),
                password=redis_password,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5
            )

        client.ping()
        logger.info("Redis 연결 성공")
        return client

    except redis.AuthenticationError as e:
        logger.warning(f"Redis 인증 실패: {e}")
    except redis.ConnectionError as e:
        logger.warning(f"Redis 연결 실패: {e}")

    logger.warning("Redis 기능(토큰 블랙리스트)이 비활성화됩니다")
    return None


def create_app(config_name='default', mongo_client=None):
    """
    Application Factory Pattern

    mongo_client 를 넘기면 접속/ping 없이 그대로 사용한다 (테스트용).
    """
    app = Flask(__name__)

    from common.config.config import config
    config_class = config.get(config_name, config['default'])
    app.config.from_object(config_class)

    app.json.ensure_ascii = False

    if app.config.get('SENTRY_DSN'):
        sentry_sdk.init(
            dsn=app.config['SENTRY_DSN'],
            integrations=[
                FlaskIntegration(),
                RedisIntegration(),
            ],
            environment=app.config.get('SENTRY_ENVIRONMENT', 'development'),
            traces_sample_rate=app.config.get('SENTRY_TRACES_SAMPLE_RATE', 1.0),
            send_default_pii=False,
            attach_stacktrace=True,
        )

    log_level = getattr(logging, app.config.get('LOG_LEVEL', 'INFO'))
    logger = setup_logger(app, log_level, log_dir=app.config.get('LOG_DIR'))

    if not app.config.get('MONGO_DB_NAME'):
        raise RuntimeError("MongoDB 환경변수 누락: ['MONGO_DB_NAME']")

    app.config['API_TITLE'] = 'VidTube API'
    app.config['API_VERSION'] = 'v1'
    app.config['OPENAPI_VERSION'] = '3.0.3'
    app.config['OPENAPI_URL_PREFIX'] = '/'
    app.config['OPENAPI_SWAGGER_UI_PATH'] = '/swagger'
    app.config['OPENAPI_SWAGGER_UI_URL'] = 'https://cdn.jsdelivr.net/npm/swagger-ui-dist/'

    # JWT Bearer 토큰 인증을 위한 보안 스킴 설정
    app.config['API_SPEC_OPTIONS'] = {
        'components': {
            'securitySchemes': {
                'BearerAuth': {
                    'type': 'http',
                    'scheme': 'bearer',
                    'bearerFormat': 'JWT',
                    'description': '인증 서비스에서 발급한 액세스 토큰 (Bearer 접두어 없이)'
                }
            }
        }
    }

    CORS(app,
         supports_credentials=True,
         origins=app.config.get('CORS_ORIGINS', []),
         allow_headers=["Content-Type", "Authorization", "Accept", "X-Requested-With"],
         expose_headers=["Authorization", "Content-Type"],
         methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
         max_age=3600)

    api.init_app(app)

    if mongo_client is None:
        mongo_client = _connect_mongo(app, logger)

    extensions.mongo_client = mongo_client
    extensions.mongo_db = mongo_client[app.config['MONGO_DB_NAME']]
    app.mongo = extensions.mongo_db

    if app.config.get('TESTING'):
        extensions.redis_client = None
    else:
        extensions.redis_client = _connect_redis(app, logger)

    init_storage(app)

    from app.routes import (
        video_blueprint, comment_blueprint, like_blueprint, tweet_blueprint,
        playlist_blueprint, subscription_blueprint, dashboard_blueprint
    )

    api.register_blueprint(video_blueprint)
    api.register_blueprint(comment_blueprint)
    api.register_blueprint(like_blueprint)
    api.register_blueprint(tweet_blueprint)
    api.register_blueprint(playlist_blueprint)
    api.register_blueprint(subscription_blueprint)
    api.register_blueprint(dashboard_blueprint)

    from common.exception.error_handler import register_error_handlers
    register_error_handlers(app)

    @app.route('/health')
    def health_check():
        return {
            'status': 'healthy',
            'service': 'vidtube'
        }, 200

    return app
