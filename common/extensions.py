from flask import current_app, has_app_context
from flask_smorest import Api

api = Api()

redis_client = None

mongo_client = None
mongo_db = None


def get_mongo_db():
    #NOTE: 앱 컨텍스트가 있으면 앱에 바인딩된 DB를 우선 사용
    if has_app_context() and getattr(current_app, 'mongo', None) is not None:
        return current_app.mongo
    return mongo_db
