from functools import wraps
from flask import request, g

from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.utils import decode_token
import common.extensions as extensions

def _read_bearer_token():
    auth_header = request.headers.get('Authorization')

    if not auth_header or not auth_header.startswith("Bearer "):
        raise BusinessError(APIError.AUTH_INVALID_TOKEN)

    return auth_header.split(" ", 1)[1].strip()

def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = _read_bearer_token()

        redis_client = extensions.redis_client
        if redis_client and redis_client.exists(f"vidtube:blacklist:{token}"):
            raise BusinessError(APIError.AUTH_INVALID_TOKEN)

        payload = decode_token(token)

        if payload.get('type') != 'access' or not payload.get('sub'):
            raise BusinessError(APIError.AUTH_INVALID_TOKEN)

        g.user_id = payload['sub']

        return f(*args, **kwargs)
    return decorated_function
