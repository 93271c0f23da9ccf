from functools import wraps

from bson.errors import InvalidId
from pymongo.errors import PyMongoError

from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.utils.logging_utils import get_logger

logger = get_logger('db_decorators')


def mongo_operation(func):
    """
    서비스 메서드를 감싸 datastore 예외를 BusinessError로 정규화한다.
    BusinessError는 그대로 전달된다.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)

        except BusinessError:
            raise

        except InvalidId as e:
            raise BusinessError(APIError.INVALID_ID) from e

        except PyMongoError as e:
            logger.error(f"{func.__qualname__} failed: {e}")
            raise BusinessError(APIError.DB_ERROR) from e

    return wrapper
