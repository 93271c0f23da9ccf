from flask import jsonify
from werkzeug.exceptions import HTTPException
from pymongo.errors import PyMongoError

from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.utils.logging_utils import get_logger

logger = get_logger('error_handler')


def _error_body(status, message, code, errors=None):
    body = {
        "statusCode": status,
        "message": message,
        "success": False,
        "code": code
    }
    if errors:
        body["errors"] = errors
    return body


def register_error_handlers(app):
    @app.errorhandler(BusinessError)
    def handle_business_error(e):
        return jsonify(e.to_dict()), e.status

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        #NOTE: webargs 검증 실패는 422로 올라오므로 400으로 통일
        if e.code == 422:
            messages = getattr(e, 'data', {}).get('messages')
            return jsonify(_error_body(
                APIError.INVALID_INPUT_VALUE.status,
                APIError.INVALID_INPUT_VALUE.message,
                APIError.INVALID_INPUT_VALUE.code,
                errors=messages
            )), APIError.INVALID_INPUT_VALUE.status

        return jsonify(_error_body(e.code, e.description, f"H{e.code}")), e.code

    @app.errorhandler(PyMongoError)
    def handle_db_error(e):
        logger.error(f"Unhandled MongoDB error: {e}")
        return jsonify(_error_body(
            APIError.DB_ERROR.status,
            APIError.DB_ERROR.message,
            APIError.DB_ERROR.code
        )), APIError.DB_ERROR.status

    @app.errorhandler(Exception)
    def handle_internal_error(e):
        logger.exception(f"Unhandled error: {e}")
        return jsonify(_error_body(
            APIError.INTERNAL_SERVER_ERROR.status,
            APIError.INTERNAL_SERVER_ERROR.message,
            APIError.INTERNAL_SERVER_ERROR.code
        )), APIError.INTERNAL_SERVER_ERROR.status
