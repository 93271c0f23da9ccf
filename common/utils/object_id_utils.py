from bson import ObjectId

from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError


def to_object_id(value, field_name='id') -> ObjectId:
    if isinstance(value, ObjectId):
        return value
    if not value:
        raise BusinessError(APIError.INVALID_INPUT_VALUE, f"{field_name} missing")
    if not ObjectId.is_valid(value):
        raise BusinessError(APIError.INVALID_ID, f"{field_name} is not a valid ID")
    return ObjectId(value)
