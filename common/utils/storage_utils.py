import os
import re
from urllib.parse import urlparse

import cloudinary
import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError

from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.utils.logging_utils import get_logger

logger = get_logger('storage_utils')

_VERSION_SEGMENT = re.compile(r'v\d+')


def init_storage(app):
    cloudinary.config(
        cloud_name=app.config.get('CLOUDINARY_CLOUD_NAME'),
        api_key=app.config.get('CLOUDINARY_API_KEY'),
        api_secret=app.config.get('CLOUDINARY_API_SECRET'),
        secure=True
    )


def _remove_local_file(local_path):
    try:
        os.remove(local_path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Could not remove staged file {local_path}: {e}")


def upload_file(local_path: str, resource_type: str = 'auto') -> str:
    """
    로컬 파일을 Cloudinary에 올리고 secure URL을 반환한다.
    업로드 성공 여부와 관계없이 임시 파일은 삭제된다.
    """
    if not local_path:
        raise BusinessError(APIError.MISSING_FILE)

    try:
        result = cloudinary.uploader.upload(local_path, resource_type=resource_type)
    except CloudinaryError as e:
        logger.error(f"Cloudinary upload failed for {local_path}: {e}")
        raise BusinessError(APIError.STORAGE_UPLOAD_FAIL) from e
    finally:
        _remove_local_file(local_path)

    url = result.get('secure_url') or result.get('url')
    if not url:
        raise BusinessError(APIError.STORAGE_UPLOAD_FAIL)

    logger.info(f"Uploaded asset {result.get('public_id')} ({resource_type})")
    return url


def extract_public_id(url: str) -> str:
    # https://res.cloudinary.com/<cloud>/<type>/upload/[v123/]<folder>/<name>.<ext>
    path = urlparse(url or '').path
    _, sep, tail = path.partition('/upload/')
    if not sep or not tail:
        raise BusinessError(APIError.STORAGE_DELETE_FAIL, f"Unrecognised storage URL: {url}")

    parts = [p for p in tail.split('/') if p]
    if parts and _VERSION_SEGMENT.fullmatch(parts[0]):
        parts = parts[1:]
    if not parts:
        raise BusinessError(APIError.STORAGE_DELETE_FAIL, f"Unrecognised storage URL: {url}")

    return os.path.splitext('/'.join(parts))[0]


def delete_file(url: str, resource_type: str = 'image'):
    public_id = extract_public_id(url)

    try:
        result = cloudinary.uploader.destroy(public_id, resource_type=resource_type)
    except CloudinaryError as e:
        logger.error(f"Cloudinary delete failed for {public_id}: {e}")
        raise BusinessError(APIError.STORAGE_DELETE_FAIL) from e

    outcome = result.get('result')
    if outcome == 'not found':
        #NOTE: 이미 없는 자산은 삭제된 것으로 간주
        logger.warning(f"Asset {public_id} was already missing from storage")
        return
    if outcome != 'ok':
        logger.error(f"Cloudinary refused to delete {public_id}: {result}")
        raise BusinessError(APIError.STORAGE_DELETE_FAIL)

    logger.info(f"Deleted asset {public_id} ({resource_type})")
