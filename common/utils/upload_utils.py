import os
import uuid

from flask import current_app
from werkzeug.utils import secure_filename


def save_upload(file_storage, upload_folder=None):
    """업로드 파일을 임시 폴더에 저장하고 경로를 반환. 파일이 없으면 None"""
    if file_storage is None or not file_storage.filename:
        return None

    folder = upload_folder or current_app.config['UPLOAD_FOLDER']
    os.makedirs(folder, exist_ok=True)

    filename = f"{uuid.uuid4().hex}_{secure_filename(file_storage.filename)}"
    path = os.path.join(folder, filename)
    file_storage.save(path)
    return path


def discard_upload(*paths):
    """업로드 처리 후 남아 있는 임시 파일 정리"""
    for path in paths:
        if path and os.path.exists(path):
            os.remove(path)
