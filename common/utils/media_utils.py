import cv2

from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError


def get_video_duration(local_path: str) -> float:
    """영상 길이(초). frame 수 / fps 로 계산"""
    capture = cv2.VideoCapture(local_path)
    try:
        if not capture.isOpened():
            raise BusinessError(APIError.MEDIA_PROBE_FAIL)

        fps = capture.get(cv2.CAP_PROP_FPS)
        frame_count = capture.get(cv2.CAP_PROP_FRAME_COUNT)

        if not fps or fps <= 0 or frame_count < 0:
            raise BusinessError(APIError.MEDIA_PROBE_FAIL)

        return round(frame_count / fps, 2)
    finally:
        capture.release()
