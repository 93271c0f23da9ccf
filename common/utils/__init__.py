"""
Utils package
유틸리티 함수들을 모아둔 패키지

- jwt_utils: JWT 토큰 생성 및 검증
- pipeline: MongoDB aggregation 스테이지 빌더
- storage_utils: Cloudinary 업로드/삭제
- media_utils: 영상 길이 추출
- upload_utils: 업로드 파일 임시 저장
"""

from common.utils.jwt_utils import (
    decode_token,
    create_access_token
)

__all__ = [
    'decode_token',
    'create_access_token'
]
