"""
Services package
비즈니스 로직을 처리하는 서비스 레이어

- video_service: 영상 업로드/조회/수정/삭제
- comment_service, like_service, tweet_service
- playlist_service, subscription_service, dashboard_service
"""

__all__ = []
