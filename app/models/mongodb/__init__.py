"""
MongoDB Collections Models
MongoDB 콜렉션별 레포지토리
"""

from .user import UserRepository
from .video import Video, VideoRepository
from .comment import CommentRepository
from .like import LikeRepository, LIKE_TARGETS
from .tweet import TweetRepository
from .playlist import PlaylistRepository
from .subscription import SubscriptionRepository

__all__ = [
    'UserRepository',
    'Video',
    'VideoRepository',
    'CommentRepository',
    'LikeRepository',
    'LIKE_TARGETS',
    'TweetRepository',
    'PlaylistRepository',
    'SubscriptionRepository'
]
