from typing import List

from common.decorator.db_decorators import mongo_operation
from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.extensions import get_mongo_db
from common.utils.object_id_utils import to_object_id
from app.models.mongodb import LikeRepository, VideoRepository, CommentRepository, TweetRepository
from app.dto.like import ToggleLikeDto, LikedVideoDto

# 좋아요 대상별 (레포지토리, 없을 때 에러)
_TARGETS = {
    'video': (VideoRepository, APIError.VIDEO_NOT_FOUND),
    'comment': (CommentRepository, APIError.COMMENT_NOT_FOUND),
    'tweet': (TweetRepository, APIError.TWEET_NOT_FOUND),
}


class LikeService:

    @staticmethod
    @mongo_operation
    def toggle_like(target_type: str, target_id: str, user_id: str) -> ToggleLikeDto:
        repo_class, not_found = _TARGETS[target_type]
        target_oid = to_object_id(target_id, f'{target_type}Id')
        db = get_mongo_db()

        if not repo_class(db).exists(target_oid):
            raise BusinessError(not_found)

        is_liked = LikeRepository(db).toggle(target_type, target_oid, to_object_id(user_id, 'userId'))

        return ToggleLikeDto(target_id=target_id, target_type=target_type, is_liked=is_liked)

    @staticmethod
    def toggle_video_like(video_id: str, user_id: str) -> ToggleLikeDto:
        return LikeService.toggle_like('video', video_id, user_id)

    @staticmethod
    def toggle_comment_like(comment_id: str, user_id: str) -> ToggleLikeDto:
        return LikeService.toggle_like('comment', comment_id, user_id)

    @staticmethod
    def toggle_tweet_like(tweet_id: str, user_id: str) -> ToggleLikeDto:
        return LikeService.toggle_like('tweet', tweet_id, user_id)

    @staticmethod
    @mongo_operation
    def get_liked_videos(user_id: str) -> List[LikedVideoDto]:
        docs = LikeRepository(get_mongo_db()).liked_videos(to_object_id(user_id, 'userId'))
        return [LikedVideoDto.from_document(doc) for doc in docs]
