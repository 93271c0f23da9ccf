from typing import List

from common.decorator.db_decorators import mongo_operation
from common.extensions import get_mongo_db
from common.utils.object_id_utils import to_object_id
from app.models.mongodb import (
    VideoRepository, SubscriptionRepository, LikeRepository, CommentRepository, TweetRepository
)
from app.dto.dashboard import ChannelStatsDto
from app.dto.video import VideoDto


class DashboardService:

    @staticmethod
    @mongo_operation
    def get_channel_stats(user_id: str) -> ChannelStatsDto:
        channel_id = to_object_id(user_id, 'userId')
        db = get_mongo_db()
        video_repo = VideoRepository(db)

        total_videos, total_views = video_repo.owner_stats(channel_id)

        #NOTE: 채널 콘텐츠(영상/댓글/트윗)에 달린 좋아요 합계
        total_likes = LikeRepository(db).count_for_targets(
            video_repo.ids_by_owner(channel_id),
            CommentRepository(db).ids_by_owner(channel_id),
            TweetRepository(db).ids_by_owner(channel_id)
        )

        return ChannelStatsDto(
            total_subscribers=SubscriptionRepository(db).count_subscribers(channel_id),
            total_videos=total_videos,
            total_views=total_views,
            total_likes=total_likes
        )

    @staticmethod
    @mongo_operation
    def get_channel_videos(user_id: str) -> List[VideoDto]:
        docs = VideoRepository(get_mongo_db()).find_by_owner_with_owner(to_object_id(user_id, 'userId'))
        return [VideoDto.from_document(doc) for doc in docs]
