from typing import Dict, List

from bson import ObjectId
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from common.utils import pipeline as stages
from common.utils.logging_utils import get_logger
from .base import MongoRepository, utcnow

logger = get_logger('like_repository')

LIKE_TARGETS = ('video', 'comment', 'tweet')


class LikeRepository(MongoRepository):
    """
    like 문서는 video/comment/tweet 중 정확히 하나만 가리킨다.
    나머지 대상 필드는 None 으로 저장해 (likedBy, video, comment, tweet) 유니크 인덱스가 동작하게 한다.
    """

    COLLECTION_NAME = 'likes'

    def ensure_indexes(self):
        self.collection.create_index(
            [('likedBy', ASCENDING), ('video', ASCENDING), ('comment', ASCENDING), ('tweet', ASCENDING)],
            unique=True
        )

    @staticmethod
    def target_filter(target_type: str, target_id: ObjectId, liked_by: ObjectId) -> Dict:
        if target_type not in LIKE_TARGETS:
            raise ValueError(f"Invalid like target: {target_type}")

        query = {'likedBy': liked_by}
        for target in LIKE_TARGETS:
            query[target] = target_id if target == target_type else None
        return query

    def toggle(self, target_type: str, target_id: ObjectId, liked_by: ObjectId) -> bool:
        """
        좋아요가 있으면 지우고, 없으면 만든다. 반환값은 토글 후 좋아요 상태.
        """
        query = self.target_filter(target_type, target_id, liked_by)

        if self.collection.find_one_and_delete(query) is not None:
            logger.info(f"User {liked_by} unliked {target_type} {target_id}")
            return False

        now = utcnow()
        try:
            self.collection.update_one(
                query,
                {'$setOnInsert': {'createdAt': now, 'updatedAt': now}},
                upsert=True
            )
        except DuplicateKeyError:
            #NOTE: 동시 요청이 먼저 같은 좋아요를 만든 경우
            pass

        logger.info(f"User {liked_by} liked {target_type} {target_id}")
        return True

    @staticmethod
    def liked_videos_pipeline(liked_by: ObjectId) -> List[Dict]:
        return [
            stages.match(likedBy=liked_by, video={'$ne': None}),
            stages.lookup('videos', 'video', pipeline=[
                stages.lookup_user('owner', fields=stages.CHANNEL_OWNER_FIELDS),
                stages.unwind('owner'),
            ]),
            stages.unwind('video'),
            stages.sort_by('createdAt', -1),
        ]

    def liked_videos(self, liked_by: ObjectId) -> List[Dict]:
        return self.aggregate(self.liked_videos_pipeline(liked_by))

    def delete_for_target(self, target_type: str, target_ids: List[ObjectId]) -> int:
        if not target_ids:
            return 0
        return self.collection.delete_many({target_type: {'$in': target_ids}}).deleted_count

    def count_for_targets(self, video_ids: List[ObjectId], comment_ids: List[ObjectId],
                          tweet_ids: List[ObjectId]) -> int:
        conditions = [
            {target: {'$in': ids}}
            for target, ids in (('video', video_ids), ('comment', comment_ids), ('tweet', tweet_ids))
            if ids
        ]
        if not conditions:
            return 0
        return self.collection.count_documents({'$or': conditions})
