from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, ReturnDocument

from common.utils import pipeline as stages
from .base import MongoRepository, utcnow



@dataclass
class Video:
    video_file: str
    thumbnail: str
    title: str
    description: str
    duration: float
    owner: ObjectId
    views: int = 0
    is_published: bool = True
    created_at: datetime = field(default_factory=utcnow)
    updated_at: Optional[datetime] = None

    def to_dict(self) -> Dict:
        return {
            'videoFile': self.video_file,
            'thumbnail': self.thumbnail,
            'title': self.title,
            'description': self.description,
            'duration': self.duration,
            'views': self.views,
            'isPublished': self.is_published,
            'owner': self.owner,
            'createdAt': self.created_at,
            'updatedAt': self.updated_at or self.created_at
        }


class VideoRepository(MongoRepository):

    COLLECTION_NAME = 'videos'

    def ensure_indexes(self):
        self.collection.create_index([('owner', ASCENDING), ('createdAt', DESCENDING)])

    @staticmethod
    def with_owner(match_stage: Dict) -> List[Dict]:
        return [
            match_stage,
            stages.lookup_user('owner', fields=stages.CHANNEL_OWNER_FIELDS),
            stages.unwind('owner'),
        ]

    @staticmethod
    def search_pipeline(owner_id: ObjectId, query: Optional[str], sort_field: str,
                        sort_direction: int, page: int, limit: int) -> List[Dict]:
        conditions = {'owner': owner_id}
        pattern = stages.escape_regex(query)
        if pattern:
            conditions['$or'] = [
                {'title': {'$regex': pattern, '$options': 'i'}},
                {'description': {'$regex': pattern, '$options': 'i'}},
            ]

        return [
            stages.match(**conditions),
            stages.lookup_user('owner', fields=stages.CHANNEL_OWNER_FIELDS),
            stages.unwind('owner'),
            stages.sort_by(sort_field, sort_direction),
            stages.paginate(page, limit),
        ]

    def insert_video(self, video: Video) -> ObjectId:
        return self.insert(video.to_dict())

    def find_with_owner(self, video_id: ObjectId) -> Optional[Dict]:
        docs = self.aggregate(self.with_owner(stages.match(_id=video_id)))
        return docs[0] if docs else None

    def find_by_owner_with_owner(self, owner_id: ObjectId) -> List[Dict]:
        return self.aggregate(
            self.with_owner(stages.match(owner=owner_id)) + [stages.sort_by('createdAt', -1)]
        )

    def toggle_publish(self, video_id: ObjectId) -> Optional[Dict]:
        #NOTE: 파이프라인 업데이트로 서버에서 한번에 반전
        return self.collection.find_one_and_update(
            {'_id': video_id},
            [{'$set': {'isPublished': {'$not': '$isPublished'}, 'updatedAt': '$$NOW'}}],
            projection={'isPublished': 1},
            return_document=ReturnDocument.AFTER
        )

    def owner_stats(self, owner_id: ObjectId) -> Tuple[int, int]:
        result = self.aggregate([
            stages.match(owner=owner_id),
            {'$group': {'_id': '$owner', 'videoCount': {'$sum': 1}, 'viewCount': {'$sum': '$views'}}},
        ])
        if not result:
            return 0, 0
        return result[0]['videoCount'], result[0]['viewCount']
