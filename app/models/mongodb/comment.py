from typing import Dict, List, Optional

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING

from common.utils import pipeline as stages
from .base import MongoRepository


class CommentRepository(MongoRepository):

    COLLECTION_NAME = 'comments'

    def ensure_indexes(self):
        self.collection.create_index([('video', ASCENDING), ('createdAt', DESCENDING)])

    @staticmethod
    def joined_pipeline(match_stage: Dict) -> List[Dict]:
        return [
            match_stage,
            stages.lookup_user('owner', fields=('fullName', 'avatar', 'email')),
            stages.lookup('videos', 'video', pipeline=[stages.project_fields(*stages.VIDEO_SUMMARY_FIELDS)]),
            stages.unwind('owner'),
            stages.unwind('video'),
        ]

    @classmethod
    def video_page_pipeline(cls, video_id: ObjectId, page: int, limit: int) -> List[Dict]:
        return cls.joined_pipeline(stages.match(video=video_id)) + [
            stages.sort_by('createdAt', -1),
            stages.paginate(page, limit),
        ]

    def insert_comment(self, content: str, video_id: ObjectId, owner_id: ObjectId) -> ObjectId:
        return self.insert({'content': content, 'video': video_id, 'owner': owner_id})

    def find_joined(self, comment_id: ObjectId) -> Optional[Dict]:
        docs = self.aggregate(self.joined_pipeline(stages.match(_id=comment_id)))
        return docs[0] if docs else None

    def ids_by_video(self, video_id: ObjectId) -> List[ObjectId]:
        return [doc['_id'] for doc in self.collection.find({'video': video_id}, {'_id': 1})]

    def delete_by_video(self, video_id: ObjectId) -> int:
        return self.collection.delete_many({'video': video_id}).deleted_count
