from typing import Dict, List, Optional

from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument

from common.utils import pipeline as stages
from .base import MongoRepository, utcnow


class PlaylistRepository(MongoRepository):

    COLLECTION_NAME = 'playlists'

    def ensure_indexes(self):
        self.collection.create_index([('owner', ASCENDING)])

    @staticmethod
    def summary_pipeline(match_stage: Dict) -> List[Dict]:
        return [
            match_stage,
            stages.lookup_user('owner'),
            stages.unwind('owner'),
        ]

    @staticmethod
    def detail_pipeline(playlist_id: ObjectId) -> List[Dict]:
        return [
            stages.match(_id=playlist_id),
            stages.lookup_user('owner'),
            stages.lookup('videos', 'videos', as_field='videoDocs', pipeline=[
                stages.lookup_user('owner'),
                stages.unwind('owner'),
            ]),
            stages.unwind('owner'),
        ]

    @staticmethod
    def order_videos(doc: Dict) -> Dict:
        """
        $lookup 결과는 videos 콜렉션 순서로 온다. 재생목록에 저장된 순서로 되돌리고
        삭제된 영상은 뺀다.
        """
        by_id = {video['_id']: video for video in doc.pop('videoDocs', [])}
        doc['videos'] = [by_id[video_id] for video_id in doc.get('videos', []) if video_id in by_id]
        return doc

    def insert_playlist(self, name: str, description: str, owner_id: ObjectId) -> ObjectId:
        return self.insert({'name': name, 'description': description, 'videos': [], 'owner': owner_id})

    def find_summary(self, playlist_id: ObjectId) -> Optional[Dict]:
        docs = self.aggregate(self.summary_pipeline(stages.match(_id=playlist_id)))
        return docs[0] if docs else None

    def find_by_owner(self, owner_id: ObjectId) -> List[Dict]:
        return self.aggregate(
            self.summary_pipeline(stages.match(owner=owner_id)) + [stages.sort_by('createdAt', -1)]
        )

    def find_detail(self, playlist_id: ObjectId) -> Optional[Dict]:
        docs = self.aggregate(self.detail_pipeline(playlist_id))
        return self.order_videos(docs[0]) if docs else None

    def add_video(self, playlist_id: ObjectId, video_id: ObjectId) -> Optional[Dict]:
        return self.collection.find_one_and_update(
            {'_id': playlist_id},
            {'$addToSet': {'videos': video_id}, '$set': {'updatedAt': utcnow()}},
            return_document=ReturnDocument.AFTER
        )

    def remove_video(self, playlist_id: ObjectId, video_id: ObjectId) -> Optional[Dict]:
        return self.collection.find_one_and_update(
            {'_id': playlist_id},
            {'$pull': {'videos': video_id}, '$set': {'updatedAt': utcnow()}},
            return_document=ReturnDocument.AFTER
        )

    def pull_video_everywhere(self, video_id: ObjectId) -> int:
        return self.collection.update_many(
            {'videos': video_id},
            {'$pull': {'videos': video_id}}
        ).modified_count
