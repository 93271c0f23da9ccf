from typing import Dict, List, Optional

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING

from common.utils import pipeline as stages
from .base import MongoRepository


class TweetRepository(MongoRepository):

    COLLECTION_NAME = 'tweets'

    def ensure_indexes(self):
        self.collection.create_index([('owner', ASCENDING), ('createdAt', DESCENDING)])

    @staticmethod
    def joined_pipeline(match_stage: Dict) -> List[Dict]:
        return [
            match_stage,
            stages.lookup_user('owner'),
            stages.unwind('owner'),
        ]

    def insert_tweet(self, content: str, owner_id: ObjectId) -> ObjectId:
        return self.insert({'content': content, 'owner': owner_id})

    def find_joined(self, tweet_id: ObjectId) -> Optional[Dict]:
        docs = self.aggregate(self.joined_pipeline(stages.match(_id=tweet_id)))
        return docs[0] if docs else None

    def find_by_owner_joined(self, owner_id: ObjectId) -> List[Dict]:
        return self.aggregate(
            self.joined_pipeline(stages.match(owner=owner_id)) + [stages.sort_by('createdAt', -1)]
        )
