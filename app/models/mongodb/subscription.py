from typing import Dict, List

from bson import ObjectId
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from common.utils import pipeline as stages
from common.utils.logging_utils import get_logger
from .base import MongoRepository, utcnow

logger = get_logger('subscription_repository')


class SubscriptionRepository(MongoRepository):

    COLLECTION_NAME = 'subscriptions'

    def ensure_indexes(self):
        self.collection.create_index([('channel', ASCENDING), ('subscriber', ASCENDING)], unique=True)

    def toggle(self, channel_id: ObjectId, subscriber_id: ObjectId) -> bool:
        query = {'channel': channel_id, 'subscriber': subscriber_id}

        if self.collection.find_one_and_delete(query) is not None:
            logger.info(f"User {subscriber_id} unsubscribed from {channel_id}")
            return False

        now = utcnow()
        try:
            self.collection.update_one(
                query,
                {'$setOnInsert': {'createdAt': now, 'updatedAt': now}},
                upsert=True
            )
        except DuplicateKeyError:
            pass

        logger.info(f"User {subscriber_id} subscribed to {channel_id}")
        return True

    def count_subscribers(self, channel_id: ObjectId) -> int:
        return self.collection.count_documents({'channel': channel_id})

    @staticmethod
    def joined_pipeline(match_stage: Dict) -> List[Dict]:
        return [
            match_stage,
            stages.lookup_user('channel'),
            stages.lookup_user('subscriber'),
            stages.unwind('channel'),
            stages.unwind('subscriber'),
            stages.sort_by('createdAt', -1),
        ]

    def subscribers_of(self, channel_id: ObjectId) -> List[Dict]:
        return self.aggregate(self.joined_pipeline(stages.match(channel=channel_id)))

    def channels_of(self, subscriber_id: ObjectId) -> List[Dict]:
        return self.aggregate(self.joined_pipeline(stages.match(subscriber=subscriber_id)))
