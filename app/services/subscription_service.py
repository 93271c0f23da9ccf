from typing import List

from common.decorator.db_decorators import mongo_operation
from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.extensions import get_mongo_db
from common.utils.object_id_utils import to_object_id
from app.models.mongodb import SubscriptionRepository, UserRepository
from app.dto.subscription import SubscriptionDto, ToggleSubscriptionDto


class SubscriptionService:

    @staticmethod
    @mongo_operation
    def toggle_subscription(channel_id: str, user_id: str) -> ToggleSubscriptionDto:
        channel_oid = to_object_id(channel_id, 'channelId')
        db = get_mongo_db()

        if not UserRepository(db).exists(channel_oid):
            raise BusinessError(APIError.USER_NOT_FOUND, "Channel does not exist")

        is_subscribed = SubscriptionRepository(db).toggle(channel_oid, to_object_id(user_id, 'userId'))

        return ToggleSubscriptionDto(channel_id=channel_id, is_subscribed=is_subscribed)

    @staticmethod
    @mongo_operation
    def get_channel_subscribers(channel_id: str) -> List[SubscriptionDto]:
        docs = SubscriptionRepository(get_mongo_db()).subscribers_of(to_object_id(channel_id, 'channelId'))
        return [SubscriptionDto.from_document(doc) for doc in docs]

    @staticmethod
    @mongo_operation
    def get_subscribed_channels(subscriber_id: str) -> List[SubscriptionDto]:
        docs = SubscriptionRepository(get_mongo_db()).channels_of(to_object_id(subscriber_id, 'subscriberId'))
        return [SubscriptionDto.from_document(doc) for doc in docs]
